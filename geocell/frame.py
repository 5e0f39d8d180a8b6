"""
    Batch helpers over numpy arrays and pandas DataFrames.
"""
import logging

import numpy as np
import pandas as pd

from geocell.bits import spread
from geocell.exceptions import InvalidArgument
from geocell.geohash import EARTH, bounding_box, get_precision
from geocell.subhash import (MAX_LNG_PRECISION, MIN_HASH_PRECISION_31, MAX_HASH_PRECISION_30,
                             MAX_HASH_PRECISION_31, LAT_FACTOR, LNG_FACTOR, check_precision)


logger = logging.getLogger(__name__)


def _longitude_precisions(lat_hashes, precision):
    # distance of every row from its nearest pole
    half = 1 << (precision - 1)
    low_mask = half - 1
    low = lat_hashes & low_mask
    rows = np.where((lat_hashes & half) != 0, ~low & low_mask, low)
    return np.where(rows == 0, 2, np.frexp(rows)[1] + 2)


def value_of_array(lats, lngs, precision):
    """
    Vectorized value_of: element-wise identical to it, returns an int64 array.

    Raises
    ------
    InvalidArgument
        if precision is not in [0, 30], a latitude is NaN or a longitude is not finite
    """
    precision = check_precision(precision)
    lats, lngs = np.broadcast_arrays(np.asarray(lats, dtype=np.float64), np.asarray(lngs, dtype=np.float64))
    if np.isnan(lats).any():
        raise InvalidArgument('invalid latitude: NaN')
    if not np.isfinite(lngs).all():
        raise InvalidArgument('invalid longitude: not finite')

    if precision == 0:
        return np.full(lats.shape, EARTH, dtype=np.int64)

    f = ((np.clip(lats, -90.0, 90.0) + 90.0) * LAT_FACTOR).astype(np.int64)
    lat_hashes = np.where(f > MAX_HASH_PRECISION_30, MAX_HASH_PRECISION_31,
                          np.where(f <= 0, MIN_HASH_PRECISION_31, f | MIN_HASH_PRECISION_31))
    lat_hashes = lat_hashes.astype(np.int64) >> (MAX_LNG_PRECISION - precision)

    g = ((lngs + 180.0) * LNG_FACTOR).astype(np.int64)
    shifts = (MAX_LNG_PRECISION - _longitude_precisions(lat_hashes, precision)).astype(np.int64)
    lng_hashes = ((g & MAX_HASH_PRECISION_30) | MIN_HASH_PRECISION_31) >> shifts

    return (spread(lat_hashes) << 1) | spread(lng_hashes)


def encode_frame(df, precision, lat_col='lat', lng_col='lng', column='geohash'):
    """Returns a copy of df with the geohash of every row in `column`."""
    df = df.copy()
    df[column] = value_of_array(df[lat_col].values, df[lng_col].values, precision)
    logger.debug('encoded %s rows at precision %s', len(df), precision)
    return df


def bounding_boxes(codes):
    rows = list()
    for code in codes:
        code = int(code)
        south, west, north, east = bounding_box(code)
        rows.append([code, get_precision(code), south, west, north, east])
    return pd.DataFrame(data=rows, columns=['geohash', 'precision', 'south', 'west', 'north', 'east'])


def cell_counts(df, precision, lat_col='lat', lng_col='lng', column='geohash'):
    """Number of rows of df falling in each geohash, most populated first."""
    encoded = encode_frame(df, precision, lat_col=lat_col, lng_col=lng_col, column=column)
    counts = encoded.groupby(column).size().reset_index(name='count')
    counts = counts.sort_values(['count', column], ascending=[False, True]).reset_index(drop=True)
    logger.debug('%s rows in %s cells', len(df), len(counts))
    return counts
