"""
    Forward and inverse mapping between coordinates and geohash codes.

    A geohash code is a 64 bit integer holding the latitude sub-hash on the odd
    bits and the longitude sub-hash on the even bits. Unlike the conventional
    geohash, the number of longitude bits depends on the latitude row so that
    the ratio of the north-south to the east-west distance (in meters, across
    the center of the cell) is always in [0.5, 1.5). This makes it feasible to
    query regions using geohashes.

    The accessors below do not validate their input: results are undefined for
    codes that fail is_valid.
"""
import numbers

import numpy as np

from geocell.bits import MASK_64, deinterleave, fill_below_highest_set_bit, interleave
from geocell.exceptions import InvalidArgument
from geocell.subhash import (MAX_PRECISION, MIN_HASH_PRECISION_31, MAX_HASH_PRECISION_30,
                             LAT_FACTOR, LNG_FACTOR, cell_count, latitude_sub_hash,
                             longitude_sub_hash, longitude_template, lower_bound,
                             sub_hash_precision)


SMALLEST_SPAN_DEGREES = 360.0 / MIN_HASH_PRECISION_31
ERROR_TOLERANCE = SMALLEST_SPAN_DEGREES / 1000.0

EARTH = 0b11


def value_of(lat, lng, precision):
    """
    Returns the geohash which contains the coordinate at the given precision.
    Precision 0 is the whole earth, precision 30 a span of about 2 centimeters.

    Raises
    ------
    InvalidArgument
        if precision is not in [0, 30] or a coordinate is NaN
    """
    lat_hash = latitude_sub_hash(lat, precision)
    return interleave(lat_hash, longitude_sub_hash(lng, lat_hash))


def is_valid(code):
    if isinstance(code, bool) or not isinstance(code, numbers.Integral):
        return False
    code = int(code)
    if code < 0 or code > MASK_64:
        return False
    lat_hash, lng_hash = deinterleave(code)
    if lat_hash < 1 or lat_hash > MAX_HASH_PRECISION_30:
        return False
    return fill_below_highest_set_bit(lng_hash) == fill_below_highest_set_bit(longitude_template(lat_hash))


def get_precision(code):
    return sub_hash_precision(deinterleave(code)[0])


def southern_latitude(code):
    return lower_bound(deinterleave(code)[0]) / LAT_FACTOR - 90.0


def latitude_span(code):
    return 180.0 / cell_count(deinterleave(code)[0])


def western_longitude(code):
    return lower_bound(deinterleave(code)[1]) / LNG_FACTOR - 180.0


def longitude_span(code):
    return 360.0 / cell_count(deinterleave(code)[1])


def bounding_box(code):
    """
    Returns
    -------
    (south, west, north, east) in degrees
    """
    lat_hash, lng_hash = deinterleave(code)
    south = lower_bound(lat_hash) / LAT_FACTOR - 90.0
    west = lower_bound(lng_hash) / LNG_FACTOR - 180.0
    north = south + 180.0 / cell_count(lat_hash)
    east = west + 360.0 / cell_count(lng_hash)
    return south, west, north, east


def intersects(code, south_lat, west_lng, north_lat, east_lng):
    """
    Returns True if the geohash intersects the region given by its south-west
    and north-east corners. A region whose western longitude is greater than
    its eastern one crosses the antimeridian. Results are undefined for
    longitudes outside [-180, 180].

    Raises
    ------
    InvalidArgument
        if south_lat is greater than north_lat
    """
    if not north_lat >= south_lat:
        raise InvalidArgument('%s > %s' % (south_lat, north_lat))

    slat, wlng, nlat, elng = bounding_box(code)

    if south_lat > nlat or north_lat < slat:
        return False

    if east_lng >= west_lng:
        # either side covering the whole longitude range
        if west_lng == -180 and elng == 180 or wlng == -180 and east_lng == 180:
            return True
        if west_lng > elng or east_lng < wlng:
            return False
    elif west_lng > elng and east_lng < wlng:
        return False

    return True


def to_debug_string(code):
    slat, wlng, nlat, elng = bounding_box(code)
    return '0b{:b}<pre:{} SW:({},{}) NE:({},{})>'.format(
        code, get_precision(code), np.float32(slat), np.float32(wlng), np.float32(nlat), np.float32(elng))
