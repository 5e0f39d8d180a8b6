"""
    Precision encoded sub-hashes.

    A sub-hash is the de-interleaved bit string of one axis: a leading
    sentinel 1 followed by `precision` bits of a 31 bit fixed point fraction of
    the axis range. The position of the sentinel is the precision, so no
    separate length field is stored.
"""
import math
import numbers

from geocell.bits import fill_below_highest_set_bit, highest_bit_position
from geocell.exceptions import InvalidArgument


MAX_PRECISION = 30
MAX_LNG_PRECISION = 31

MIN_HASH_PRECISION_31 = 1 << MAX_LNG_PRECISION
MAX_HASH_PRECISION_30 = MIN_HASH_PRECISION_31 - 1
MAX_HASH_PRECISION_31 = MIN_HASH_PRECISION_31 | MAX_HASH_PRECISION_30

LNG_FACTOR = MIN_HASH_PRECISION_31 / 360.0
LAT_FACTOR = MIN_HASH_PRECISION_31 / 180.0


def check_precision(precision):
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise InvalidArgument('invalid precision: %r' % (precision,))
    if precision < 0 or precision > MAX_PRECISION:
        raise InvalidArgument('invalid precision: %s' % precision)
    return int(precision)


def latitude_sub_hash(lat, precision):
    """
        Quantizes lat into `precision` bits plus the sentinel bit.
        Latitudes beyond the poles saturate to the polar rows.
    """
    precision = check_precision(precision)
    if math.isnan(lat):
        raise InvalidArgument('invalid latitude: %s' % lat)
    f = int((min(max(lat, -90.0), 90.0) + 90.0) * LAT_FACTOR)
    if f > MAX_HASH_PRECISION_30:
        return MAX_HASH_PRECISION_31 >> (MAX_LNG_PRECISION - precision)
    elif f <= 0:
        return MIN_HASH_PRECISION_31 >> (MAX_LNG_PRECISION - precision)
    return (f | MIN_HASH_PRECISION_31) >> (MAX_LNG_PRECISION - precision)


def longitude_pattern(lat_sub_hash, sentinel):
    """
        Folds the latitude row onto its distance from the nearest pole and
        returns a value whose highest set bit is the longitude precision of
        that row. `sentinel` is the sentinel bit of the latitude precision.
    """
    hemisphere = fill_below_highest_set_bit(lat_sub_hash & (sentinel >> 1))
    return ((lat_sub_hash ^ (hemisphere | sentinel)) << 3) | 4


def longitude_template(lat_sub_hash):
    if lat_sub_hash == 1:  # the earth
        return 1
    lat_max = fill_below_highest_set_bit(lat_sub_hash)
    return longitude_pattern(lat_sub_hash, lat_max - (lat_max >> 1))


def longitude_precision(lat_sub_hash):
    """
        Number of longitude bits of the cells in the row of lat_sub_hash.
        0 for the earth, 2 for the polar rows, one more each time the distance
        to the pole doubles.
    """
    return sub_hash_precision(longitude_template(lat_sub_hash))


def longitude_sub_hash(lng, lat_sub_hash):
    """
        Quantizes lng at the precision implied by lat_sub_hash.
        Longitudes wrap around, 180 lands in the same cell as -180.
    """
    if math.isnan(lng) or math.isinf(lng):
        raise InvalidArgument('invalid longitude: %s' % lng)
    f = int((lng + 180.0) * LNG_FACTOR)
    return ((f & MAX_HASH_PRECISION_30) | MIN_HASH_PRECISION_31) >> highest_bit_position(
        longitude_template(lat_sub_hash))


def sub_hash_precision(sub_hash):
    return MAX_LNG_PRECISION - highest_bit_position(sub_hash)


def lower_bound(sub_hash):
    """
        Lower edge of the sub-hash as a 31 bit fixed point fraction of the axis range.
    """
    return (sub_hash << highest_bit_position(sub_hash)) & MAX_HASH_PRECISION_30


def cell_count(sub_hash):
    """
        Number of cells along the axis at the precision of sub_hash.
    """
    return MIN_HASH_PRECISION_31 >> highest_bit_position(sub_hash)
