"""
    Cell algebra: neighbours, parent and children of a geohash computed on the
    bit pattern only.

    Every function returns 0 when there is no such cell. Results are undefined
    for invalid input geohashes.
"""
from geocell.bits import EVEN_BITS, ODD_BITS, compact, fill_below_highest_set_bit, spread
from geocell.geohash import EARTH
from geocell.subhash import longitude_pattern


# latitude sentinel of a precision 30 geohash, once widened
MAX_PRECISION_BIT = 0x2000000000000000

# every geohash up to precision 1 fits in five bits
PRECISION_1_MASK = 0b11111


def _shift_latitude(code, step, east):
    old_lat_hash = compact(code >> 1)
    lat_max = fill_below_highest_set_bit(old_lat_hash)
    lat_min = lat_max - (lat_max >> 1)
    if step > 0 and old_lat_hash == lat_max:  # north pole
        return 0
    if step < 0 and old_lat_hash == lat_min:  # south pole
        return 0

    new_lat_hash = old_lat_hash + step

    new_lng_max = fill_below_highest_set_bit(longitude_pattern(new_lat_hash, lat_min))
    old_lng_max = fill_below_highest_set_bit(longitude_pattern(old_lat_hash, lat_min))

    widened_lat_hash = spread(new_lat_hash) << 1
    widened_lng_hash = code & EVEN_BITS

    if new_lng_max == old_lng_max:
        return widened_lat_hash | widened_lng_hash
    elif new_lng_max == (old_lng_max & new_lng_max):
        # fewer longitude bits in the new row: merge
        return widened_lat_hash | (widened_lng_hash >> 2)
    # more longitude bits in the new row: split, pick one half
    return widened_lat_hash | (widened_lng_hash << 2) | (1 if east else 0)


def shift_north0(code):
    """
    Shifts a geohash one spot to the north. If there are two geohashes in the
    northern spot, returns the western one. Returns 0 at the north pole.
    """
    return _shift_latitude(code, 1, False)


def shift_north1(code):
    """
    Shifts a geohash one spot to the north. If there are two geohashes in the
    northern spot, returns the eastern one. Returns 0 at the north pole.
    """
    return _shift_latitude(code, 1, True)


def shift_south0(code):
    """
    Shifts a geohash one spot to the south. If there are two geohashes in the
    southern spot, returns the western one. Returns 0 at the south pole.
    """
    return _shift_latitude(code, -1, False)


def shift_south1(code):
    """
    Shifts a geohash one spot to the south. If there are two geohashes in the
    southern spot, returns the eastern one. Returns 0 at the south pole.
    """
    return _shift_latitude(code, -1, True)


def shift_east(code):
    """
    Shifts a geohash one spot to the east, wrapping around at 180.
    """
    lng = compact(code)
    lng_max = fill_below_highest_set_bit(lng)
    return code & ODD_BITS | spread((lng + 1) & lng_max | (lng_max - (lng_max >> 1)))


def shift_west(code):
    """
    Shifts a geohash one spot to the west, wrapping around at -180.
    """
    lng = compact(code)
    lng_max = fill_below_highest_set_bit(lng)
    return code & ODD_BITS | spread((lng - 1) | (lng_max - (lng_max >> 1)))


def _is_polar(widened_lat_hash):
    # all ones (north pole row) or only the sentinel (south pole row)
    widened_max = fill_below_highest_set_bit(widened_lat_hash)
    return (widened_lat_hash == (widened_max & ODD_BITS)
            or widened_lat_hash == widened_max - (widened_max >> 1))


def zoom_out(code):
    """
    Returns the geohash that contains this geohash, or 0 for the earth.
    """
    if code | PRECISION_1_MASK == PRECISION_1_MASK:
        return 0 if code == EARTH else EARTH

    widened_lat_hash = code & ODD_BITS
    if _is_polar(widened_lat_hash):
        # polar rows keep their longitude bits at every precision
        return (widened_lat_hash >> 2) | (code & EVEN_BITS)
    return code >> 2


def _zoom_in(code, north, east):
    if code & MAX_PRECISION_BIT:
        return 0
    widened_lat_hash = ((code & ODD_BITS) << 2) | (0b10 if north else 0)
    if _is_polar(widened_lat_hash):
        return widened_lat_hash | (code & EVEN_BITS)
    return (code << 2) | (0b10 if north else 0) | (1 if east else 0)


# children of the earth, the only geohash split in four longitudinally
EARTH_CHILDREN = {
    (True, 0b00): 0b11010,
    (True, 0b01): 0b11011,
    (True, 0b10): 0b11110,
    (True, 0b11): 0b11111,
    (False, 0b00): 0b11000,
    (False, 0b01): 0b11001,
    (False, 0b10): 0b11100,
    (False, 0b11): 0b11101,
}


def zoom_in_north00(code):
    """
    Returns the geohash that makes up the northern half of this geohash, or 0
    at the maximum precision. If there are two, returns the western one; if
    there are four (the earth), the far-western one.
    """
    if code == EARTH:
        return EARTH_CHILDREN[(True, 0b00)]
    return _zoom_in(code, True, False)


def zoom_in_north01(code):
    """
    Northern half, western one of two or middle-western one of four.
    """
    if code == EARTH:
        return EARTH_CHILDREN[(True, 0b01)]
    return _zoom_in(code, True, False)


def zoom_in_north10(code):
    """
    Northern half, eastern one of two or middle-eastern one of four.
    """
    if code == EARTH:
        return EARTH_CHILDREN[(True, 0b10)]
    return _zoom_in(code, True, True)


def zoom_in_north11(code):
    """
    Northern half, eastern one of two or far-eastern one of four.
    """
    if code == EARTH:
        return EARTH_CHILDREN[(True, 0b11)]
    return _zoom_in(code, True, True)


def zoom_in_south00(code):
    """
    Returns the geohash that makes up the southern half of this geohash, or 0
    at the maximum precision. If there are two, returns the western one; if
    there are four (the earth), the far-western one.
    """
    if code == EARTH:
        return EARTH_CHILDREN[(False, 0b00)]
    return _zoom_in(code, False, False)


def zoom_in_south01(code):
    if code == EARTH:
        return EARTH_CHILDREN[(False, 0b01)]
    return _zoom_in(code, False, False)


def zoom_in_south10(code):
    if code == EARTH:
        return EARTH_CHILDREN[(False, 0b10)]
    return _zoom_in(code, False, True)


def zoom_in_south11(code):
    if code == EARTH:
        return EARTH_CHILDREN[(False, 0b11)]
    return _zoom_in(code, False, True)


ZOOM_IN = [zoom_in_north00, zoom_in_north01, zoom_in_north10, zoom_in_north11,
           zoom_in_south00, zoom_in_south01, zoom_in_south10, zoom_in_south11]

SHIFTS = [shift_north0, shift_north1, shift_south0, shift_south1, shift_east, shift_west]


def neighbors(code):
    """
    Distinct geohashes sharing an edge with code, in the order
    north (west, east), south (west, east), east, west.
    """
    result = list()
    for shift in SHIFTS:
        neighbor = shift(code)
        if neighbor != 0 and neighbor != code and neighbor not in result:
            result.append(neighbor)
    return result


def children(code):
    result = list()
    for zoom_in in ZOOM_IN:
        child = zoom_in(code)
        if child != 0 and child not in result:
            result.append(child)
    return result
