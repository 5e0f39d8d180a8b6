"""
    Variable precision geohashes whose cells keep a bounded real-world aspect
    ratio at every latitude.
"""
from geocell.exceptions import InvalidArgument
from geocell.geohash import (MAX_PRECISION, SMALLEST_SPAN_DEGREES, ERROR_TOLERANCE, EARTH, value_of,
                             is_valid, get_precision, southern_latitude, latitude_span, western_longitude,
                             longitude_span, bounding_box, intersects, to_debug_string)
from geocell.navigation import (shift_north0, shift_north1, shift_south0, shift_south1, shift_east,
                                shift_west, zoom_out, zoom_in_north00, zoom_in_north01, zoom_in_north10,
                                zoom_in_north11, zoom_in_south00, zoom_in_south01, zoom_in_south10,
                                zoom_in_south11, neighbors, children)
from geocell.codec import to_string, parse_geohash, parse_geohashes

__version__ = '0.1.0'
