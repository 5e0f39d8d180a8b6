import pytest
from hypothesis import given, strategies as st

from geocell.bits import deinterleave, interleave
from geocell.exceptions import InvalidArgument
from geocell.geohash import (EARTH, ERROR_TOLERANCE, MAX_PRECISION, SMALLEST_SPAN_DEGREES, bounding_box,
                             get_precision, intersects, is_valid, latitude_span, longitude_span,
                             southern_latitude, to_debug_string, value_of, western_longitude)


lats = st.floats(min_value=-90.0, max_value=90.0)
lngs = st.floats(min_value=-180.0, max_value=179.999999)
precisions = st.integers(min_value=0, max_value=MAX_PRECISION)

SAN_FRANCISCO = (37.7749, -122.4194)


def test_constants():
    assert MAX_PRECISION == 30
    assert SMALLEST_SPAN_DEGREES == 360.0 / 2 ** 31
    assert ERROR_TOLERANCE == SMALLEST_SPAN_DEGREES / 1000.0


def test_precision_zero_is_the_earth():
    code = value_of(0.0, 0.0, 0)
    assert code == EARTH
    assert get_precision(code) == 0
    assert bounding_box(code) == (-90.0, -180.0, 90.0, 180.0)


def test_value_of_rejects_bad_precision():
    with pytest.raises(InvalidArgument):
        value_of(0.0, 0.0, 31)
    with pytest.raises(InvalidArgument):
        value_of(0.0, 0.0, -1)


@given(lats, lngs, precisions)
def test_round_trip(lat, lng, precision):
    code = value_of(lat, lng, precision)
    assert is_valid(code)
    assert get_precision(code) == precision
    south, west, north, east = bounding_box(code)
    assert south - ERROR_TOLERANCE <= lat <= north + ERROR_TOLERANCE
    assert west - ERROR_TOLERANCE <= lng <= east + ERROR_TOLERANCE


@given(lats, lngs, precisions)
def test_accessors_agree_with_bounding_box(lat, lng, precision):
    code = value_of(lat, lng, precision)
    south, west, north, east = bounding_box(code)
    assert southern_latitude(code) == south
    assert western_longitude(code) == west
    assert southern_latitude(code) + latitude_span(code) == north
    assert western_longitude(code) + longitude_span(code) == east
    assert latitude_span(code) == 180.0 / 2 ** precision


def test_san_francisco():
    code = value_of(SAN_FRANCISCO[0], SAN_FRANCISCO[1], 20)
    assert code == 0x69B23DE923D
    assert get_precision(code) == 20
    south, west, north, east = bounding_box(code)
    assert south <= SAN_FRANCISCO[0] < north
    assert west <= SAN_FRANCISCO[1] < east
    assert latitude_span(code) == 180.0 / 2 ** 20
    # one more longitude bit than latitude bits at this distance from the pole
    assert longitude_span(code) == 360.0 / 2 ** 21


@pytest.mark.parametrize('code', [0, -1, 1, 0b10, 2 ** 64, 2 ** 64 + 3, True, '3', 3.0, None])
def test_is_valid_rejects(code):
    assert not is_valid(code)


def test_is_valid_detects_inconsistent_longitude_precision():
    code = value_of(10.0, 10.0, 12)
    assert is_valid(code)
    lat_hash, lng_hash = deinterleave(code)
    assert not is_valid(interleave(lat_hash, lng_hash << 1))
    assert not is_valid(interleave(lat_hash, lng_hash >> 1))
    assert is_valid(code ^ 0b1)


def test_is_valid_earth_children():
    for code in range(0b11000, 0b100000):
        assert is_valid(code)
        assert get_precision(code) == 1


def test_intersects_own_box():
    code = value_of(SAN_FRANCISCO[0], SAN_FRANCISCO[1], 20)
    assert intersects(code, *bounding_box(code))


def test_intersects_outside_box():
    code = value_of(SAN_FRANCISCO[0], SAN_FRANCISCO[1], 20)
    assert not intersects(code, 40.0, -122.5, 41.0, -122.0)
    assert not intersects(code, 37.0, -100.0, 38.0, -90.0)
    assert not intersects(code, -10.0, 10.0, 10.0, 20.0)


def test_intersects_touching_edge():
    code = value_of(SAN_FRANCISCO[0], SAN_FRANCISCO[1], 20)
    south, west, north, east = bounding_box(code)
    assert intersects(code, north, west, north + 1.0, east)
    assert intersects(code, south, east, north, east + 1.0)


def test_intersects_rejects_inverted_rectangle():
    code = value_of(SAN_FRANCISCO[0], SAN_FRANCISCO[1], 20)
    with pytest.raises(InvalidArgument):
        intersects(code, 20.0, 0.0, 10.0, 10.0)
    with pytest.raises(InvalidArgument):
        intersects(code, float('nan'), 0.0, 10.0, 10.0)


def test_intersects_across_antimeridian():
    east_of_dateline = value_of(15.0, 179.9, 20)
    west_of_dateline = value_of(15.0, -179.9, 20)
    greenwich = value_of(15.0, 0.0, 20)
    assert intersects(east_of_dateline, 10.0, 170.0, 20.0, -170.0)
    assert intersects(west_of_dateline, 10.0, 170.0, 20.0, -170.0)
    assert not intersects(greenwich, 10.0, 170.0, 20.0, -170.0)
    assert not intersects(east_of_dateline, 30.0, 170.0, 40.0, -170.0)


def test_intersects_full_longitude_range():
    greenwich = value_of(15.0, 0.0, 20)
    assert intersects(greenwich, 10.0, -180.0, 20.0, 180.0)
    assert intersects(EARTH, 10.0, 20.0, 30.0, 40.0)
    assert intersects(EARTH, 10.0, 170.0, 20.0, -170.0)


def test_to_debug_string():
    text = to_debug_string(EARTH)
    assert text.startswith('0b11<pre:0 ')
    assert 'SW:(-90.0,-180.0)' in text
    assert 'NE:(90.0,180.0)' in text
