import numpy as np
import pandas as pd
import pytest

from geocell.exceptions import InvalidArgument
from geocell.frame import bounding_boxes, cell_counts, encode_frame, value_of_array
from geocell.geohash import EARTH, bounding_box, get_precision, value_of


LATS = [-90.0, -89.9999, -45.0, -0.0, 0.0, 12.5, 37.7749, 41.89193, 51.5, 89.99, 90.0, 95.0, -100.0]
LNGS = [-180.0, -179.5, -122.4194, -0.0, 0.0, 12.51133, 90.0, 179.999, 180.0, -190.0, 200.0, 7.0, 3.3]


@pytest.mark.parametrize('precision', range(0, 31))
def test_value_of_array_matches_value_of(precision):
    codes = value_of_array(LATS, LNGS, precision)
    assert codes.dtype == np.int64
    assert [int(c) for c in codes] == [value_of(lat, lng, precision) for lat, lng in zip(LATS, LNGS)]


def test_value_of_array_broadcasts():
    codes = value_of_array(np.array([10.0, 20.0]), 5.0, 12)
    assert codes.tolist() == [value_of(10.0, 5.0, 12), value_of(20.0, 5.0, 12)]


def test_value_of_array_precision_zero():
    assert value_of_array([1.0, 2.0], [3.0, 4.0], 0).tolist() == [EARTH, EARTH]


def test_value_of_array_rejects():
    with pytest.raises(InvalidArgument):
        value_of_array([1.0], [2.0], 31)
    with pytest.raises(InvalidArgument):
        value_of_array([np.nan], [2.0], 3)
    with pytest.raises(InvalidArgument):
        value_of_array([1.0], [np.inf], 3)


def test_encode_frame():
    df = pd.DataFrame({'lat': LATS, 'lng': LNGS})
    encoded = encode_frame(df, 18)
    assert 'geohash' not in df.columns
    assert encoded['geohash'].tolist() == [value_of(lat, lng, 18) for lat, lng in zip(LATS, LNGS)]


def test_encode_frame_custom_columns():
    df = pd.DataFrame({'y': [41.89193], 'x': [12.51133]})
    encoded = encode_frame(df, 9, lat_col='y', lng_col='x', column='cell')
    assert encoded['cell'].tolist() == [value_of(41.89193, 12.51133, 9)]


def test_bounding_boxes():
    codes = [EARTH, value_of(41.89193, 12.51133, 16)]
    boxes = bounding_boxes(codes)
    assert list(boxes.columns) == ['geohash', 'precision', 'south', 'west', 'north', 'east']
    assert boxes['geohash'].tolist() == codes
    assert boxes['precision'].tolist() == [0, 16]
    assert tuple(boxes.iloc[1][['south', 'west', 'north', 'east']]) == bounding_box(codes[1])


def test_cell_counts():
    df = pd.DataFrame({
        'lat': [41.89193, 41.89194, 41.89195, -33.9],
        'lng': [12.51133, 12.51134, 12.51133, 151.2],
    })
    counts = cell_counts(df, 10)
    assert counts['count'].tolist() == [3, 1]
    rome = value_of(41.89193, 12.51133, 10)
    assert counts['geohash'].tolist() == [rome, value_of(-33.9, 151.2, 10)]
    assert get_precision(int(counts['geohash'][0])) == 10
