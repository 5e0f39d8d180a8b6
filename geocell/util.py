import math

import numpy as np

from shapely.geometry import Point, box

from geocell.geohash import bounding_box


R_EARTH = 6371000
R_EARTH_KM = R_EARTH / 1000.0


def dist2angle(dist):
    """Meters to degrees of a great circle."""
    return dist * 180.0 / math.pi / R_EARTH


def haversine_np(p1, p2):
    """
    Calculate the great circle distance between two shapely points
    on the earth (specified in decimal degrees)

    Parameters
    ----------
    p1, p2: shapely points, x is the longitude and y the latitude

    Returns
    -------
    km: float
        the earth distance between the two points
    """
    lon1, lat1 = p1.x, p1.y
    lon2, lat2 = p2.x, p2.y
    lon1, lat1, lon2, lat2 = map(np.radians, [lon1, lat1, lon2, lat2])

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2

    c = 2 * np.arcsin(np.sqrt(a))
    km = R_EARTH_KM * c
    return km


def cell_center(code):
    """(lat, lng) of the center of the geohash."""
    south, west, north, east = bounding_box(code)
    return (south + north) / 2.0, (west + east) / 2.0


def cell_dimensions(code):
    """
    Height and width in km of the geohash measured across its center:
    the height along the central meridian, the width along the central parallel.
    """
    south, west, north, east = bounding_box(code)
    center_lng = (west + east) / 2.0
    center_lat = (south + north) / 2.0
    height = haversine_np(Point((center_lng, south)), Point((center_lng, north)))
    width = R_EARTH_KM * np.cos(np.radians(center_lat)) * np.radians(east - west)
    return float(height), float(width)


def aspect_ratio(code):
    """
    Ratio of the north-south to the east-west distance across the center of
    the geohash, in [0.5, 1.5) for every valid geohash.
    """
    height, width = cell_dimensions(code)
    return height / width


def cell_polygon(code):
    """The geohash as a shapely polygon in (lng, lat) coordinates."""
    south, west, north, east = bounding_box(code)
    return box(west, south, east, north)
