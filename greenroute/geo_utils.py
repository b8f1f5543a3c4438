"""Geographic utility functions for route estimation."""

import math
from typing import Sequence

from .config import EARTH_RADIUS_KM
from .interfaces import GeoPoint


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    """Calculate the great-circle distance between two points.

    Uses the haversine formula on a sphere of radius 6371 km.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometers
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2)
    # Guard against h drifting just above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(1.0, h)))

    return EARTH_RADIUS_KM * c


def route_distance(points: Sequence[GeoPoint]) -> float:
    """Sum of great-circle distances over consecutive points.

    Returns 0 for sequences with fewer than two points.
    """
    return sum(distance_between(points[i], points[i + 1]) for i in range(len(points) - 1))


def calculate_heading(start: GeoPoint, end: GeoPoint) -> float:
    """Calculate the initial heading from one point to another.

    Args:
        start: Starting point
        end: Ending point

    Returns:
        Heading in degrees (0-360)
    """
    lat1 = math.radians(start.latitude)
    lat2 = math.radians(end.latitude)
    diff_lon = math.radians(end.longitude - start.longitude)

    x = math.sin(diff_lon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - (math.sin(lat1) * math.cos(lat2) * math.cos(diff_lon))
    bearing = math.atan2(x, y)

    # Convert to degrees and normalize to 0-360
    heading = math.degrees(bearing)
    return (heading + 360) % 360
