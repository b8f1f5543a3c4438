"""Input preprocessing utilities for route coordinates."""

import math
import numbers
import logging
from typing import Any, Tuple

from geopy.point import Point as GeopyPoint

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def _check_number(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(field, value, f"{field.capitalize()} must be a number, got {value!r}")
    if math.isnan(value):
        raise ValidationError(field, value, f"{field.capitalize()} must not be NaN")
    return float(value)


def _check_range(field: str, value: float, limit: float) -> float:
    if not (-limit <= value <= limit):
        raise ValidationError(field, value, f"{field.capitalize()} must be between -{limit} and {limit}")
    return value


def validate_coordinates(lat: Any, lon: Any) -> Tuple[float, float]:
    """Validate that coordinates are numeric and within valid ranges.

    Latitude is checked completely before longitude.

    Raises:
        ValidationError: naming the first offending field.
    """
    lat = _check_range('latitude', _check_number('latitude', lat), 90)
    lon = _check_range('longitude', _check_number('longitude', lon), 180)
    return lat, lon


def _parse_axis(match, axis: str) -> float:
    """Convert one matched axis to signed degrees without wrap-around."""
    direction = match.group(f'{axis}_direction_front') or match.group(f'{axis}_direction_back')
    return GeopyPoint.parse_degrees(
        match.group(f'{axis}_degrees'),
        match.group(f'{axis}_arcminutes') or 0,
        match.group(f'{axis}_arcseconds') or 0,
        direction,
    )


def parse_coordinates(coord_input: str, label: str = ""):
    """Parse coordinates in various formats into a GeoPoint.

    Supports formats:
    - Decimal degrees: lat,lon or [lat, lon] or (lat, lon)
    - DMS: 40°26'46"N 79°58'56"W
    - Decimal degrees with cardinal directions: 40.446 N 79.982 W

    Values are range-checked as written; out-of-range longitudes are
    rejected, not wrapped.
    """
    from .interfaces import GeoPoint

    if not isinstance(coord_input, str) or not coord_input.strip():
        raise ValidationError('coordinates', coord_input, "Coordinates must be a non-empty string")

    cleaned = coord_input.strip()
    for ch in '[]()':
        cleaned = cleaned.replace(ch, '')

    def invalid_format() -> ValidationError:
        logger.warning(f"Could not parse coordinates '{coord_input}'")
        return ValidationError('coordinates', coord_input, f"Invalid coordinate format: {coord_input!r}")

    # Plain decimal pair
    parts = [p.strip() for p in cleaned.split(',')]
    if len(parts) > 2:
        raise invalid_format()
    if len(parts) == 2:
        try:
            lat, lon = float(parts[0]), float(parts[1])
        except ValueError:
            pass
        else:
            logger.debug(f"Parsed decimal pair {lat}, {lon} from '{coord_input}'")
            return GeoPoint(lat, lon, label)

    # DMS and cardinal notations: latitude and longitude only, no leading text or altitude
    match = GeopyPoint.POINT_PATTERN.match(cleaned.replace("''", '"'))
    if match is None or match.group('altitude') or cleaned[:match.start('latitude')].strip():
        raise invalid_format()

    try:
        lat = _parse_axis(match, 'latitude')
        lon = _parse_axis(match, 'longitude')
    except ValueError as e:
        raise invalid_format() from e

    logger.debug(f"Parsed {lat}, {lon} from '{coord_input}'")
    return GeoPoint(lat, lon, label)
