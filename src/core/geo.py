"""Geographic calculations - Pure functions.

This module provides coordinates, zip-code checks and great-circle distance
for venue locations. All functions are pure with no side effects.
"""

import math
import re
from dataclasses import dataclass


# Earth's mean radius in miles
EARTH_RADIUS_MILES = 3958.8

ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair.

    Attributes:
        latitude: Degrees north, in [-90, 90]
        longitude: Degrees east, in [-180, 180]
    """
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Check that both components are inside their ranges."""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


def is_valid_zip_code(zip_code: str | None) -> bool:
    """Check if a value is a well-formed 5-digit US zip code.

    Pure function.
    """
    if not isinstance(zip_code, str):
        return False
    return ZIP_CODE_PATTERN.match(zip_code) is not None


def distance_miles(a: Coordinate, b: Coordinate) -> float:
    """Calculate distance between two coordinates using Haversine formula.

    Pure function.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance in miles
    """
    if a == b:
        return 0.0

    # Convert to radians
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    # Haversine formula
    h = min(1.0, (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    ))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_MILES * c


def is_within_radius(
    point: Coordinate | None,
    center: Coordinate,
    radius_miles: float,
) -> bool:
    """Check if a point lies within a radius of a center.

    Pure function. A missing point is never within any radius.

    Args:
        point: Coordinate to check (may be None)
        center: Center coordinate
        radius_miles: Radius in miles (inclusive)

    Returns:
        True if point is within radius
    """
    if point is None:
        return False
    return distance_miles(center, point) <= radius_miles
