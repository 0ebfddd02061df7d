"""Geocoding response parsing and venue fallback - Pure functions.

The HTTP call itself lives in the shell (GeocodeClient). This module only
interprets its payload and scans local venue data when the call fails.
"""

from typing import Any, Iterable

from src.core.geo import Coordinate
from src.core.tournament import TournamentRecord, Venue


def parse_geocode_response(payload: Any) -> Coordinate | None:
    """Extract the coordinate of the first place in a zip lookup payload.

    Pure function.

    Expected shape:
        {"places": [{"latitude": "40.0", "longitude": "-74.0", ...}, ...]}

    Args:
        payload: Decoded JSON body from the geocoding service

    Returns:
        Coordinate of the first place, or None if the payload is malformed
    """
    if not isinstance(payload, dict):
        return None

    places = payload.get("places")
    if not isinstance(places, list) or not places:
        return None

    place = places[0]
    if not isinstance(place, dict):
        return None

    try:
        coordinate = Coordinate(
            latitude=float(place["latitude"]),
            longitude=float(place["longitude"]),
        )
    except (KeyError, TypeError, ValueError):
        return None

    if not coordinate.is_valid():
        return None
    return coordinate


def venues_of(tournaments: Iterable[TournamentRecord]) -> list[Venue]:
    """Collect the venues of a tournament collection, in order.

    Pure function.
    """
    return [t.venue for t in tournaments]


def find_venue_coordinate(zip_code: str, venues: Iterable[Venue]) -> Coordinate | None:
    """Find the coordinate of the first geocoded venue in a zip code.

    Pure function.

    Args:
        zip_code: 5-digit zip code
        venues: Venues to scan

    Returns:
        First matching venue coordinate, or None
    """
    for venue in venues:
        if venue.zip_code == zip_code and venue.coordinate is not None:
            return venue.coordinate
    return None
