"""Zip/radius location filter - Pure functions.

The location stage of the pipeline is a small state machine:

- no committed zip                  -> InactiveLocation
- zip resolved, radius 0            -> ExactZipMatch
- zip resolved, radius > 0          -> DistanceFilter
- zip committed but not resolved    -> ExactOrPermissive

ExactOrPermissive keeps exact zip matches when there are any and otherwise
leaves the working set untouched, so a geocoding outage never empties the
result list.
"""

from dataclasses import dataclass
from typing import Union

from src.core.geo import Coordinate, is_valid_zip_code, is_within_radius
from src.core.tournament import TournamentRecord


@dataclass(frozen=True)
class InactiveLocation:
    """No location filtering."""


@dataclass(frozen=True)
class ExactZipMatch:
    """Keep only venues in exactly this zip code."""
    zip_code: str


@dataclass(frozen=True)
class DistanceFilter:
    """Keep venues within radius_miles of center.

    Venues without a coordinate are excluded.
    """
    center: Coordinate
    radius_miles: float


@dataclass(frozen=True)
class ExactOrPermissive:
    """Exact zip match if it yields anything, otherwise no filtering."""
    zip_code: str


LocationFilter = Union[InactiveLocation, ExactZipMatch, DistanceFilter, ExactOrPermissive]


def plan_location_filter(
    committed_zip: str | None,
    radius_miles: float,
    resolved_coordinate: Coordinate | None,
) -> LocationFilter:
    """Choose the location filter for the current inputs.

    Pure function.

    Args:
        committed_zip: 5-digit zip, or None when the input is incomplete
        radius_miles: Search radius; 0 means exact zip only
        resolved_coordinate: Geocoded center of the zip, None if unresolved

    Returns:
        The LocationFilter variant to apply
    """
    if not is_valid_zip_code(committed_zip):
        return InactiveLocation()

    if resolved_coordinate is None:
        return ExactOrPermissive(zip_code=committed_zip)

    if radius_miles <= 0:
        return ExactZipMatch(zip_code=committed_zip)

    return DistanceFilter(center=resolved_coordinate, radius_miles=radius_miles)


def filter_by_zip_code(
    tournaments: list[TournamentRecord],
    zip_code: str,
) -> list[TournamentRecord]:
    """Keep tournaments whose venue is in exactly this zip code.

    Pure function.
    """
    return [t for t in tournaments if t.venue.zip_code == zip_code]


def filter_by_distance(
    tournaments: list[TournamentRecord],
    center: Coordinate,
    radius_miles: float,
) -> list[TournamentRecord]:
    """Keep tournaments whose venue lies within radius_miles of center.

    Pure function.
    """
    return [
        t for t in tournaments
        if is_within_radius(t.venue.coordinate, center, radius_miles)
    ]


def apply_location_filter(
    tournaments: list[TournamentRecord],
    location_filter: LocationFilter,
) -> list[TournamentRecord]:
    """Apply a location filter to a working set.

    Pure function.

    Args:
        tournaments: Working set from the previous pipeline stages
        location_filter: Planned location filter

    Returns:
        Filtered tournaments, in their original order
    """
    if isinstance(location_filter, ExactZipMatch):
        return filter_by_zip_code(tournaments, location_filter.zip_code)

    if isinstance(location_filter, DistanceFilter):
        return filter_by_distance(
            tournaments,
            location_filter.center,
            location_filter.radius_miles,
        )

    if isinstance(location_filter, ExactOrPermissive):
        matches = filter_by_zip_code(tournaments, location_filter.zip_code)
        return matches if matches else list(tournaments)

    return list(tournaments)


def is_location_degraded(
    tournaments: list[TournamentRecord],
    location_filter: LocationFilter,
) -> bool:
    """Check whether location filtering was abandoned for this working set.

    Pure function. True only for ExactOrPermissive when no venue in the
    working set matches the zip, i.e. the results are not narrowed by
    location at all.
    """
    if not isinstance(location_filter, ExactOrPermissive):
        return False
    return not filter_by_zip_code(tournaments, location_filter.zip_code)
