"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Tournament/venue data parsing
- Geo/distance calculations
- Geocode payload parsing and venue fallback
- Filter state and the filter pipeline
- Pagination

All functions here are deterministic and have no I/O.
"""

from src.core.tournament import (
    GameType,
    TournamentFormat,
    TournamentRecord,
    Venue,
    parse_tournaments,
)
from src.core.geo import Coordinate, distance_miles, is_valid_zip_code
from src.core.filter_state import FilterState, TournamentFilters
from src.core.location import (
    DistanceFilter,
    ExactOrPermissive,
    ExactZipMatch,
    InactiveLocation,
    plan_location_filter,
)
from src.core.pipeline import apply_filters, available_cities, run_pipeline
from src.core.pagination import Page, paginate

__all__ = [
    # Tournament
    "GameType",
    "TournamentFormat",
    "TournamentRecord",
    "Venue",
    "parse_tournaments",
    # Geo
    "Coordinate",
    "distance_miles",
    "is_valid_zip_code",
    # Filters
    "FilterState",
    "TournamentFilters",
    # Location
    "DistanceFilter",
    "ExactOrPermissive",
    "ExactZipMatch",
    "InactiveLocation",
    "plan_location_filter",
    # Pipeline
    "apply_filters",
    "available_cities",
    "run_pipeline",
    # Pagination
    "Page",
    "paginate",
]
