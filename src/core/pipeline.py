"""Tournament filter pipeline - Pure functions.

This module narrows a tournament collection down to the records matching a
FilterState. Stages run in a fixed order, each on the output of the previous
one, and each is the identity when its filter is inactive. Relative order of
surviving records is preserved; nothing is sorted.
"""

from dataclasses import dataclass
from datetime import date

from src.core.filter_state import FilterState, TournamentFilters
from src.core.geo import Coordinate
from src.core.location import (
    LocationFilter,
    apply_location_filter,
    is_location_degraded,
    plan_location_filter,
)
from src.core.tournament import GameType, TournamentFormat, TournamentRecord


@dataclass(frozen=True)
class PipelineResult:
    """Output of a full pipeline pass.

    Attributes:
        tournaments: Records passing every active filter
        location_filter: Location filter variant that was applied
        location_degraded: True if an unresolved zip matched nothing and
            location filtering was skipped
    """
    tournaments: list[TournamentRecord]
    location_filter: LocationFilter
    location_degraded: bool


def filter_by_search_text(
    tournaments: list[TournamentRecord],
    search_text: str,
) -> list[TournamentRecord]:
    """Case-insensitive substring match on tournament or venue name.

    Pure function.
    """
    if not search_text:
        return tournaments

    query = search_text.lower()
    return [
        t for t in tournaments
        if query in t.name.lower() or query in t.venue.name.lower()
    ]


def filter_by_state(
    tournaments: list[TournamentRecord],
    state: str | None,
) -> list[TournamentRecord]:
    """Pure function."""
    if not state:
        return tournaments
    return [t for t in tournaments if t.venue.state == state]


def filter_by_city(
    tournaments: list[TournamentRecord],
    city: str | None,
) -> list[TournamentRecord]:
    """Pure function."""
    if not city:
        return tournaments
    return [t for t in tournaments if t.venue.city == city]


def filter_by_game_type(
    tournaments: list[TournamentRecord],
    game_type: GameType | None,
) -> list[TournamentRecord]:
    """Pure function."""
    if game_type is None:
        return tournaments
    return [t for t in tournaments if t.game_type == game_type]


def filter_by_format(
    tournaments: list[TournamentRecord],
    tournament_format: TournamentFormat | None,
) -> list[TournamentRecord]:
    """Pure function."""
    if tournament_format is None:
        return tournaments
    return [t for t in tournaments if t.tournament_format == tournament_format]


def filter_by_days_of_week(
    tournaments: list[TournamentRecord],
    days_of_week: frozenset[int],
) -> list[TournamentRecord]:
    """Keep tournaments falling on one of the given weekdays (0=Sunday).

    Pure function.
    """
    if not days_of_week:
        return tournaments
    return [t for t in tournaments if t.weekday_index in days_of_week]


def filter_by_date_range(
    tournaments: list[TournamentRecord],
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[TournamentRecord]:
    """Filter tournaments by date range, both bounds inclusive.

    Pure function.
    """
    result = tournaments

    if date_from is not None:
        result = [t for t in result if t.tournament_date >= date_from]

    if date_to is not None:
        result = [t for t in result if t.tournament_date <= date_to]

    return result


def filter_by_entry_fee(
    tournaments: list[TournamentRecord],
    min_fee: float,
    max_fee: float,
) -> list[TournamentRecord]:
    """Keep tournaments whose entry fee is inside [min_fee, max_fee].

    Pure function. A missing entry fee counts as free.
    """
    return [
        t for t in tournaments
        if min_fee <= (t.entry_fee or 0) <= max_fee
    ]


def filter_by_fargo_ceiling(
    tournaments: list[TournamentRecord],
    filters: TournamentFilters,
) -> list[TournamentRecord]:
    """Keep tournaments with no rating cap or a cap at most the filter's.

    Pure function. Inactive while the filter sits at the no-ceiling sentinel.
    """
    if not filters.has_fargo_ceiling:
        return tournaments

    return [
        t for t in tournaments
        if not t.max_fargo_rating or t.max_fargo_rating <= filters.max_fargo_rating
    ]


def filter_by_reports_to_fargo(
    tournaments: list[TournamentRecord],
    required: bool,
) -> list[TournamentRecord]:
    """Pure function. Restricts only when required is True."""
    if not required:
        return tournaments
    return [t for t in tournaments if t.reports_to_fargo is True]


def filter_by_open_tournament(
    tournaments: list[TournamentRecord],
    required: bool,
) -> list[TournamentRecord]:
    """Pure function. Restricts only when required is True."""
    if not required:
        return tournaments
    return [t for t in tournaments if t.open_tournament is True]


def run_pipeline(
    tournaments: list[TournamentRecord],
    state: FilterState,
    resolved_coordinate: Coordinate | None,
) -> PipelineResult:
    """Run every filter stage and report how location was handled.

    Pure function.

    Args:
        tournaments: Full tournament collection
        state: Current filter values (read only)
        resolved_coordinate: Geocoded center of the committed zip, if any

    Returns:
        PipelineResult with the surviving tournaments
    """
    result = list(tournaments)

    result = filter_by_search_text(result, state.search_text)
    result = filter_by_state(result, state.state)
    result = filter_by_city(result, state.city)

    location_filter = plan_location_filter(
        state.committed_zip,
        state.search_radius_miles,
        resolved_coordinate,
    )
    degraded = is_location_degraded(result, location_filter)
    result = apply_location_filter(result, location_filter)

    filters = state.filters
    result = filter_by_game_type(result, filters.game_type)
    result = filter_by_format(result, filters.tournament_format)
    result = filter_by_days_of_week(result, filters.days_of_week)
    result = filter_by_date_range(result, filters.date_from, filters.date_to)
    result = filter_by_entry_fee(result, filters.min_entry_fee, filters.max_entry_fee)
    result = filter_by_fargo_ceiling(result, filters)
    result = filter_by_reports_to_fargo(result, filters.reports_to_fargo)
    result = filter_by_open_tournament(result, filters.open_tournament)

    return PipelineResult(
        tournaments=result,
        location_filter=location_filter,
        location_degraded=degraded,
    )


def apply_filters(
    tournaments: list[TournamentRecord],
    state: FilterState,
    resolved_coordinate: Coordinate | None,
) -> list[TournamentRecord]:
    """Filter tournaments by every active filter in state.

    Pure function.

    Returns:
        Matching tournaments in their original order
    """
    return run_pipeline(tournaments, state, resolved_coordinate).tournaments


def available_cities(
    tournaments: list[TournamentRecord],
    state: str | None,
) -> list[str]:
    """List the distinct venue cities in a state, sorted.

    Pure function. Returns an empty list when no state is selected.
    """
    if not state:
        return []
    return sorted({t.venue.city for t in tournaments if t.venue.state == state})
