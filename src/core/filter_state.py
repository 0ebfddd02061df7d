"""Filter state - Mutable filter values owned by the presentation layer.

FilterState holds every user-selected filter. It is mutated only through
its setters; the discovery engine reads it but never writes to it.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterable

from src.core.geo import is_valid_zip_code
from src.core.tournament import GameType, TournamentFormat, parse_date


DEFAULT_SEARCH_RADIUS_MILES = 25.0

ENTRY_FEE_MIN = 0.0
ENTRY_FEE_MAX = 1000.0

# Fargo ceiling at or above this value means "no ceiling"
FARGO_NO_CEILING = 900


@dataclass(frozen=True)
class TournamentFilters:
    """Categorical, temporal, numeric and boolean filters.

    Attributes:
        game_type: Only this game type (None for any)
        tournament_format: Only this format (None for any)
        days_of_week: Weekday indices to keep, 0=Sunday (empty for any)
        date_from: Earliest tournament date, inclusive
        date_to: Latest tournament date, inclusive
        min_entry_fee: Lowest entry fee, inclusive
        max_entry_fee: Highest entry fee, inclusive
        max_fargo_rating: Skill ceiling; at or above fargo_no_ceiling it is off
        reports_to_fargo: When True, only tournaments reporting to Fargo
        open_tournament: When True, only open tournaments
        fargo_no_ceiling: Sentinel rating meaning "no ceiling"
    """
    game_type: GameType | None = None
    tournament_format: TournamentFormat | None = None
    days_of_week: frozenset[int] = field(default_factory=frozenset)
    date_from: date | None = None
    date_to: date | None = None
    min_entry_fee: float = ENTRY_FEE_MIN
    max_entry_fee: float = ENTRY_FEE_MAX
    max_fargo_rating: int = FARGO_NO_CEILING
    reports_to_fargo: bool = False
    open_tournament: bool = False
    fargo_no_ceiling: int = FARGO_NO_CEILING

    @property
    def has_fargo_ceiling(self) -> bool:
        return self.max_fargo_rating < self.fargo_no_ceiling


def _normalize_filter_value(key: str, value: Any) -> Any:
    """Coerce a raw filter value into its typed form.

    Raises:
        ValueError: If the value is invalid for the field
    """
    if key == "game_type":
        return GameType(value) if value else None
    if key == "tournament_format":
        return TournamentFormat(value) if value else None
    if key == "days_of_week":
        days = frozenset(int(d) for d in (value or ()))
        invalid = [d for d in days if not 0 <= d <= 6]
        if invalid:
            raise ValueError(f"Weekday index out of range [0, 6]: {sorted(invalid)}")
        return days
    if key in ("date_from", "date_to"):
        return parse_date(value) if value else None
    if key in ("min_entry_fee", "max_entry_fee"):
        return float(value)
    if key == "max_fargo_rating":
        return int(value)
    if key in ("reports_to_fargo", "open_tournament"):
        return bool(value)
    raise ValueError(f"Unknown filter: {key}")


@dataclass
class FilterState:
    """The full set of active filter values.

    Attributes:
        search_text: Free text matched against tournament and venue names
        state: 2-letter state code (None for any)
        city: City name, only meaningful when state is set
        zip_code: Zip code as typed so far (may be incomplete)
        search_radius_miles: Radius around the zip; 0 means exact zip only
        filters: Nested categorical/temporal/numeric/boolean filters
        default_filters: Filters restored by reset_all_filters
    """
    search_text: str = ""
    state: str | None = None
    city: str | None = None
    zip_code: str = ""
    search_radius_miles: float = DEFAULT_SEARCH_RADIUS_MILES
    filters: TournamentFilters = field(default_factory=TournamentFilters)
    default_radius_miles: float = field(default=DEFAULT_SEARCH_RADIUS_MILES, repr=False)
    default_filters: TournamentFilters = field(default_factory=TournamentFilters, repr=False)

    @property
    def committed_zip(self) -> str | None:
        """The zip code once it has exactly 5 digits, else None."""
        if is_valid_zip_code(self.zip_code):
            return self.zip_code
        return None

    def set_search_text(self, text: str) -> None:
        self.search_text = text or ""

    def set_state(self, state: str | None) -> None:
        """Set the state filter. Clearing the state also clears the city."""
        self.state = state or None
        if self.state is None:
            self.city = None

    def set_city(self, city: str | None) -> None:
        self.city = city or None

    def set_zip_code(self, zip_code: str | None) -> None:
        self.zip_code = (zip_code or "").strip()

    def set_search_radius(self, radius_miles: float) -> None:
        """Set the search radius.

        Raises:
            ValueError: If the radius is negative or NaN
        """
        radius_miles = float(radius_miles)
        if math.isnan(radius_miles) or radius_miles < 0:
            raise ValueError(f"Search radius must be non-negative, got {radius_miles}")
        self.search_radius_miles = radius_miles

    def set_filters(self, **changes: Any) -> None:
        """Merge partial changes into the nested filters.

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        normalized = {
            key: _normalize_filter_value(key, value)
            for key, value in changes.items()
        }
        self.filters = replace(self.filters, **normalized)

    def set_game_type(self, game_type: GameType | str | None) -> None:
        self.set_filters(game_type=game_type)

    def set_tournament_format(self, tournament_format: TournamentFormat | str | None) -> None:
        self.set_filters(tournament_format=tournament_format)

    def set_days_of_week(self, days: Iterable[int]) -> None:
        self.set_filters(days_of_week=days)

    def toggle_day(self, day: int) -> None:
        """Add a weekday to the filter, or remove it if already selected."""
        days = set(self.filters.days_of_week)
        days.symmetric_difference_update({day})
        self.set_days_of_week(days)

    def set_date_from(self, value: date | str | None) -> None:
        self.set_filters(date_from=value)

    def set_date_to(self, value: date | str | None) -> None:
        self.set_filters(date_to=value)

    def set_min_entry_fee(self, value: float) -> None:
        self.set_filters(min_entry_fee=value)

    def set_max_entry_fee(self, value: float) -> None:
        self.set_filters(max_entry_fee=value)

    def set_max_fargo_rating(self, value: int) -> None:
        self.set_filters(max_fargo_rating=value)

    def set_reports_to_fargo(self, value: bool) -> None:
        self.set_filters(reports_to_fargo=value)

    def set_open_tournament(self, value: bool) -> None:
        self.set_filters(open_tournament=value)

    def reset_all_filters(self) -> None:
        """Restore every field to its default, inactive value."""
        self.search_text = ""
        self.state = None
        self.city = None
        self.zip_code = ""
        self.search_radius_miles = self.default_radius_miles
        self.filters = self.default_filters
