"""Tournament data models and parsing - Pure functions.

This module handles parsing raw tournament rows (as returned by the remote
query layer, with the venue embedded) into typed TournamentRecord objects.
All functions are pure with no side effects.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from src.core.geo import Coordinate


logger = logging.getLogger(__name__)

# Date part ends at the time separator of a timestamp
TIME_SEPARATOR = re.compile(r"[T ]")

TRUE_STRINGS = {"1", "true", "yes", "on"}


class GameType(str, Enum):
    """Billiards game played in a tournament."""
    EIGHT_BALL = "8-ball"
    NINE_BALL = "9-ball"
    TEN_BALL = "10-ball"
    BANK_POOL = "bank-pool"
    ONE_POCKET = "one-pocket"
    STRAIGHT_POOL = "straight-pool"
    OTHER = "other"


class TournamentFormat(str, Enum):
    """Bracket format of a tournament."""
    SINGLE_ELIMINATION = "single-elim"
    DOUBLE_ELIMINATION = "double-elim"
    ROUND_ROBIN = "round-robin"
    SWISS = "swiss"
    MODIFIED_SINGLE = "modified-single"
    OTHER = "other"


@dataclass(frozen=True)
class Venue:
    """Immutable venue data model.

    Attributes:
        id: Venue identifier
        name: Display name of the room/bar
        address: Street address
        city: City name
        state: 2-letter state code
        zip_code: 5-digit zip code
        coordinate: Geocoded location, None if never geocoded
    """
    id: int
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    coordinate: Coordinate | None = None


@dataclass(frozen=True)
class TournamentRecord:
    """Immutable tournament data model.

    Attributes:
        id: Tournament identifier
        name: Tournament name
        game_type: Game played
        tournament_format: Bracket format
        tournament_date: Calendar date the tournament runs
        start_time: Start time as displayed (e.g. "19:00")
        venue: The venue hosting the tournament
        entry_fee: Entry fee in dollars (None if not listed)
        max_fargo_rating: Fargo rating cap (None for no cap)
        reports_to_fargo: Whether results are reported to FargoRate
        open_tournament: Whether entry is open to everyone
    """
    id: int
    name: str
    game_type: GameType
    tournament_format: TournamentFormat
    tournament_date: date
    start_time: str
    venue: Venue
    entry_fee: float | None = None
    max_fargo_rating: int | None = None
    reports_to_fargo: bool = False
    open_tournament: bool = False

    @property
    def weekday_index(self) -> int:
        """Day of week with 0=Sunday ... 6=Saturday."""
        return weekday_index(self.tournament_date)


def weekday_index(day: date) -> int:
    """Convert a date to a Sunday-based weekday index.

    Pure function. Python's weekday() is Monday-based (Monday=0), so it is
    shifted by one.
    """
    return (day.weekday() + 1) % 7


def parse_date(value: Any) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD) or pass a date through.

    Raises:
        ValueError: If the value is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Not a date: {value!r}")
    return date.fromisoformat(TIME_SEPARATOR.split(value.strip(), maxsplit=1)[0])


def _parse_coordinate(data: dict[str, Any]) -> Coordinate | None:
    """Parse optional latitude/longitude fields into a Coordinate."""
    latitude = data.get("latitude")
    longitude = data.get("longitude")
    if latitude is None or longitude is None:
        return None

    coordinate = Coordinate(latitude=float(latitude), longitude=float(longitude))
    if not coordinate.is_valid():
        return None
    return coordinate


def _parse_zip_code(value: Any) -> str:
    """Normalize a zip code to its 5-digit string form.

    Numeric zips from JSON lose their leading zeros, so they are re-padded.
    """
    if value is None:
        return ""
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:05d}"
    return str(value).strip()


def _parse_flag(value: Any) -> bool:
    """Parse a boolean column that may arrive as a string."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def parse_venue(data: dict[str, Any]) -> Venue:
    """Parse an embedded venue object.

    Accepts either "name" or the database column "venue" for the name.

    Raises:
        KeyError, TypeError, ValueError: If required fields are missing
    """
    name = data.get("name", data.get("venue"))
    if name is None:
        raise KeyError("name")

    return Venue(
        id=int(data.get("id", 0)),
        name=str(name),
        address=str(data.get("address", "")),
        city=str(data["city"]),
        state=str(data["state"]),
        zip_code=_parse_zip_code(data.get("zip_code")),
        coordinate=_parse_coordinate(data),
    )


def parse_tournament(data: dict[str, Any]) -> TournamentRecord | None:
    """Parse a single raw tournament row into a TournamentRecord.

    Pure function: takes raw dict, returns typed record or None if invalid.
    Rows without a venue are invalid - every record must have exactly one.

    Args:
        data: Tournament dict with an embedded "venue" (or "venues") object

    Returns:
        TournamentRecord or None if parsing fails
    """
    try:
        venue_data = data.get("venue") or data.get("venues")
        if not isinstance(venue_data, dict):
            return None

        entry_fee = data.get("entry_fee")
        if entry_fee is not None:
            entry_fee = float(entry_fee)
            if entry_fee < 0:
                return None

        max_fargo = data.get("max_fargo", data.get("max_fargo_rating"))
        if max_fargo is not None:
            max_fargo = int(max_fargo)

        return TournamentRecord(
            id=int(data["id"]),
            name=str(data["name"]),
            game_type=GameType(data["game_type"]),
            tournament_format=TournamentFormat(data["tournament_format"]),
            tournament_date=parse_date(data["tournament_date"]),
            start_time=str(data.get("start_time", "")),
            venue=parse_venue(venue_data),
            entry_fee=entry_fee,
            max_fargo_rating=max_fargo,
            reports_to_fargo=_parse_flag(data.get("reports_to_fargo")),
            open_tournament=_parse_flag(data.get("open_tournament")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.debug("Skipping invalid tournament row %r: %s", data.get("id"), e)
        return None


def parse_tournaments(rows: list[dict[str, Any]]) -> list[TournamentRecord]:
    """Parse raw tournament rows into a list of TournamentRecords.

    Pure function: filters out invalid rows, keeps the source order.

    Args:
        rows: Tournament rows from the data source

    Returns:
        List of valid TournamentRecord objects
    """
    tournaments = []

    for row in rows:
        tournament = parse_tournament(row)
        if tournament is not None:
            tournaments.append(tournament)

    return tournaments
