"""Shared fixtures for tournament discovery tests."""

from datetime import date

import pytest

from src.core.geo import Coordinate
from src.core.tournament import GameType, TournamentFormat, TournamentRecord, Venue


def build_venue(
    venue_id: int = 1,
    name: str = "Corner Pocket",
    city: str = "Newark",
    state: str = "NJ",
    zip_code: str = "07101",
    coordinate: Coordinate | None = None,
) -> Venue:
    return Venue(
        id=venue_id,
        name=name,
        address="1 Main St",
        city=city,
        state=state,
        zip_code=zip_code,
        coordinate=coordinate,
    )


def build_tournament(
    tournament_id: int = 1,
    name: str = "Weekly 9-Ball",
    venue: Venue | None = None,
    game_type: GameType = GameType.NINE_BALL,
    tournament_format: TournamentFormat = TournamentFormat.DOUBLE_ELIMINATION,
    tournament_date: date = date(2025, 6, 7),
    entry_fee: float | None = 20,
    max_fargo_rating: int | None = None,
    reports_to_fargo: bool = False,
    open_tournament: bool = False,
) -> TournamentRecord:
    return TournamentRecord(
        id=tournament_id,
        name=name,
        game_type=game_type,
        tournament_format=tournament_format,
        tournament_date=tournament_date,
        start_time="19:00",
        venue=venue or build_venue(),
        entry_fee=entry_fee,
        max_fargo_rating=max_fargo_rating,
        reports_to_fargo=reports_to_fargo,
        open_tournament=open_tournament,
    )


@pytest.fixture
def make_venue():
    """Factory for Venue objects."""
    return build_venue


@pytest.fixture
def make_tournament():
    """Factory for TournamentRecord objects."""
    return build_tournament


@pytest.fixture
def center():
    """Resolved center used by radius tests."""
    return Coordinate(latitude=40.0, longitude=-74.0)


@pytest.fixture
def sample_tournaments(make_tournament, make_venue):
    """A small mixed collection spanning two states.

    2025-06-07 is a Saturday, 2025-06-08 a Sunday, 2025-06-10 a Tuesday.
    """
    near = make_venue(
        venue_id=1,
        name="Corner Pocket",
        city="Newark",
        state="NJ",
        zip_code="07001",
        coordinate=Coordinate(40.08, -74.0),
    )
    far = make_venue(
        venue_id=2,
        name="Shooters",
        city="Trenton",
        state="NJ",
        zip_code="08601",
        coordinate=Coordinate(40.22, -74.76),
    )
    ungeocoded = make_venue(
        venue_id=3,
        name="Rack Em Up",
        city="Brooklyn",
        state="NY",
        zip_code="11201",
        coordinate=None,
    )

    return [
        make_tournament(
            tournament_id=1,
            name="Saturday 9-Ball",
            venue=near,
            tournament_date=date(2025, 6, 7),
            entry_fee=25,
            reports_to_fargo=True,
        ),
        make_tournament(
            tournament_id=2,
            name="Sunday 8-Ball Open",
            venue=far,
            game_type=GameType.EIGHT_BALL,
            tournament_format=TournamentFormat.SINGLE_ELIMINATION,
            tournament_date=date(2025, 6, 8),
            entry_fee=None,
            max_fargo_rating=550,
            open_tournament=True,
        ),
        make_tournament(
            tournament_id=3,
            name="Tuesday Ten Ball",
            venue=ungeocoded,
            game_type=GameType.TEN_BALL,
            tournament_date=date(2025, 6, 10),
            entry_fee=50,
            max_fargo_rating=700,
        ),
    ]
