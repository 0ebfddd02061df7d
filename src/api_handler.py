"""Web API Handler - Serves tournament discovery results.

This module provides HTTP endpoints for the app frontend.
Part of the imperative shell - handles HTTP I/O.
"""

import json
import logging
from typing import Any, Mapping

from flask import Request, Response

from src.core.config import Config
from src.core.filter_state import FilterState, TournamentFilters
from src.core.pagination import paginate
from src.core.pipeline import available_cities
from src.core.tournament import TournamentRecord
from src.geocode_resolver import GeocodeResolver
from src.orchestrator import DiscoveryEngine
from src.shell.geocode_client import GeocodeClient
from src.shell.tournament_source import load_tournaments

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}

TRUE_VALUES = {"1", "true", "yes", "on"}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}


def _json_response(data: dict[str, Any], status: int = 200) -> Response:
    """Create a JSON response with CORS headers."""
    response = Response(
        json.dumps(data, default=str),
        status=status,
        mimetype="application/json",
    )
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


def _preflight_response() -> Response:
    response = Response("", status=204)
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in TRUE_VALUES


def _parse_days(value: str) -> list[int]:
    """Parse "6", "0,6" or "saturday,sunday" into weekday indices.

    Raises:
        ValueError: If a day is not recognised
    """
    days = []
    for part in value.split(","):
        part = part.strip().lower()
        if not part:
            continue
        if part in WEEKDAY_NAMES:
            days.append(WEEKDAY_NAMES[part])
        else:
            days.append(int(part))
    return days


def parse_filter_args(args: Mapping[str, str], config: Config) -> FilterState:
    """Build a FilterState from request query parameters.

    Args:
        args: Query parameters
        config: Application configuration (defaults and limits)

    Returns:
        Populated FilterState

    Raises:
        ValueError: If a parameter is malformed or out of range
    """
    defaults = TournamentFilters(
        max_entry_fee=config.entry_fee_max,
        max_fargo_rating=config.fargo_no_ceiling,
        fargo_no_ceiling=config.fargo_no_ceiling,
    )
    state = FilterState(
        search_radius_miles=config.default_search_radius_miles,
        filters=defaults,
        default_radius_miles=config.default_search_radius_miles,
        default_filters=defaults,
    )

    state.set_search_text(args.get("q", ""))
    state.set_state(args.get("state"))
    if state.state:
        state.set_city(args.get("city"))
    state.set_zip_code(args.get("zip", ""))

    if args.get("radius"):
        radius = float(args["radius"])
        if radius > config.max_search_radius_miles:
            raise ValueError(
                f"radius must be at most {config.max_search_radius_miles:g} miles"
            )
        state.set_search_radius(radius)

    changes: dict[str, Any] = {
        "game_type": args.get("game_type") or None,
        "tournament_format": args.get("format") or None,
        "days_of_week": _parse_days(args.get("days", "")),
        "date_from": args.get("date_from") or None,
        "date_to": args.get("date_to") or None,
        "min_entry_fee": args.get("min_fee") or 0,
        "max_entry_fee": args.get("max_fee") or config.entry_fee_max,
        "max_fargo_rating": args.get("max_fargo") or config.fargo_no_ceiling,
        "reports_to_fargo": _parse_bool(args.get("reports_to_fargo")),
        "open_tournament": _parse_bool(args.get("open_tournament")),
    }
    state.set_filters(**changes)

    return state


def tournament_to_dict(tournament: TournamentRecord) -> dict[str, Any]:
    """Convert TournamentRecord to JSON-serializable dict."""
    venue = tournament.venue
    return {
        "id": tournament.id,
        "name": tournament.name,
        "game_type": tournament.game_type.value,
        "tournament_format": tournament.tournament_format.value,
        "tournament_date": tournament.tournament_date.isoformat(),
        "start_time": tournament.start_time,
        "entry_fee": tournament.entry_fee,
        "max_fargo": tournament.max_fargo_rating,
        "reports_to_fargo": tournament.reports_to_fargo,
        "open_tournament": tournament.open_tournament,
        "venue": {
            "id": venue.id,
            "name": venue.name,
            "address": venue.address,
            "city": venue.city,
            "state": venue.state,
            "zip_code": venue.zip_code,
            "latitude": venue.coordinate.latitude if venue.coordinate else None,
            "longitude": venue.coordinate.longitude if venue.coordinate else None,
        },
    }


def discover(
    request: Request,
    config: Config,
    tournaments: list[TournamentRecord] | None = None,
    resolver: GeocodeResolver | None = None,
) -> Response:
    """API endpoint: Filter tournaments by the request's query parameters.

    Query params:
        q, state, city, zip, radius, game_type, format, days, date_from,
        date_to, min_fee, max_fee, max_fargo, reports_to_fargo,
        open_tournament, page, per_page

    Returns:
        JSON with the requested page of matching tournaments
    """
    if request.method == "OPTIONS":
        return _preflight_response()

    try:
        state = parse_filter_args(request.args, config)
        page_number = int(request.args.get("page", "1"))
        per_page = int(request.args.get("per_page", str(config.page_size)))
        if per_page <= 0:
            raise ValueError("per_page must be positive")
    except ValueError as e:
        logger.info("Rejected discovery request: %s", e)
        return _json_response({"status": "error", "message": str(e)}, status=400)

    if tournaments is None:
        tournaments = load_tournaments(config.tournaments_path)

    if resolver is None:
        resolver = GeocodeResolver(
            GeocodeClient(
                base_url=config.geocode_base_url,
                timeout=config.geocode_timeout_seconds,
            )
        )

    engine = DiscoveryEngine(state, resolver=resolver, tournaments=tournaments)
    result = engine.filters_changed()
    page = paginate(result.tournaments, page=page_number, per_page=per_page)

    return _json_response({
        "status": "success",
        "summary": result.summary,
        "count": result.total_count,
        "page": page.page,
        "total_pages": page.total_pages,
        "display_start": page.display_start,
        "display_end": page.display_end,
        "committed_zip": result.committed_zip,
        "location_degraded": result.location_degraded,
        "tournaments": [tournament_to_dict(t) for t in page.items],
    })


def get_cities(
    request: Request,
    config: Config,
    tournaments: list[TournamentRecord] | None = None,
) -> Response:
    """API endpoint: List the cities with venues in a state.

    Query params:
        state: 2-letter state code

    Returns:
        JSON with sorted city names
    """
    if request.method == "OPTIONS":
        return _preflight_response()

    state = request.args.get("state", "")
    if tournaments is None:
        tournaments = load_tournaments(config.tournaments_path)

    return _json_response({
        "state": state,
        "cities": available_cities(tournaments, state),
    })
