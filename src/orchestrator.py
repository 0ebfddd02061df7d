"""Orchestrator - Wires Functional Core and Imperative Shell.

DiscoveryEngine keeps the published tournament list in step with the raw
collection and the caller's FilterState. It detects committed-zip changes,
drives geocode resolution, and re-runs the pure filter pipeline on every
change. There is no incremental recomputation and no result cache.

Geocode resolution is the only suspension point. Each resolution gets a
GeocodeTicket carrying a generation number; a response is applied only if
its generation is still current, so a slow lookup for an old zip can never
overwrite the coordinate of a newer one.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from src.core.filter_state import FilterState
from src.core.geo import Coordinate
from src.core.geocode import venues_of
from src.core.location import LocationFilter
from src.core.pipeline import run_pipeline
from src.core.tournament import TournamentRecord
from src.geocode_resolver import GeocodeResolver


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodeTicket:
    """A pending geocode resolution.

    Attributes:
        generation: Generation the ticket was issued for
        zip_code: Committed zip code to resolve
    """
    generation: int
    zip_code: str


@dataclass(frozen=True)
class DiscoveryResult:
    """Result of one recompute.

    Attributes:
        tournaments: Tournaments passing every active filter, in source order
        committed_zip: Committed zip at the time of the recompute
        resolved_coordinate: Coordinate used for the location stage
        location_filter: Location filter variant that was applied
        location_degraded: True if location filtering was skipped because
            the zip could not be resolved and matched no venue
    """
    tournaments: list[TournamentRecord]
    committed_zip: str | None
    resolved_coordinate: Coordinate | None
    location_filter: LocationFilter
    location_degraded: bool

    @property
    def total_count(self) -> int:
        return len(self.tournaments)

    @property
    def summary(self) -> str:
        """Human-readable summary of the result."""
        text = f"{self.total_count} tournaments"
        if self.committed_zip:
            text += f" near {self.committed_zip}"
            if self.location_degraded:
                text += " (location unavailable, showing all)"
        return text


ResultCallback = Callable[[DiscoveryResult], None]


class DiscoveryEngine:
    """Coordinates geocoding and filtering for the presentation layer.

    The FilterState is owned by the caller. The engine only reads it; the
    caller mutates it through its setters and then calls filters_changed().
    """

    def __init__(
        self,
        filter_state: FilterState,
        resolver: GeocodeResolver | None = None,
        tournaments: Iterable[TournamentRecord] = (),
        resolve_inline: bool = True,
    ) -> None:
        """Initialize the engine.

        Args:
            filter_state: Caller-owned filter values
            resolver: Geocode resolver (created if not provided)
            tournaments: Initial tournament collection
            resolve_inline: Resolve geocode tickets immediately. When False
                the caller runs pending tickets itself (resolve_ticket or
                settle_geocode), e.g. from its own event loop.
        """
        self.filter_state = filter_state
        self.resolver = resolver or GeocodeResolver()
        self.resolve_inline = resolve_inline

        self._tournaments: list[TournamentRecord] = list(tournaments)
        self._committed_zip: str | None = None
        self._resolved_coordinate: Coordinate | None = None
        self._generation = 0
        self._pending: GeocodeTicket | None = None
        self._subscribers: list[ResultCallback] = []
        self._result: DiscoveryResult | None = None

    @property
    def tournaments(self) -> list[TournamentRecord]:
        return list(self._tournaments)

    @property
    def resolved_coordinate(self) -> Coordinate | None:
        return self._resolved_coordinate

    @property
    def pending_ticket(self) -> GeocodeTicket | None:
        return self._pending

    @property
    def results(self) -> list[TournamentRecord]:
        """Most recently published tournaments."""
        if self._result is None:
            return []
        return list(self._result.tournaments)

    @property
    def last_result(self) -> DiscoveryResult | None:
        return self._result

    def subscribe(self, callback: ResultCallback) -> None:
        """Register a callback invoked after every recompute."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: ResultCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def set_tournaments(self, tournaments: Iterable[TournamentRecord]) -> DiscoveryResult:
        """Replace the raw collection (e.g. after a reload) and recompute."""
        self._tournaments = list(tournaments)
        logger.info("Loaded %d tournaments", len(self._tournaments))
        return self.recompute()

    def filters_changed(self) -> DiscoveryResult:
        """React to a change in the caller's FilterState.

        If the committed zip changed, the previous coordinate is discarded
        and a new resolution is started for a non-empty zip. The pipeline
        always runs with whatever coordinate is settled right now.

        Returns:
            The freshly published result
        """
        committed = self.filter_state.committed_zip
        if committed != self._committed_zip:
            self._on_committed_zip_changed(committed)

        if self._pending is not None and self.resolve_inline:
            return self.resolve_ticket(self._pending)

        return self.recompute()

    def reset_all_filters(self) -> DiscoveryResult:
        """Reset the caller's FilterState to defaults and recompute."""
        self.filter_state.reset_all_filters()
        return self.filters_changed()

    def _on_committed_zip_changed(self, committed: str | None) -> None:
        """Invalidate the old coordinate and issue a ticket for the new zip."""
        self._committed_zip = committed
        self._resolved_coordinate = None
        self._generation += 1

        if committed is None:
            self._pending = None
            logger.debug("Committed zip cleared")
            return

        self._pending = GeocodeTicket(generation=self._generation, zip_code=committed)
        logger.debug("Issued geocode ticket %d for %s", self._generation, committed)

    def resolve_ticket(self, ticket: GeocodeTicket) -> DiscoveryResult:
        """Run the resolver for a ticket and settle the outcome.

        Args:
            ticket: Ticket from pending_ticket

        Returns:
            The freshly published result
        """
        coordinate = self.resolver.resolve(ticket.zip_code, venues_of(self._tournaments))
        self.settle_geocode(ticket, coordinate)
        return self._result if self._result is not None else self.recompute()

    def settle_geocode(
        self,
        ticket: GeocodeTicket,
        coordinate: Coordinate | None,
    ) -> bool:
        """Apply the outcome of a geocode resolution.

        Stale tickets (issued before the latest zip change) are discarded.

        Args:
            ticket: Ticket the resolution was run for
            coordinate: Resolved coordinate, or None on failure

        Returns:
            True if the coordinate was applied
        """
        if ticket.generation != self._generation:
            logger.info(
                "Discarding stale geocode result for %s (generation %d, current %d)",
                ticket.zip_code,
                ticket.generation,
                self._generation,
            )
            return False

        self._resolved_coordinate = coordinate
        self._pending = None
        self.recompute()
        return True

    def recompute(self) -> DiscoveryResult:
        """Re-run the full pipeline and publish the result.

        Returns:
            The freshly published result
        """
        # A coordinate is only valid for the zip it was resolved for
        coordinate = self._resolved_coordinate
        if self.filter_state.committed_zip != self._committed_zip:
            coordinate = None

        pipeline_result = run_pipeline(
            self._tournaments,
            self.filter_state,
            coordinate,
        )

        result = DiscoveryResult(
            tournaments=pipeline_result.tournaments,
            committed_zip=self.filter_state.committed_zip,
            resolved_coordinate=coordinate,
            location_filter=pipeline_result.location_filter,
            location_degraded=pipeline_result.location_degraded,
        )
        self._result = result

        if result.location_degraded:
            logger.warning(
                "Zip %s unresolved with no exact venue match, location filter skipped",
                result.committed_zip,
            )

        logger.debug("Recomputed: %s", result.summary)

        for callback in list(self._subscribers):
            callback(result)

        return result
