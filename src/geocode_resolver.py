"""Geocode Resolver - Wires the geocoding client to the venue fallback.

Resolution order for a committed zip code:
1. Ask the zip lookup service.
2. On any failure, use the first geocoded venue in that zip.
3. Otherwise give up with None.

The resolver never raises.
"""

import logging
from typing import Iterable

from src.core.geo import Coordinate, is_valid_zip_code
from src.core.geocode import find_venue_coordinate
from src.core.tournament import Venue
from src.shell.geocode_client import GeocodeClient


logger = logging.getLogger(__name__)


class GeocodeResolver:
    """Resolves 5-digit zip codes to coordinates."""

    def __init__(self, client: GeocodeClient | None = None) -> None:
        self.client = client or GeocodeClient()

    def resolve(self, zip_code: str, venues: Iterable[Venue] = ()) -> Coordinate | None:
        """Resolve a zip code, falling back to local venue data.

        Args:
            zip_code: Committed zip code
            venues: Known venues used when the lookup service fails

        Returns:
            Coordinate for the zip code, or None if it cannot be resolved
        """
        if not is_valid_zip_code(zip_code):
            return None

        response = self.client.lookup(zip_code)
        if response.success and response.coordinate is not None:
            return response.coordinate

        coordinate = find_venue_coordinate(zip_code, venues)
        if coordinate is not None:
            logger.info(
                "Geocoding failed for %s (%s), using venue coordinate",
                zip_code,
                response.error,
            )
            return coordinate

        logger.warning(
            "Could not resolve zip %s: %s, no geocoded venue in that zip",
            zip_code,
            response.error,
        )
        return None
