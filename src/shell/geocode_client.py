"""Zip Code Geocoding Client - Imperative Shell.

This module handles HTTP communication with the public zip lookup service.
All I/O is contained here; payload parsing is in the core module.
"""

import logging
from dataclasses import dataclass

import requests

from src.core.config import DEFAULT_GEOCODE_BASE_URL
from src.core.geo import Coordinate
from src.core.geocode import parse_geocode_response


logger = logging.getLogger(__name__)


# Default timeout for lookup requests (seconds)
DEFAULT_TIMEOUT = 10


@dataclass
class GeocodeResponse:
    """Response from a zip code lookup.

    Attributes:
        success: Whether a coordinate was obtained
        status_code: HTTP status code (0 if no response)
        coordinate: Center of the zip code if successful
        error: Error message if failed
    """
    success: bool
    status_code: int
    coordinate: Coordinate | None = None
    error: str | None = None


class GeocodeClient:
    """Client for resolving US zip codes to coordinates.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GEOCODE_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize geocode client.

        Args:
            base_url: Lookup service base URL; the zip is appended as a path segment
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def lookup(self, zip_code: str) -> GeocodeResponse:
        """Look up the center coordinate of a zip code.

        This method performs HTTP I/O. It never raises; every failure is
        reported through the returned GeocodeResponse.

        Args:
            zip_code: 5-digit US zip code

        Returns:
            GeocodeResponse indicating success or failure
        """
        url = f"{self.base_url}/{zip_code}"

        logger.info("Looking up zip code %s", zip_code)

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.Timeout:
            logger.warning("Zip lookup for %s timed out", zip_code)
            return GeocodeResponse(
                success=False,
                status_code=0,
                error="Request timed out",
            )
        except requests.RequestException as e:
            logger.warning("Zip lookup for %s failed: %s", zip_code, str(e))
            return GeocodeResponse(
                success=False,
                status_code=0,
                error=str(e),
            )

        if response.status_code != 200:
            logger.warning(
                "Zip lookup returned non-200 for %s: %d",
                zip_code,
                response.status_code,
            )
            return GeocodeResponse(
                success=False,
                status_code=response.status_code,
                error=f"HTTP {response.status_code}",
            )

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Zip lookup for %s returned invalid JSON", zip_code)
            return GeocodeResponse(
                success=False,
                status_code=response.status_code,
                error="Invalid JSON response",
            )

        coordinate = parse_geocode_response(payload)
        if coordinate is None:
            logger.warning("Zip lookup for %s returned no usable place", zip_code)
            return GeocodeResponse(
                success=False,
                status_code=response.status_code,
                error="No places in response",
            )

        logger.info(
            "Resolved zip %s to (%.4f, %.4f)",
            zip_code,
            coordinate.latitude,
            coordinate.longitude,
        )
        return GeocodeResponse(
            success=True,
            status_code=response.status_code,
            coordinate=coordinate,
        )
