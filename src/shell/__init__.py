"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Zip code geocoding client (HTTP)
- Tournament data loading (files)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.geocode_client import GeocodeClient, GeocodeResponse
from src.shell.tournament_source import load_tournaments
from src.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "GeocodeClient",
    "GeocodeResponse",
    "load_tournaments",
    "load_config",
    "load_config_from_env",
]
