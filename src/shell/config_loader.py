"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in src/core/config.py to avoid information
leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-strings and plain strings are returned unchanged. Unset variables
    leave the placeholder in place (validate_config reports it).
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()
    geocode = data.get("geocode", {}) or {}
    search = data.get("search", {}) or {}

    return Config(
        geocode_base_url=_resolve_value(
            geocode.get("base_url", defaults.geocode_base_url)
        ),
        geocode_timeout_seconds=float(
            geocode.get("timeout_seconds", defaults.geocode_timeout_seconds)
        ),
        default_search_radius_miles=float(
            search.get("default_radius_miles", defaults.default_search_radius_miles)
        ),
        max_search_radius_miles=float(
            search.get("max_radius_miles", defaults.max_search_radius_miles)
        ),
        entry_fee_max=float(search.get("entry_fee_max", defaults.entry_fee_max)),
        fargo_no_ceiling=int(search.get("fargo_no_ceiling", defaults.fargo_no_ceiling)),
        page_size=int(search.get("page_size", defaults.page_size)),
        tournaments_path=_resolve_value(
            data.get("tournaments_path", defaults.tournaments_path)
        ),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: geocoder %s, default radius %.0f mi, data %s",
        config.geocode_base_url,
        config.default_search_radius_miles,
        config.tournaments_path,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        GEOCODE_BASE_URL: Zip lookup service base URL
        GEOCODE_TIMEOUT: Lookup timeout in seconds
        DEFAULT_RADIUS: Default search radius in miles
        MAX_RADIUS: Largest radius a caller may request
        ENTRY_FEE_MAX: Upper end of the entry fee range
        FARGO_NO_CEILING: Fargo value meaning "no ceiling"
        PAGE_SIZE: Tournaments per page
        TOURNAMENTS_PATH: Tournament data file

    Returns:
        Config object from environment
    """
    defaults = Config()

    return Config(
        geocode_base_url=os.environ.get("GEOCODE_BASE_URL", defaults.geocode_base_url),
        geocode_timeout_seconds=float(
            os.environ.get("GEOCODE_TIMEOUT", defaults.geocode_timeout_seconds)
        ),
        default_search_radius_miles=float(
            os.environ.get("DEFAULT_RADIUS", defaults.default_search_radius_miles)
        ),
        max_search_radius_miles=float(
            os.environ.get("MAX_RADIUS", defaults.max_search_radius_miles)
        ),
        entry_fee_max=float(os.environ.get("ENTRY_FEE_MAX", defaults.entry_fee_max)),
        fargo_no_ceiling=int(
            os.environ.get("FARGO_NO_CEILING", defaults.fargo_no_ceiling)
        ),
        page_size=int(os.environ.get("PAGE_SIZE", defaults.page_size)),
        tournaments_path=os.environ.get("TOURNAMENTS_PATH", defaults.tournaments_path),
    )
