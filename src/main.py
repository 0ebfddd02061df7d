"""Cloud Function Entry Point.

This module provides the entry points for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the API handler.
"""

import json
import logging
import os

import functions_framework
from flask import Request, Response

from src.api_handler import discover, get_cities
from src.core.config import Config, validate_config
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        config = load_config(config_path)
    elif os.environ.get("TOURNAMENTS_PATH"):
        # Simple env-based config
        config = load_config_from_env()
    else:
        # Try default config path
        config = load_config()

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        messages = "; ".join(
            f"{e.field}: {e.message}" for e in validation.critical_errors
        )
        raise ValueError(f"Invalid configuration: {messages}")

    return config


def _error_response(message: str, status: int) -> Response:
    return Response(
        json.dumps({"status": "error", "message": message}),
        status=status,
        mimetype="application/json",
    )


@functions_framework.http
def discover_tournaments(request: Request) -> Response:
    """HTTP Cloud Function entry point for tournament discovery.

    Args:
        request: Flask request carrying the filter query parameters

    Returns:
        JSON response with matching tournaments
    """
    logger.info("Discovery request: %s", dict(request.args))

    try:
        config = _get_config()
        return discover(request, config)
    except FileNotFoundError as e:
        logger.error("Tournament data unavailable: %s", e)
        return _error_response("Tournament data unavailable", 503)
    except Exception:
        logger.exception("Unexpected error in tournament discovery")
        return _error_response("Internal error", 500)


@functions_framework.http
def list_cities(request: Request) -> Response:
    """HTTP Cloud Function entry point for the city picker."""
    try:
        config = _get_config()
        return get_cities(request, config)
    except FileNotFoundError as e:
        logger.error("Tournament data unavailable: %s", e)
        return _error_response("Tournament data unavailable", 503)
    except Exception:
        logger.exception("Unexpected error listing cities")
        return _error_response("Internal error", 500)
