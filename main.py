"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the src package.
"""

from src.main import (
    discover_tournaments,
    list_cities,
)

__all__ = [
    "discover_tournaments",
    "list_cities",
]
