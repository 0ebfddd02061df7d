"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from src.core.filter_state import (
    DEFAULT_SEARCH_RADIUS_MILES,
    ENTRY_FEE_MAX,
    FARGO_NO_CEILING,
)
from src.core.pagination import DEFAULT_PAGE_SIZE


DEFAULT_GEOCODE_BASE_URL = "https://api.zippopotam.us/us"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        geocode_base_url: Base URL of the zip lookup service; the zip is appended
        geocode_timeout_seconds: Timeout for a single zip lookup
        default_search_radius_miles: Radius used on startup and after reset
        max_search_radius_miles: Largest radius a caller may request
        entry_fee_max: Upper end of the entry fee slider
        fargo_no_ceiling: Fargo value meaning "no ceiling"
        page_size: Tournaments per page in listings
        tournaments_path: YAML/JSON file holding the tournament collection
    """
    geocode_base_url: str = DEFAULT_GEOCODE_BASE_URL
    geocode_timeout_seconds: float = 10
    default_search_radius_miles: float = DEFAULT_SEARCH_RADIUS_MILES
    max_search_radius_miles: float = 100
    entry_fee_max: float = ENTRY_FEE_MAX
    fargo_no_ceiling: int = FARGO_NO_CEILING
    page_size: int = DEFAULT_PAGE_SIZE
    tournaments_path: str = "data/tournaments.yaml"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.geocode_base_url.startswith("${"):
        errors.append(ValidationError(
            field="geocode_base_url",
            message="Geocode URL not resolved (still contains placeholder)",
            severity="warning",
        ))
    elif not config.geocode_base_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="geocode_base_url",
            message=f"Not an HTTP(S) URL: {config.geocode_base_url}",
        ))

    if config.geocode_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="geocode_timeout_seconds",
            message=f"Timeout must be positive, got {config.geocode_timeout_seconds}",
        ))

    if config.max_search_radius_miles <= 0:
        errors.append(ValidationError(
            field="max_search_radius_miles",
            message=f"Maximum radius must be positive, got {config.max_search_radius_miles}",
        ))

    if not 0 <= config.default_search_radius_miles <= config.max_search_radius_miles:
        errors.append(ValidationError(
            field="default_search_radius_miles",
            message=(
                f"Default radius {config.default_search_radius_miles} outside "
                f"[0, {config.max_search_radius_miles}]"
            ),
        ))

    if config.entry_fee_max <= 0:
        errors.append(ValidationError(
            field="entry_fee_max",
            message=f"Entry fee maximum must be positive, got {config.entry_fee_max}",
        ))

    if config.page_size <= 0:
        errors.append(ValidationError(
            field="page_size",
            message=f"Page size must be positive, got {config.page_size}",
        ))

    if not config.tournaments_path:
        errors.append(ValidationError(
            field="tournaments_path",
            message="No tournament data file configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
