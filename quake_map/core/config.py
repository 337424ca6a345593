"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


DEFAULT_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
DEFAULT_ATTRIBUTION = "© OpenStreetMap contributors"

LEGEND_POSITIONS = ("topleft", "topright", "bottomleft", "bottomright")


@dataclass(frozen=True)
class SnapshotConfig:
    """Size of the optional static PNG snapshot.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
    """
    width: int = 800
    height: int = 400


@dataclass(frozen=True)
class MapConfig:
    """Immutable map view configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        center: Initial (latitude, longitude) of the view
        zoom: Initial zoom level
        min_zoom: Lowest zoom the user can reach
        max_zoom: Highest zoom the user can reach
        tile_url: Base tile layer URL template
        attribution: Tile attribution text
        legend_position: Corner holding the depth legend
        display_timezone: IANA zone for popup times (None for system local)
        snapshot: Static snapshot dimensions
    """
    center: tuple[float, float] = (40.374, -125.021)
    zoom: int = 6
    min_zoom: int = 2
    max_zoom: int = 18
    tile_url: str = DEFAULT_TILE_URL
    attribution: str = DEFAULT_ATTRIBUTION
    legend_position: str = "bottomright"
    display_timezone: str | None = None
    snapshot: SnapshotConfig = field(default_factory=SnapshotConfig)


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


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_zoom(config: MapConfig) -> list[ValidationError]:
    """Validate zoom level and bounds.

    Pure function.
    """
    errors = []

    for name in ("zoom", "min_zoom", "max_zoom"):
        value = getattr(config, name)
        if not 0 <= value <= 22:
            errors.append(ValidationError(
                field=name,
                message=f"{name} {value} out of range [0, 22]",
            ))

    if config.min_zoom > config.max_zoom:
        errors.append(ValidationError(
            field="min_zoom",
            message=f"min_zoom ({config.min_zoom}) > max_zoom ({config.max_zoom})",
        ))
    elif not config.min_zoom <= config.zoom <= config.max_zoom:
        errors.append(ValidationError(
            field="zoom",
            message=(
                f"zoom {config.zoom} outside "
                f"[{config.min_zoom}, {config.max_zoom}]"
            ),
        ))

    return errors


def validate_tile_url(url: str) -> list[ValidationError]:
    """Validate that a tile URL template has z/x/y placeholders.

    Pure function.
    """
    missing = [p for p in ("{z}", "{x}", "{y}") if p not in url]
    if missing:
        return [ValidationError(
            field="tile_url",
            message=f"Tile URL missing placeholder(s): {', '.join(missing)}",
        )]
    return []


def validate_config(config: MapConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function (timezone lookup reads the bundled tz database).

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    lat, lon = config.center
    errors.extend(validate_coordinates(lat, lon, "center"))
    errors.extend(validate_zoom(config))
    errors.extend(validate_tile_url(config.tile_url))

    if config.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="legend_position",
            message=(
                f"Unknown legend position '{config.legend_position}', "
                f"expected one of {', '.join(LEGEND_POSITIONS)}"
            ),
        ))

    if config.display_timezone is not None:
        try:
            ZoneInfo(config.display_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(ValidationError(
                field="display_timezone",
                message=f"Unknown timezone '{config.display_timezone}'",
            ))

    if not config.attribution:
        errors.append(ValidationError(
            field="attribution",
            message="Tile attribution is empty",
            severity="warning",
        ))

    if config.snapshot.width <= 0 or config.snapshot.height <= 0:
        errors.append(ValidationError(
            field="snapshot",
            message=(
                f"Snapshot size must be positive, got "
                f"{config.snapshot.width}x{config.snapshot.height}"
            ),
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
