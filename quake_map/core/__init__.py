"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Earthquake data parsing
- Marker and legend styling
- Popup formatting
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from quake_map.core.earthquake import Earthquake, parse_earthquake, parse_earthquakes
from quake_map.core.style import (
    DEPTH_BREAKPOINTS,
    LegendEntry,
    MarkerStyle,
    depth_color,
    legend_entries,
    marker_radius,
    marker_style,
)
from quake_map.core.formatter import format_local_time, format_popup
from quake_map.core.config import MapConfig, validate_config

__all__ = [
    # Earthquake
    "Earthquake",
    "parse_earthquake",
    "parse_earthquakes",
    # Style
    "DEPTH_BREAKPOINTS",
    "LegendEntry",
    "MarkerStyle",
    "depth_color",
    "legend_entries",
    "marker_radius",
    "marker_style",
    # Formatter
    "format_local_time",
    "format_popup",
    # Config
    "MapConfig",
    "validate_config",
]
