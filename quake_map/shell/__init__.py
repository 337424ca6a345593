"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- folium map construction and HTML output
- Static map snapshots (tile fetching)
- Configuration loading (environment/files)
- GeoJSON dataset loading (files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quake_map.shell.map_builder import add_legend, add_markers, create_map, save_map
from quake_map.shell.static_map_client import StaticMapClient
from quake_map.shell.config_loader import load_config
from quake_map.shell.geojson_loader import load_feature_collection

__all__ = [
    "add_legend",
    "add_markers",
    "create_map",
    "save_map",
    "StaticMapClient",
    "load_config",
    "load_feature_collection",
]
