"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (MapConfig, SnapshotConfig) are defined in quake_map/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from quake_map.core.config import (
    DEFAULT_ATTRIBUTION,
    DEFAULT_TILE_URL,
    MapConfig,
    SnapshotConfig,
)


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
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


def _parse_center(data: Any) -> tuple[float, float]:
    """Parse a [lat, lon] pair or a {latitude, longitude} mapping."""
    if isinstance(data, dict):
        return (float(_resolve_value(data["latitude"])), float(_resolve_value(data["longitude"])))
    lat, lon = data
    return (float(_resolve_value(lat)), float(_resolve_value(lon)))


def _parse_snapshot(data: dict[str, Any]) -> SnapshotConfig:
    """Parse snapshot dimensions from config data."""
    defaults = SnapshotConfig()
    return SnapshotConfig(
        width=int(_resolve_value(data.get("width", defaults.width))),
        height=int(_resolve_value(data.get("height", defaults.height))),
    )


def load_config_from_dict(data: dict[str, Any]) -> MapConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed MapConfig object
    """
    defaults = MapConfig()
    map_data = data.get("map", {}) or {}
    tiles_data = data.get("tiles", {}) or {}
    legend_data = data.get("legend", {}) or {}

    center = defaults.center
    if "center" in map_data:
        center = _parse_center(map_data["center"])

    timezone_name = _resolve_value(data.get("display_timezone"))

    return MapConfig(
        center=center,
        zoom=int(_resolve_value(map_data.get("zoom", defaults.zoom))),
        min_zoom=int(_resolve_value(map_data.get("min_zoom", defaults.min_zoom))),
        max_zoom=int(_resolve_value(map_data.get("max_zoom", defaults.max_zoom))),
        tile_url=_resolve_value(tiles_data.get("url", DEFAULT_TILE_URL)),
        attribution=_resolve_value(tiles_data.get("attribution", DEFAULT_ATTRIBUTION)),
        legend_position=_resolve_value(legend_data.get("position", defaults.legend_position)),
        display_timezone=timezone_name or None,
        snapshot=_parse_snapshot(data.get("snapshot", {}) or {}),
    )


def load_config(config_path: str | Path | None = None) -> MapConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed MapConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return MapConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return MapConfig()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: center=(%.4f, %.4f), zoom=%d, legend=%s",
        config.center[0],
        config.center[1],
        config.zoom,
        config.legend_position,
    )

    return config


def load_config_from_env(base: MapConfig | None = None) -> MapConfig:
    """Apply environment variable overrides to a configuration.

    Environment variables:
        MAP_CENTER: Comma-separated center (lat,lon)
        MAP_ZOOM: Initial zoom level
        TILE_URL: Base tile URL template
        DISPLAY_TIMEZONE: IANA timezone for popup times

    Args:
        base: Configuration to override (defaults if None)

    Returns:
        MapConfig with overrides applied
    """
    config = base or MapConfig()
    overrides: dict[str, Any] = {}

    center_str = os.environ.get("MAP_CENTER")
    if center_str:
        parts = [float(p.strip()) for p in center_str.split(",")]
        if len(parts) == 2:
            overrides["center"] = (parts[0], parts[1])
        else:
            logger.warning("Ignoring MAP_CENTER=%s, expected 'lat,lon'", center_str)

    zoom_str = os.environ.get("MAP_ZOOM")
    if zoom_str:
        overrides["zoom"] = int(zoom_str)

    tile_url = os.environ.get("TILE_URL")
    if tile_url:
        overrides["tile_url"] = tile_url

    timezone_name = os.environ.get("DISPLAY_TIMEZONE")
    if timezone_name:
        overrides["display_timezone"] = timezone_name

    if not overrides:
        return config

    logger.info("Applying environment overrides: %s", ", ".join(sorted(overrides)))
    return replace(config, **overrides)
