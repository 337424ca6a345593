"""Command-line Entry Point.

This module provides the entry point for rendering the earthquake map.
It's a thin wrapper that loads configuration and data, then invokes the
orchestrator.

Usage:
    # Render the embedded sample to earthquake_map.html
    quake-map

    # Render a local GeoJSON file with a PNG snapshot
    quake-map --data quakes.geojson --output out/map.html --snapshot out/map.png

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
    MAP_CENTER, MAP_ZOOM, TILE_URL, DISPLAY_TIMEZONE: Config overrides
"""

import argparse
import logging
import os
import sys
from dataclasses import replace

from quake_map.core.config import validate_config
from quake_map.orchestrator import initialize_visualization
from quake_map.shell.config_loader import load_config, load_config_from_env
from quake_map.shell.geojson_loader import load_feature_collection


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quake-map",
        description="Render earthquakes on an interactive map",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--data",
        help="GeoJSON FeatureCollection to render (default: embedded sample)",
    )
    parser.add_argument(
        "--output",
        default="earthquake_map.html",
        help="HTML file to write (default: earthquake_map.html)",
    )
    parser.add_argument(
        "--snapshot",
        help="Also render a static PNG snapshot to this path",
    )
    parser.add_argument(
        "--timezone",
        help="IANA timezone for popup times (default: system local)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one rendering pass.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    _configure_logging()
    args = _build_parser().parse_args(argv)

    try:
        config = load_config_from_env(load_config(args.config))
        if args.timezone:
            config = replace(config, display_timezone=args.timezone)

        validation = validate_config(config)
        for warning in validation.warnings:
            logger.warning("Config %s: %s", warning.field, warning.message)
        if not validation.valid:
            for error in validation.critical_errors:
                logger.error("Config %s: %s", error.field, error.message)
            return 1

        feature_collection = None
        if args.data:
            feature_collection = load_feature_collection(args.data)

        result = initialize_visualization(
            config=config,
            feature_collection=feature_collection,
            output_path=args.output,
            snapshot_path=args.snapshot,
        )

        for error in result.errors:
            logger.error("Error: %s", error)

        return 0 if result.success else 2

    except Exception:
        logger.exception("Unexpected error while rendering map")
        return 1


if __name__ == "__main__":
    sys.exit(main())
