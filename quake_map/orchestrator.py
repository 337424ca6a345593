"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the map-building shell components. It's the "glue" that
makes the application work.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import folium

from quake_map.core.config import MapConfig
from quake_map.core.earthquake import parse_earthquakes
from quake_map.core.sample_data import SAMPLE_EARTHQUAKE_DATA
from quake_map.shell.map_builder import add_legend, add_markers, create_map, save_map
from quake_map.shell.static_map_client import MapImageResult, StaticMapClient


logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of one rendering pass.

    Attributes:
        map: The rendered folium map
        markers_added: Markers placed on the map
        records_skipped: Features dropped as invalid
        output_path: Where the HTML was written (None if not saved)
        snapshot: Static snapshot result (None if not requested)
        errors: Any non-fatal errors that occurred
    """
    map: folium.Map
    markers_added: int
    records_skipped: int
    output_path: Path | None = None
    snapshot: MapImageResult | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the rendering pass."""
        return (
            f"Rendered {self.markers_added} markers, "
            f"{self.records_skipped} skipped"
        )


def initialize_visualization(
    config: MapConfig | None = None,
    feature_collection: dict[str, Any] | None = None,
    output_path: str | Path | None = None,
    snapshot_path: str | Path | None = None,
    static_map_client: StaticMapClient | None = None,
) -> RenderResult:
    """Build the earthquake map: tiles, markers, legend.

    Args:
        config: Map configuration (defaults if None)
        feature_collection: GeoJSON data (embedded sample if None)
        output_path: Write the HTML document here if given
        snapshot_path: Write a PNG snapshot here if given
        static_map_client: Snapshot renderer (created if not provided)

    Returns:
        RenderResult describing what was rendered
    """
    config = config or MapConfig()
    if feature_collection is None:
        logger.info("Using embedded sample dataset")
        feature_collection = SAMPLE_EARTHQUAKE_DATA

    earthquakes, skipped = parse_earthquakes(feature_collection)
    if skipped:
        logger.warning("Skipped %d invalid earthquake features", skipped)
    logger.info("Parsed %d earthquakes", len(earthquakes))

    map_ = create_map(config)
    markers_added = add_markers(map_, earthquakes, tz=config.display_timezone)
    add_legend(map_, position=config.legend_position)

    result = RenderResult(
        map=map_,
        markers_added=markers_added,
        records_skipped=skipped,
    )

    if output_path is not None:
        result.output_path = save_map(map_, output_path)

    if snapshot_path is not None:
        client = static_map_client or StaticMapClient()
        result.snapshot = client.generate_snapshot(config, earthquakes)
        if result.snapshot.success and result.snapshot.image_bytes is not None:
            path = Path(snapshot_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(result.snapshot.image_bytes)
            logger.info("Saved snapshot to %s", path)
        else:
            result.errors.append(f"Snapshot failed: {result.snapshot.error}")

    logger.info("Completed: %s", result.summary)
    return result
