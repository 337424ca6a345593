"""Static Map Client - Imperative Shell.

This module renders a PNG snapshot of the earthquake markers using
the configured tile server. All I/O is contained here; marker styling is in
the core module.
"""

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from staticmap import StaticMap, CircleMarker

from quake_map.core.config import MapConfig
from quake_map.core.earthquake import Earthquake
from quake_map.core.style import marker_style


logger = logging.getLogger(__name__)


def snapshot_tile_url(tile_url: str) -> str:
    """Adapt a Leaflet tile template for staticmap.

    staticmap only fills {z}/{x}/{y}, so the {s} subdomain is dropped
    ("https://{s}.tile.openstreetmap.org/..." -> "https://tile.openstreetmap.org/...").
    A {s} that is not a leading host label falls back to subdomain "a".
    """
    return tile_url.replace("://{s}.", "://").replace("{s}", "a")


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    error: str | None = None


class StaticMapClient:
    """Client for rendering static snapshots of the earthquake map.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(self, tile_url: str | None = None) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. None derives it from
                the configured interactive tile layer.
        """
        self.tile_url = tile_url

    def generate_snapshot(
        self,
        config: MapConfig,
        earthquakes: Sequence[Earthquake],
    ) -> MapImageResult:
        """Render the configured view with one circle per earthquake.

        This method performs I/O (fetches map tiles from tile server).

        Args:
            config: Map configuration (center, zoom, snapshot size)
            earthquakes: Earthquakes to draw

        Returns:
            MapImageResult with image bytes or error
        """
        lat, lon = config.center
        logger.info(
            "Rendering %dx%d snapshot of %d earthquakes at zoom %d",
            config.snapshot.width,
            config.snapshot.height,
            len(earthquakes),
            config.zoom,
        )

        try:
            static_map = StaticMap(
                config.snapshot.width,
                config.snapshot.height,
                url_template=self.tile_url or snapshot_tile_url(config.tile_url),
            )

            for earthquake in earthquakes:
                style = marker_style(earthquake)
                radius = max(int(round(style.radius)), 1)
                # staticmap wants (lon, lat)
                position = (earthquake.longitude, earthquake.latitude)

                # Stroke ring first so the fill renders on top
                static_map.add_marker(CircleMarker(position, style.color, radius + style.weight))
                static_map.add_marker(CircleMarker(position, style.fill_color, radius))

            image = static_map.render(zoom=config.zoom, center=[lon, lat])

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info("Generated snapshot image: %d bytes", len(image_bytes))

            return MapImageResult(
                success=True,
                image_bytes=image_bytes,
            )

        except Exception as e:
            logger.error("Failed to generate snapshot: %s", str(e))
            return MapImageResult(
                success=False,
                error=str(e),
            )
