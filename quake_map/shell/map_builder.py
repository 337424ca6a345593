"""Interactive Map Builder - Imperative Shell.

This module builds the Leaflet map through folium: base tiles, depth-colored
circle markers with popups, and the depth legend overlay. Styling and popup
content come from the core module.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import folium
from branca.element import MacroElement, Template

from quake_map.core.config import LEGEND_POSITIONS, MapConfig
from quake_map.core.earthquake import Earthquake
from quake_map.core.formatter import format_popup
from quake_map.core.style import LegendEntry, legend_entries, marker_style


logger = logging.getLogger(__name__)

POPUP_MAX_WIDTH = 300

_LEGEND_CSS = {
    "topleft": "top: 80px; left: 10px;",
    "topright": "top: 10px; right: 10px;",
    "bottomleft": "bottom: 30px; left: 10px;",
    "bottomright": "bottom: 30px; right: 10px;",
}

_LEGEND_TEMPLATE = """
        {% macro html(this, kwargs) %}
        <div class="legend" id="{{ this.get_name() }}"
             style="position: fixed; {{ this.css_position }} z-index: 9999;
                    background: rgba(255, 255, 255, 0.9); padding: 6px 10px;
                    font: 13px Arial, sans-serif; line-height: 18px; color: #555;
                    border-radius: 5px; box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);">
            <h4 style="margin: 0 0 5px; color: #777;">{{ this.title }}</h4>
            {% for entry in this.entries %}
            <i style="background: {{ entry.color }}; width: 18px; height: 18px;
                      float: left; margin-right: 8px; opacity: 0.8;"></i>
            {{ entry.label }}<br>
            {% endfor %}
        </div>
        {% endmacro %}
"""


class DepthLegend(MacroElement):
    """Fixed-position legend explaining the depth color buckets."""

    def __init__(
        self,
        entries: list[LegendEntry],
        position: str = "bottomright",
        title: str = "Depth (km)",
    ) -> None:
        super().__init__()
        if position not in LEGEND_POSITIONS:
            raise ValueError(
                f"Unknown legend position '{position}', "
                f"expected one of {', '.join(LEGEND_POSITIONS)}"
            )
        self._name = "DepthLegend"
        self._template = Template(_LEGEND_TEMPLATE)
        self.entries = entries
        self.position = position
        self.css_position = _LEGEND_CSS[position]
        self.title = title


def create_map(config: MapConfig) -> folium.Map:
    """Create the map view with a single base tile layer.

    Args:
        config: Map view configuration

    Returns:
        folium Map ready for layers
    """
    logger.info(
        "Creating map centered on (%.4f, %.4f) at zoom %d [%d-%d]",
        config.center[0],
        config.center[1],
        config.zoom,
        config.min_zoom,
        config.max_zoom,
    )

    map_ = folium.Map(
        location=list(config.center),
        zoom_start=config.zoom,
        min_zoom=config.min_zoom,
        max_zoom=config.max_zoom,
        tiles=None,
    )

    folium.TileLayer(
        tiles=config.tile_url,
        attr=config.attribution,
        name="OpenStreetMap",
        min_zoom=config.min_zoom,
        max_zoom=config.max_zoom,
    ).add_to(map_)

    return map_


def add_markers(
    map_: folium.Map,
    earthquakes: Iterable[Earthquake],
    tz: str | None = None,
) -> int:
    """Add one circle marker with a popup per earthquake.

    Args:
        map_: Map to draw on
        earthquakes: Earthquakes in display order
        tz: IANA timezone for popup times (None for system local)

    Returns:
        Number of markers added
    """
    count = 0
    for earthquake in earthquakes:
        style = marker_style(earthquake)
        popup = folium.Popup(format_popup(earthquake, tz), max_width=POPUP_MAX_WIDTH)

        folium.CircleMarker(
            location=list(earthquake.coordinates),
            radius=style.radius,
            color=style.color,
            weight=style.weight,
            opacity=style.opacity,
            fill=True,
            fill_color=style.fill_color,
            fill_opacity=style.fill_opacity,
            popup=popup,
        ).add_to(map_)
        count += 1

    logger.info("Added %d earthquake markers", count)
    return count


def add_legend(map_: folium.Map, position: str = "bottomright") -> DepthLegend:
    """Attach the depth legend overlay to the map.

    Args:
        map_: Map to decorate
        position: One of topleft/topright/bottomleft/bottomright

    Returns:
        The legend element

    Raises:
        ValueError: If position is not a known corner
    """
    legend = DepthLegend(legend_entries(), position=position)
    map_.get_root().add_child(legend)
    return legend


def save_map(map_: folium.Map, output_path: str | Path) -> Path:
    """Write the map as a standalone HTML document.

    This method performs file I/O.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    map_.save(str(path))
    logger.info("Saved map to %s", path)
    return path
