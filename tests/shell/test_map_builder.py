"""Tests for the folium map builder.

Map objects are built for real (no network is touched until a browser opens
the HTML); folium constructors are patched where call arguments matter.
"""

import pytest
from unittest.mock import patch

import folium

from quake_map.core.config import MapConfig
from quake_map.core.earthquake import Earthquake, parse_earthquakes
from quake_map.core.sample_data import SAMPLE_EARTHQUAKE_DATA
from quake_map.shell.map_builder import (
    DepthLegend,
    add_legend,
    add_markers,
    create_map,
    save_map,
)


@pytest.fixture
def sample_earthquakes():
    earthquakes, _ = parse_earthquakes(SAMPLE_EARTHQUAKE_DATA)
    return earthquakes


def _children_of_type(element, cls):
    return [c for c in element._children.values() if isinstance(c, cls)]


class TestCreateMap:
    """Tests for create_map()."""

    def test_returns_folium_map(self):
        map_ = create_map(MapConfig())
        assert isinstance(map_, folium.Map)

    def test_centers_on_config(self):
        map_ = create_map(MapConfig(center=(10.0, 20.0)))
        assert list(map_.location) == [10.0, 20.0]

    def test_exactly_one_tile_layer(self):
        """Only the configured base layer is attached."""
        map_ = create_map(MapConfig())
        tiles = _children_of_type(map_, folium.TileLayer)
        assert len(tiles) == 1

    def test_tile_layer_uses_config(self):
        config = MapConfig(
            tile_url="https://tiles.example.com/{z}/{x}/{y}.png",
            attribution="Example tiles",
        )
        with patch("quake_map.shell.map_builder.folium.TileLayer") as mock_tile_layer:
            create_map(config)

        kwargs = mock_tile_layer.call_args.kwargs
        assert kwargs["tiles"] == "https://tiles.example.com/{z}/{x}/{y}.png"
        assert kwargs["attr"] == "Example tiles"
        mock_tile_layer.return_value.add_to.assert_called_once()

    def test_passes_zoom_bounds(self):
        config = MapConfig(zoom=5, min_zoom=3, max_zoom=12)
        with patch("quake_map.shell.map_builder.folium.Map") as mock_map, \
                patch("quake_map.shell.map_builder.folium.TileLayer"):
            create_map(config)

        kwargs = mock_map.call_args.kwargs
        assert kwargs["zoom_start"] == 5
        assert kwargs["min_zoom"] == 3
        assert kwargs["max_zoom"] == 12
        assert kwargs["tiles"] is None


class TestAddMarkers:
    """Tests for add_markers()."""

    def test_adds_one_marker_per_earthquake(self, sample_earthquakes):
        map_ = create_map(MapConfig())
        count = add_markers(map_, sample_earthquakes, tz="UTC")

        assert count == 1
        assert len(_children_of_type(map_, folium.CircleMarker)) == 1

    def test_marker_placed_at_lat_lon(self, sample_earthquakes):
        """GeoJSON [lon, lat] is swapped to [lat, lon] for placement."""
        map_ = create_map(MapConfig())
        add_markers(map_, sample_earthquakes, tz="UTC")

        marker = _children_of_type(map_, folium.CircleMarker)[0]
        assert list(marker.location) == [40.374, -125.021666666667]

    def test_marker_style(self, sample_earthquakes):
        """M7 at 10 km: radius 35, shallowest color, fixed stroke."""
        with patch("quake_map.shell.map_builder.folium.CircleMarker") as mock_marker:
            add_markers(folium.Map(tiles=None), sample_earthquakes, tz="UTC")

        kwargs = mock_marker.call_args.kwargs
        assert kwargs["location"] == [40.374, -125.021666666667]
        assert kwargs["radius"] == 35
        assert kwargs["fill_color"] == "#FEB24C"
        assert kwargs["color"] == "#000"
        assert kwargs["weight"] == 1
        assert kwargs["opacity"] == 1
        assert kwargs["fill_opacity"] == 0.8
        assert kwargs["fill"] is True

    def test_binds_popup_content(self, sample_earthquakes):
        with patch("quake_map.shell.map_builder.folium.Popup") as mock_popup, \
                patch("quake_map.shell.map_builder.folium.CircleMarker") as mock_marker:
            add_markers(folium.Map(tiles=None), sample_earthquakes, tz="America/Los_Angeles")

        content = mock_popup.call_args.args[0]
        assert "Warning Issued" in content
        assert "12/5/2024, 10:44:21 AM" in content
        assert mock_marker.call_args.kwargs["popup"] is mock_popup.return_value

    def test_preserves_order(self):
        earthquakes = [
            Earthquake(id=str(i), magnitude=1.0 + i, place="p", time_ms=0,
                       latitude=float(i), longitude=-float(i), depth_km=5.0)
            for i in range(3)
        ]
        with patch("quake_map.shell.map_builder.folium.CircleMarker") as mock_marker:
            count = add_markers(folium.Map(tiles=None), earthquakes, tz="UTC")

        assert count == 3
        locations = [c.kwargs["location"] for c in mock_marker.call_args_list]
        assert locations == [[0.0, -0.0], [1.0, -1.0], [2.0, -2.0]]

    def test_empty_list_adds_nothing(self):
        map_ = create_map(MapConfig())
        assert add_markers(map_, []) == 0
        assert _children_of_type(map_, folium.CircleMarker) == []

    def test_popup_rendered_into_document(self, sample_earthquakes):
        map_ = create_map(MapConfig())
        add_markers(map_, sample_earthquakes, tz="UTC")

        html = map_.get_root().render()
        assert "Warning Issued" in html
        assert "More details" in html


class TestAddLegend:
    """Tests for add_legend()."""

    def test_returns_depth_legend(self):
        legend = add_legend(create_map(MapConfig()))
        assert isinstance(legend, DepthLegend)
        assert legend.position == "bottomright"

    def test_six_swatches(self):
        legend = add_legend(create_map(MapConfig()))
        assert len(legend.entries) == 6
        assert legend.entries[-1].label == "90+"

    def test_rendered_html(self):
        map_ = create_map(MapConfig())
        add_legend(map_)

        html = map_.get_root().render()
        assert "Depth (km)" in html
        assert "0–10" in html
        assert "90+" in html
        assert "#800026" in html
        assert "bottom: 30px; right: 10px;" in html

    def test_custom_position(self):
        map_ = create_map(MapConfig())
        add_legend(map_, position="topleft")

        html = map_.get_root().render()
        assert "top: 80px; left: 10px;" in html

    def test_rejects_unknown_position(self):
        with pytest.raises(ValueError, match="Unknown legend position"):
            add_legend(create_map(MapConfig()), position="center")


class TestSaveMap:
    """Tests for save_map()."""

    def test_writes_html(self, tmp_path, sample_earthquakes):
        map_ = create_map(MapConfig())
        add_markers(map_, sample_earthquakes, tz="UTC")
        add_legend(map_)

        path = save_map(map_, tmp_path / "out" / "map.html")

        assert path.exists()
        content = path.read_text(encoding="utf-8")
        assert "Depth (km)" in content
        assert "openstreetmap" in content
