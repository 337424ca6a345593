"""Tests for marker and legend styling - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

import pytest

from quake_map.core.earthquake import Earthquake
from quake_map.core.style import (
    DEPTH_BREAKPOINTS,
    LegendEntry,
    MarkerStyle,
    depth_color,
    legend_entries,
    marker_radius,
    marker_style,
)


DEPTH_COLORS = {"#800026", "#BD0026", "#E31A1C", "#FC4E2A", "#FD8D3C", "#FEB24C"}


class TestMarkerRadius:
    """Tests for marker_radius()."""

    @pytest.mark.parametrize("magnitude", [0.0, 1.0, 2.5, 4.2, 7.0, 9.1])
    def test_radius_is_five_times_magnitude(self, magnitude):
        """Radius scales linearly with magnitude."""
        assert marker_radius(magnitude) == pytest.approx(5 * magnitude)

    def test_sample_magnitude(self):
        """M7 gives a 35px marker."""
        assert marker_radius(7) == 35

    def test_zero_and_negative_are_not_clamped(self):
        """Degenerate magnitudes pass straight through."""
        assert marker_radius(0) == 0
        assert marker_radius(-1.0) == -5.0


class TestDepthColor:
    """Tests for depth_color()."""

    def test_deepest_bucket(self):
        """Depth > 90 is dark red."""
        assert depth_color(90.0001) == "#800026"
        assert depth_color(300) == "#800026"

    def test_ninety_is_not_deepest_bucket(self):
        """Lower bounds are exclusive, so 90 is in the 70-90 bucket."""
        assert depth_color(90) == "#BD0026"

    def test_intermediate_buckets(self):
        """Each bucket starts just above its threshold."""
        assert depth_color(71) == "#BD0026"
        assert depth_color(70) == "#E31A1C"
        assert depth_color(51) == "#E31A1C"
        assert depth_color(50) == "#FC4E2A"
        assert depth_color(31) == "#FC4E2A"
        assert depth_color(30) == "#FD8D3C"
        assert depth_color(10.5) == "#FD8D3C"

    def test_shallow_bucket(self):
        """Depth <= 10 falls to the shallowest color."""
        assert depth_color(10) == "#FEB24C"
        assert depth_color(0) == "#FEB24C"
        assert depth_color(-5) == "#FEB24C"

    @pytest.mark.parametrize("depth", [-20, 0, 5, 10, 15, 33, 55, 72, 90, 650])
    def test_always_one_of_six_colors(self, depth):
        """Every depth maps into the palette."""
        assert depth_color(depth) in DEPTH_COLORS


class TestMarkerStyle:
    """Tests for marker_style()."""

    @pytest.fixture
    def earthquake(self):
        return Earthquake(
            id="nc75095651",
            magnitude=7.0,
            place="2024 Offshore Cape Mendocino, California Earthquake",
            time_ms=1733424261110,
            latitude=40.374,
            longitude=-125.021666666667,
            depth_km=10.0,
            tsunami=True,
        )

    def test_uses_magnitude_and_depth(self, earthquake):
        """Radius comes from magnitude, fill from depth."""
        style = marker_style(earthquake)
        assert style.radius == 35
        assert style.fill_color == "#FEB24C"

    def test_fixed_stroke_and_fill_opacity(self, earthquake):
        """Stroke is black, weight 1, opaque; fill is 0.8."""
        style = marker_style(earthquake)
        assert style.color == "#000"
        assert style.weight == 1
        assert style.opacity == 1
        assert style.fill_opacity == 0.8

    def test_is_immutable(self, earthquake):
        """MarkerStyle is frozen (immutable)."""
        style = marker_style(earthquake)
        with pytest.raises(AttributeError):
            style.radius = 10


class TestLegendEntries:
    """Tests for legend_entries()."""

    def test_one_entry_per_breakpoint(self):
        """Six breakpoints give six swatches."""
        entries = legend_entries()
        assert len(entries) == len(DEPTH_BREAKPOINTS) == 6
        assert all(isinstance(e, LegendEntry) for e in entries)

    def test_labels(self):
        """Ranges use an en dash; the last entry is open-ended."""
        labels = [e.label for e in legend_entries()]
        assert labels == ["0–10", "10–30", "30–50", "50–70", "70–90", "90+"]

    def test_swatch_matches_bucket(self):
        """Each swatch is colored for the bucket it labels."""
        colors = [e.color for e in legend_entries()]
        assert colors == [
            "#FEB24C",
            "#FD8D3C",
            "#FC4E2A",
            "#E31A1C",
            "#BD0026",
            "#800026",
        ]

    def test_custom_breakpoints(self):
        """Breakpoints can be overridden."""
        entries = legend_entries((0, 50))
        assert [e.label for e in entries] == ["0–50", "50+"]
        assert entries[1].color == "#E31A1C"


class TestMarkerStyleDataclass:
    """Tests for MarkerStyle defaults."""

    def test_defaults(self):
        """Only radius and fill are required."""
        style = MarkerStyle(radius=5, fill_color="#FEB24C")
        assert style.color == "#000"
        assert style.fill_opacity == 0.8
