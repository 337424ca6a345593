"""Marker and legend styling - Pure functions.

This module maps earthquake attributes to visual encodings.
The actual map drawing (folium/staticmap) is handled by the shell layer.
"""

from dataclasses import dataclass

from quake_map.core.earthquake import Earthquake


# Depth (km) lower bounds shown in the legend, shallowest first
DEPTH_BREAKPOINTS: tuple[int, ...] = (0, 10, 30, 50, 70, 90)

# Stroke settings shared by every marker
STROKE_COLOR = "#000"
STROKE_WEIGHT = 1
STROKE_OPACITY = 1.0
FILL_OPACITY = 0.8


@dataclass(frozen=True)
class MarkerStyle:
    """Immutable style for one circle marker.

    Attributes:
        radius: Circle radius in pixels
        fill_color: Hex fill color (depth bucket)
        color: Stroke color
        weight: Stroke width in pixels
        opacity: Stroke opacity
        fill_opacity: Fill opacity
    """
    radius: float
    fill_color: str
    color: str = STROKE_COLOR
    weight: int = STROKE_WEIGHT
    opacity: float = STROKE_OPACITY
    fill_opacity: float = FILL_OPACITY


@dataclass(frozen=True)
class LegendEntry:
    """One swatch in the depth legend."""
    color: str
    label: str


def marker_radius(magnitude: float) -> float:
    """Get marker radius for a magnitude.

    Pure function. No clamping: zero or negative magnitudes give a
    zero or negative radius.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Radius in pixels (magnitude * 5)
    """
    return magnitude * 5


def depth_color(depth: float) -> str:
    """Get hex fill color for a hypocenter depth.

    Pure function. Buckets use exclusive lower bounds, so a depth
    of exactly 90 falls in the 70-90 bucket.

    Args:
        depth: Depth in kilometers

    Returns:
        Hex color string (e.g., "#FD8D3C")
    """
    if depth > 90:
        return "#800026"
    elif depth > 70:
        return "#BD0026"
    elif depth > 50:
        return "#E31A1C"
    elif depth > 30:
        return "#FC4E2A"
    elif depth > 10:
        return "#FD8D3C"
    return "#FEB24C"


def marker_style(earthquake: Earthquake) -> MarkerStyle:
    """Build the marker style for an earthquake.

    Pure function.
    """
    return MarkerStyle(
        radius=marker_radius(earthquake.magnitude),
        fill_color=depth_color(earthquake.depth_km),
    )


def legend_entries(
    breakpoints: tuple[int, ...] = DEPTH_BREAKPOINTS,
) -> list[LegendEntry]:
    """Build the depth legend swatches.

    Pure function. Each swatch is colored with depth_color(d + 1) so it
    lands inside the bucket it labels rather than on its lower bound.

    Args:
        breakpoints: Ascending depth lower bounds

    Returns:
        One LegendEntry per breakpoint; the last one is open-ended ("90+")
    """
    entries = []
    for i, depth in enumerate(breakpoints):
        if i + 1 < len(breakpoints):
            label = f"{depth}–{breakpoints[i + 1]}"
        else:
            label = f"{depth}+"
        entries.append(LegendEntry(color=depth_color(depth + 1), label=label))
    return entries
