"""Earthquake data models and parsing - Pure functions.

This module handles parsing GeoJSON features into typed Earthquake objects.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        id: Unique event ID
        magnitude: Earthquake magnitude
        place: Human-readable location description
        time_ms: Event time in milliseconds since the epoch
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers (third GeoJSON coordinate)
        url: Event detail URL
        status: Review status (e.g., 'reviewed', 'automatic')
        tsunami: Whether a tsunami warning was issued
    """
    id: str
    magnitude: float
    place: str
    time_ms: int
    latitude: float
    longitude: float
    depth_km: float
    url: str = ""
    status: str = ""
    tsunami: bool = False

    @property
    def time(self) -> datetime:
        """Event timestamp (UTC)."""
        return datetime.fromtimestamp(self.time_ms / 1000, tz=timezone.utc)

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple for map placement."""
        return (self.latitude, self.longitude)


def parse_earthquake(feature: dict[str, Any]) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function: takes raw dict, returns typed Earthquake or None if invalid.

    Args:
        feature: GeoJSON Point feature

    Returns:
        Earthquake object or None if parsing fails
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates") or []

        if len(coords) < 3:
            return None

        time_ms = props.get("time")
        if time_ms is None:
            return None

        magnitude = props.get("mag")
        if magnitude is None:
            return None

        # GeoJSON stores [longitude, latitude, depth]
        return Earthquake(
            id=str(feature.get("id", "")),
            magnitude=float(magnitude),
            place=props.get("place") or "Unknown location",
            time_ms=int(time_ms),
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(coords[2]),
            url=props.get("url") or "",
            status=props.get("status") or "",
            tsunami=bool(props.get("tsunami", 0)),
        )
    except (AttributeError, TypeError, ValueError):
        return None


def parse_earthquakes(geojson: dict[str, Any]) -> tuple[list[Earthquake], int]:
    """Parse a GeoJSON FeatureCollection into Earthquakes.

    Pure function. Invalid features are dropped; the collection's order
    is preserved.

    Args:
        geojson: GeoJSON FeatureCollection

    Returns:
        Tuple of (valid earthquakes, number of skipped features)
    """
    features = geojson.get("features", [])
    earthquakes = []
    skipped = 0

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is None:
            skipped += 1
        else:
            earthquakes.append(earthquake)

    return earthquakes, skipped
