"""GeoJSON Loader - Imperative Shell.

Reads an earthquake FeatureCollection from a local file.
"""

import json
import logging
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


def load_feature_collection(path: str | Path) -> dict[str, Any]:
    """Load a GeoJSON FeatureCollection from disk.

    This method performs file I/O.

    Args:
        path: Path to a .geojson/.json file

    Returns:
        The decoded FeatureCollection

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the document is not a FeatureCollection
    """
    path = Path(path)
    logger.info("Loading earthquake data from %s", path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError(f"{path} is not a GeoJSON FeatureCollection")

    if not isinstance(data.get("features"), list):
        raise ValueError(f"{path} has no 'features' list")

    logger.info("Loaded %d features", len(data["features"]))
    return data
