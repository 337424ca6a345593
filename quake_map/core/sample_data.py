"""Embedded sample dataset."""

# 2024 Offshore Cape Mendocino, California (M7.0)
SAMPLE_EARTHQUAKE_DATA = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "properties": {
                "mag": 7,
                "place": "2024 Offshore Cape Mendocino, California Earthquake",
                "time": 1733424261110,
                "url": "https://earthquake.usgs.gov/earthquakes/eventpage/nc75095651",
                "status": "reviewed",
                "tsunami": 1,
            },
            "geometry": {
                "type": "Point",
                "coordinates": [-125.021666666667, 40.374, 10],
            },
            "id": "nc75095651",
        }
    ],
}
