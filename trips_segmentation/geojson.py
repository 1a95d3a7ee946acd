"""
GeoJSON export of segmented trips.
"""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from .config import (
    INPUT_SUFFIX,
    MIN_POINTS_FOR_LINESTRING,
    OUTPUT_SUFFIX,
    PALETTE,
    STROKE_WIDTH,
)
from .statistics import trip_statistics

logger = logging.getLogger(__name__)


def palette_color(i: int) -> str:
    """Stroke colour for the trip at 0-based output position `i`."""
    return PALETTE[i % len(PALETTE)]


def _iso_utc(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


def _trip_feature(trip: pd.DataFrame, trip_index: int) -> Dict[str, Any]:
    stats = trip_statistics(trip)
    coords = [[float(lon), float(lat)]
              for lon, lat in zip(trip["longitude"].to_numpy(), trip["latitude"].to_numpy())]

    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": coords},
        "properties": {
            "trip_id": f"trip_{trip_index}",
            "points_count": stats["points_count"],
            "total_distance_km": round(stats["total_distance_km"], 3),
            "duration_min": round(stats["duration_min"], 1),
            "avg_speed_kmh": round(stats["avg_speed_kmh"], 2),
            "max_speed_kmh": round(stats["max_speed_kmh"], 2),
            "start_time_iso": _iso_utc(stats["start_time"]),
            "end_time_iso": _iso_utc(stats["end_time"]),
            "stroke": palette_color(trip_index - 1),
            "stroke-width": STROKE_WIDTH,
        },
    }


def build_feature_collection(trips: List[pd.DataFrame],
                             min_points: int = MIN_POINTS_FOR_LINESTRING) -> Dict[str, Any]:
    """
    Turn trips into a GeoJSON FeatureCollection of LineStrings.

    Trips shorter than `min_points` cannot form a line and are skipped before
    ids are assigned, so ids stay contiguous (`trip_1`, `trip_2`, ...).
    Coordinates are written as [longitude, latitude].

    Args:
        trips (list[pd.DataFrame]): Output of `segment_trips`.
        min_points (int): Minimum samples for a trip to be exported.

    Returns:
        dict: The FeatureCollection. `features` is empty when no trip qualifies.
    """
    features: List[Dict[str, Any]] = []
    for trip in trips:
        if len(trip) < min_points:
            continue
        features.append(_trip_feature(trip, len(features) + 1))

    logger.debug("Exporting %d of %d trips", len(features), len(trips))
    return {"type": "FeatureCollection", "features": features}


def write_geojson(collection: Dict[str, Any], path: Union[str, Path]) -> Path:
    """
    Serialise a FeatureCollection to `path`.

    Raises:
        OSError: If the file cannot be written. The document is fully
            serialised before the file is opened.
    """
    path = Path(path)
    text = json.dumps(collection, indent=4, ensure_ascii=False)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)
    return path


def output_path_for(input_path: Union[str, Path]) -> Path:
    """
    Derive the GeoJSON path from the input path: a trailing `.csv` (any case)
    becomes `.geojson`, otherwise `.geojson` is appended.
    """
    text = str(input_path)
    out = re.sub(re.escape(INPUT_SUFFIX) + r"$", OUTPUT_SUFFIX, text, flags=re.IGNORECASE)
    if out == text:
        out = text + OUTPUT_SUFFIX
    return Path(out)
