from typing import Dict, Union
import numpy as np
import pandas as pd

from .geodesy import consecutive_distances_km


def trip_statistics(trip: pd.DataFrame) -> Dict[str, Union[int, float]]:
    """
    Motion statistics of one trip, at full precision.

    Args:
        trip (pd.DataFrame): Sequenced samples with `timestamp`, `latitude` and
            `longitude` columns. Should hold at least 2 samples.

    Returns:
        dict: With keys
            - `points_count` (int)
            - `total_distance_km`: sum of the segment distances;
            - `duration_min`: last minus first timestamp, in minutes;
            - `avg_speed_kmh`: distance over duration, 0 when the duration is 0;
            - `max_speed_kmh`: fastest segment, ignoring segments with no
              elapsed time;
            - `start_time`, `end_time`: Unix seconds (int).
    """
    t_sec = trip["timestamp"].to_numpy(dtype=np.int64)
    seg_km = consecutive_distances_km(trip["latitude"].to_numpy(), trip["longitude"].to_numpy())

    total_km = float(np.sum(seg_km))
    duration_min = float(t_sec[-1] - t_sec[0]) / 60.0
    avg_kmh = total_km / (duration_min / 60.0) if duration_min > 0 else 0.0

    seg_hours = np.maximum(0.0, np.diff(t_sec) / 3600.0)
    moving = seg_hours > 0
    max_kmh = float(np.max(seg_km[moving] / seg_hours[moving])) if moving.any() else 0.0

    return {
        "points_count": int(len(trip)),
        "total_distance_km": total_km,
        "duration_min": duration_min,
        "avg_speed_kmh": avg_kmh,
        "max_speed_kmh": max_kmh,
        "start_time": int(t_sec[0]),
        "end_time": int(t_sec[-1]),
    }
