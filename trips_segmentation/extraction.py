from typing import List
import logging
import numpy as np
import pandas as pd
from numba import njit

from .config import DIST_JUMP_KM, TIME_GAP_MINUTES
from .geodesy import consecutive_distances_km

logger = logging.getLogger(__name__)


####################################################################################
# Sequencing

def sort_samples(samples: pd.DataFrame) -> pd.DataFrame:
    """
    Put samples in their canonical order: `timestamp` ascending, ties broken by
    `source_line` ascending.

    Args:
        samples (pd.DataFrame): Output of `normalize_records`.

    Returns:
        pd.DataFrame: Sorted copy with a fresh RangeIndex. Empty input gives an
            empty frame with the same columns.
    """
    return samples.sort_values(["timestamp", "source_line"], kind="mergesort").reset_index(drop=True)


####################################################################################
# Segmentation

# ---------------------------------------------------------------------
# 1) Low-level core: mark the first sample of every trip
#    Pure-Python version
# ---------------------------------------------------------------------
def _find_trip_starts_py(dt_min: np.ndarray, d_km: np.ndarray,
                         max_gap_minutes: float, max_jump_km: float) -> np.ndarray:
    """
    Scan consecutive deltas and return the index where each trip begins.

    Args:
        dt_min (numpy.ndarray): Shape (N,); dt_min[i] is the time from sample i-1
            to sample i in minutes (dt_min[0] is ignored).
        d_km (numpy.ndarray): Shape (N,); great-circle distance from sample i-1
            to sample i (d_km[0] is ignored).
        max_gap_minutes (float): Longest gap kept inside one trip.
        max_jump_km (float): Longest jump kept inside one trip.

    Returns:
        numpy.ndarray: int64 start indices, always beginning with 0 when N > 0.
    """
    N = dt_min.shape[0]
    starts: List[int] = []
    if N == 0:
        return np.asarray(starts, dtype=np.int64)

    starts.append(0)
    for i in range(1, N):
        # strict: a delta equal to the threshold stays in the trip
        if dt_min[i] > max_gap_minutes or d_km[i] > max_jump_km:
            starts.append(i)

    return np.asarray(starts, dtype=np.int64)


# ---------------------------------------------------------------------
#    Numba-accelerated version (same logic)
# ---------------------------------------------------------------------
@njit(cache=True)
def _find_trip_starts_nb(dt_min, d_km, max_gap_minutes, max_jump_km):
    N = dt_min.shape[0]
    starts = np.empty(N, np.int64)
    ns = 0
    if N == 0:
        return starts[:0]

    starts[ns] = 0; ns += 1
    for i in range(1, N):
        if dt_min[i] > max_gap_minutes or d_km[i] > max_jump_km:
            starts[ns] = i; ns += 1

    return starts[:ns]


# ---------------------------------------------------------------------
# 2) High-level function
# ---------------------------------------------------------------------

def segment_trips(
    samples: pd.DataFrame,
    *,
    max_gap_minutes: float = TIME_GAP_MINUTES,
    max_jump_km: float = DIST_JUMP_KM,
    use_numba: bool = True,
) -> List[pd.DataFrame]:
    """
    Split a sequence of samples into trips.

    A new trip starts whenever the time since the previous sample exceeds
    `max_gap_minutes` OR the distance from it exceeds `max_jump_km`. Both
    comparisons are strict.

    Args:
        samples (pd.DataFrame): Samples with `timestamp` (Unix seconds),
            `latitude` and `longitude` columns. They are sequenced with
            `sort_samples` first, so input order does not matter.
        max_gap_minutes (float): Time-gap threshold in minutes. Default: 25.
        max_jump_km (float): Distance-jump threshold in kilometers. Default: 2.0.
        use_numba (bool): Run the scan in the compiled kernel. The pure-Python
            kernel gives identical results.

    Returns:
        list[pd.DataFrame]: Chronologically ordered trips, each a non-empty slice
            of the sorted samples (semi-open intervals `iloc[start:end]`).
            Single-sample trips are kept; dropping them is up to the exporter.
    """
    df = sort_samples(samples)
    N = len(df)
    if N == 0:
        return []

    t_sec = df["timestamp"].to_numpy(dtype=np.int64)
    lat = df["latitude"].to_numpy(dtype=np.float64)
    lon = df["longitude"].to_numpy(dtype=np.float64)

    dt_min = np.zeros(N, dtype=np.float64)
    dt_min[1:] = np.diff(t_sec) / 60.0
    d_km = np.zeros(N, dtype=np.float64)
    d_km[1:] = consecutive_distances_km(lat, lon)

    if use_numba:
        starts = _find_trip_starts_nb(dt_min, d_km, float(max_gap_minutes), float(max_jump_km))
    else:
        starts = _find_trip_starts_py(dt_min, d_km, float(max_gap_minutes), float(max_jump_km))

    ends = np.append(starts[1:], N)

    trips: List[pd.DataFrame] = []
    for s, e in zip(starts, ends):
        trips.append(df.iloc[int(s):int(e)].reset_index(drop=True))

    logger.debug("Segmented %d samples into %d trips", N, len(trips))
    return trips
