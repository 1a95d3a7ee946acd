import logging
from typing import Tuple

import numpy as np
import pandas as pd

from .config import (
    REJECT_BAD_TIMESTAMP,
    REJECT_MISSING_FIELD,
    REJECT_NON_NUMERIC,
    REJECT_OUT_OF_BOUNDS,
)

logger = logging.getLogger(__name__)

_EPOCH = pd.Timestamp("1970-01-01", tz="UTC")
_ONE_SECOND = pd.Timedelta(seconds=1)


def parse_timestamps(values: pd.Series) -> pd.Series:
    """
    Parse free-form time strings into Unix seconds.

    Rules, in priority order:
        - exactly 10 digits: Unix seconds;
        - exactly 13 digits: Unix milliseconds, floored to seconds;
        - anything else non-empty: general date/time parsing. Strings without
          an explicit offset are read as UTC.

    Args:
        values (pd.Series): Raw strings (already trimmed).

    Returns:
        pd.Series: Nullable Int64 series aligned with `values`; <NA> where the
            string is empty or could not be parsed.
    """
    values = values.fillna("").astype(str)
    out = pd.Series(pd.NA, index=values.index, dtype="Int64")

    secs = values.str.fullmatch(r"[0-9]{10}").astype(bool)
    millis = values.str.fullmatch(r"[0-9]{13}").astype(bool)
    out[secs] = values[secs].astype("int64")
    out[millis] = values[millis].astype("int64") // 1000

    other = ~(secs | millis) & (values != "")
    if other.any():
        parsed = pd.to_datetime(values[other], errors="coerce", utc=True, format="mixed")
        # floor division keeps pre-1970 instants on the right second
        out[other] = ((parsed - _EPOCH) // _ONE_SECOND).astype("Int64")

    return out


def _field(raw: pd.DataFrame, idx: int) -> pd.Series:
    if idx not in raw.columns:
        return pd.Series("", index=raw.index, dtype=object)
    return raw[idx].fillna("").astype(str).str.strip()


def normalize_records(raw: pd.DataFrame, lat_idx: int, lon_idx: int, time_idx: int,
                      lines: pd.Series) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Validate raw text rows and convert them into typed samples.

    Args:
        raw (pd.DataFrame): Data rows as strings, columns labelled by position.
        lat_idx, lon_idx, time_idx (int): Resolved column positions.
        lines (pd.Series): 1-based input line number of each row, aligned with `raw`.

    Returns:
        tuple[pd.DataFrame, pd.DataFrame]:
            - samples with columns `timestamp` (int64), `latitude`, `longitude`
              (float64) and `source_line` (int64), in input order;
            - rejects with columns `line` and `reason`, in input order.
    """
    lat_raw = _field(raw, lat_idx)
    lon_raw = _field(raw, lon_idx)
    time_raw = _field(raw, time_idx)

    missing = (lat_raw == "") | (lon_raw == "") | (time_raw == "")

    lat = pd.to_numeric(lat_raw.where(~missing), errors="coerce").astype("float64")
    lon = pd.to_numeric(lon_raw.where(~missing), errors="coerce").astype("float64")
    non_numeric = ~missing & (lat.isna() | lon.isna())

    checked = ~(missing | non_numeric)
    out_of_bounds = checked & ~(lat.between(-90.0, 90.0) & lon.between(-180.0, 180.0))

    checked &= ~out_of_bounds
    ts = parse_timestamps(time_raw.where(checked, ""))
    bad_timestamp = checked & ts.isna()

    reason = pd.Series(
        np.select(
            [missing, non_numeric, out_of_bounds, bad_timestamp],
            [REJECT_MISSING_FIELD, REJECT_NON_NUMERIC, REJECT_OUT_OF_BOUNDS, REJECT_BAD_TIMESTAMP],
            default="",
        ),
        index=raw.index,
    )
    rejected = reason != ""

    rejects = pd.DataFrame({
        "line": lines[rejected].astype("int64"),
        "reason": reason[rejected],
    }).reset_index(drop=True)

    accepted = ~rejected
    samples = pd.DataFrame({
        "timestamp": ts[accepted].astype("int64"),
        "latitude": lat[accepted],
        "longitude": lon[accepted],
        "source_line": lines[accepted].astype("int64"),
    }).reset_index(drop=True)

    logger.debug("Normalized %d rows: %d accepted, %d rejected",
                 len(raw), len(samples), len(rejects))
    return samples, rejects
