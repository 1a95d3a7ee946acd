"""
Reading point files and writing the reject log.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd

from .config import LAT_CANDIDATES, LON_CANDIDATES, TIME_CANDIDATES

logger = logging.getLogger(__name__)


class InputFileError(OSError):
    """The input file does not exist or cannot be read."""


class MissingColumnsError(ValueError):
    """The header lacks a latitude, longitude or time column."""


def find_column(headers: Sequence[str], candidates: Iterable[str]) -> Optional[int]:
    """
    Position of the first header whose trimmed, lower-cased name is one of
    `candidates`, or None.
    """
    wanted = set(candidates)
    for i, h in enumerate(headers):
        if str(h).strip().lower() in wanted:
            return i
    return None


def resolve_columns(headers: Sequence[str]) -> Tuple[int, int, int]:
    """
    Locate the latitude, longitude and time columns.

    Returns:
        tuple[int, int, int]: (lat_idx, lon_idx, time_idx).

    Raises:
        MissingColumnsError: If any of the three is absent.
    """
    lat_idx = find_column(headers, LAT_CANDIDATES)
    lon_idx = find_column(headers, LON_CANDIDATES)
    time_idx = find_column(headers, TIME_CANDIDATES)

    missing = [name for name, idx in (("lat", lat_idx), ("lon", lon_idx), ("time", time_idx))
               if idx is None]
    if missing:
        raise MissingColumnsError(f"Missing {'/'.join(missing)} columns")
    return lat_idx, lon_idx, time_idx


def read_points_csv(path: Union[str, Path], sep: str = ",") -> Tuple[List[str], pd.DataFrame, pd.Series]:
    """
    Read a delimited point file as raw strings.

    Blank lines are skipped. The header is line 1 and each data row is numbered
    by its position among the non-blank rows that follow it. Rows with more
    fields than the header are truncated to the header width; shorter rows are
    padded with empty fields.

    Args:
        path (str | Path): File to read.
        sep (str): Field delimiter. Default: ",".

    Returns:
        tuple[list[str], pd.DataFrame, pd.Series]:
            - header names;
            - data rows (object dtype, columns labelled 0..k-1);
            - 1-based line number of each data row.

    Raises:
        InputFileError: If the file is missing or unreadable.
        MissingColumnsError: If the file has no header row at all.
    """
    path = Path(path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise InputFileError(f"Cannot read {path}")

    options = dict(sep=sep, header=None, dtype=str, keep_default_na=False,
                   skip_blank_lines=True, encoding="utf-8-sig", engine="python")
    try:
        width = pd.read_csv(path, nrows=1, **options).shape[1]
        raw = pd.read_csv(path, on_bad_lines=lambda bad: bad[:width], **options)
    except pd.errors.EmptyDataError as e:
        raise MissingColumnsError("Missing lat/lon/time columns") from e
    except (UnicodeDecodeError, pd.errors.ParserError) as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e

    headers = [str(h) for h in raw.iloc[0].fillna("").tolist()]
    data = raw.iloc[1:].fillna("").reset_index(drop=True)
    lines = pd.Series(range(2, len(data) + 2), index=data.index, dtype="int64")

    logger.debug("Read %d data rows from %s", len(data), path)
    return headers, data, lines


def write_reject_log(rejects: pd.DataFrame, path: Union[str, Path]) -> Path:
    """
    Write one `Line <n>: <reason>` line per reject, replacing any previous log.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as fh:
        for line, reason in zip(rejects["line"], rejects["reason"]):
            fh.write(f"Line {int(line)}: {reason}\n")
    return path
