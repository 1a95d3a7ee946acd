import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .config import DIST_JUMP_KM, REJECT_LOG_NAME, TIME_GAP_MINUTES
from .extraction import segment_trips, sort_samples
from .geojson import build_feature_collection, output_path_for, write_geojson
from .io import read_points_csv, resolve_columns, write_reject_log
from .normalization import normalize_records

logger = logging.getLogger(__name__)


def process_file(
    csv_path: Union[str, Path],
    out_path: Optional[Union[str, Path]] = None,
    reject_log_path: Union[str, Path] = REJECT_LOG_NAME,
    *,
    max_gap_minutes: float = TIME_GAP_MINUTES,
    max_jump_km: float = DIST_JUMP_KM,
    use_numba: bool = True,
) -> Dict[str, Union[int, Path]]:
    """
    Run the whole CSV -> GeoJSON conversion for one file.

    Args:
        csv_path (str | Path): Input point file with a header row.
        out_path (str | Path | None): GeoJSON destination. Default: derived from
            `csv_path` by `output_path_for`.
        reject_log_path (str | Path): Reject log, recreated on every run.
        max_gap_minutes, max_jump_km, use_numba: forwarded to `segment_trips`.

    Returns:
        dict: `output` (Path), `rows`, `rejected`, `trips` (all segmented trips)
            and `exported` (features written).

    Raises:
        InputFileError: Input missing or unreadable.
        MissingColumnsError: No latitude, longitude or time column.
        OSError: Output or reject log could not be written.
    """
    out_path = Path(out_path) if out_path is not None else output_path_for(csv_path)

    headers, raw, lines = read_points_csv(csv_path)
    lat_idx, lon_idx, time_idx = resolve_columns(headers)
    logger.debug("Columns: lat=%d lon=%d time=%d", lat_idx, lon_idx, time_idx)

    samples, rejects = normalize_records(raw, lat_idx, lon_idx, time_idx, lines)
    write_reject_log(rejects, reject_log_path)
    if len(rejects):
        logger.info("%d rows rejected, see %s", len(rejects), reject_log_path)

    samples = sort_samples(samples)
    trips = segment_trips(samples, max_gap_minutes=max_gap_minutes,
                          max_jump_km=max_jump_km, use_numba=use_numba)
    collection = build_feature_collection(trips)
    write_geojson(collection, out_path)

    return {
        "output": out_path,
        "rows": len(raw),
        "rejected": len(rejects),
        "trips": len(trips),
        "exported": len(collection["features"]),
    }
