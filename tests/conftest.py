import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_samples(rows):
    """Build a samples frame from (timestamp, lat, lon) tuples; source lines start at 2."""
    return pd.DataFrame({
        "timestamp": pd.Series([r[0] for r in rows], dtype="int64"),
        "latitude": pd.Series([r[1] for r in rows], dtype="float64"),
        "longitude": pd.Series([r[2] for r in rows], dtype="float64"),
        "source_line": pd.Series(range(2, len(rows) + 2), dtype="int64"),
    })


@pytest.fixture
def samples_factory():
    return make_samples


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "points.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
