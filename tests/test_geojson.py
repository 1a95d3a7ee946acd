import json
from pathlib import Path

import pytest

from trips_segmentation.config import PALETTE
from trips_segmentation.extraction import segment_trips
from trips_segmentation.geojson import (
    build_feature_collection,
    output_path_for,
    palette_color,
    write_geojson,
)


def test_empty_collection() -> None:
    assert build_feature_collection([]) == {"type": "FeatureCollection", "features": []}


def test_feature_shape(samples_factory) -> None:
    trips = segment_trips(samples_factory([(0, 0.0, 0.0), (60, 0.0, 0.01), (120, 0.0, 0.02)]))

    collection = build_feature_collection(trips)

    assert len(collection["features"]) == 1
    feature = collection["features"][0]
    assert feature["type"] == "Feature"
    assert feature["geometry"] == {
        "type": "LineString",
        "coordinates": [[0.0, 0.0], [0.01, 0.0], [0.02, 0.0]],
    }
    props = feature["properties"]
    assert props["trip_id"] == "trip_1"
    assert props["points_count"] == 3
    assert props["total_distance_km"] == 2.224
    assert props["duration_min"] == 2.0
    assert props["avg_speed_kmh"] == pytest.approx(66.72, abs=0.01)
    assert props["max_speed_kmh"] == pytest.approx(66.72, abs=0.01)
    assert props["start_time_iso"] == "1970-01-01T00:00:00+00:00"
    assert props["end_time_iso"] == "1970-01-01T00:02:00+00:00"
    assert props["stroke"] == "#e41a1c"
    assert props["stroke-width"] == 3


def test_coordinates_are_lon_lat(samples_factory) -> None:
    trips = segment_trips(samples_factory([(0, 45.0, 7.0), (60, 45.001, 7.001)]))

    coords = build_feature_collection(trips)["features"][0]["geometry"]["coordinates"]

    assert coords == [[7.0, 45.0], [7.001, 45.001]]


def test_singletons_are_dropped_and_ids_stay_contiguous(samples_factory) -> None:
    samples = samples_factory([
        (0, 0.0, 0.0), (60, 0.0, 0.001),
        (10_000, 0.0, 0.0),                      # isolated
        (20_000, 0.0, 0.0), (20_060, 0.0, 0.001),
    ])
    trips = segment_trips(samples)

    features = build_feature_collection(trips)["features"]

    assert len(trips) == 3
    assert [f["properties"]["trip_id"] for f in features] == ["trip_1", "trip_2"]
    assert [f["properties"]["stroke"] for f in features] == ["#e41a1c", "#377eb8"]


def test_palette_cycles() -> None:
    assert len(PALETTE) == 17
    assert palette_color(0) == "#e41a1c"
    assert palette_color(16) == "#b3b3b3"
    assert palette_color(17) == palette_color(0)


def test_write_geojson_round_trips(tmp_path, samples_factory) -> None:
    collection = build_feature_collection(segment_trips(samples_factory([(0, 1.0, 2.0), (60, 1.0, 2.001)])))
    path = tmp_path / "out.geojson"

    write_geojson(collection, path)

    assert json.loads(path.read_text(encoding="utf-8")) == collection


def test_write_geojson_to_missing_directory_fails(tmp_path) -> None:
    with pytest.raises(OSError):
        write_geojson({"type": "FeatureCollection", "features": []}, tmp_path / "nope" / "x.geojson")


@pytest.mark.parametrize(
    "given, expected",
    [
        ("points.csv", "points.geojson"),
        ("data/POINTS.CSV", "data/POINTS.geojson"),
        ("points.txt", "points.txt.geojson"),
        ("points.csv.bak", "points.csv.bak.geojson"),
    ],
)
def test_output_path_for(given, expected) -> None:
    assert output_path_for(given) == Path(expected)
