import pytest

from trips_segmentation.geodesy import haversine_km
from trips_segmentation.statistics import trip_statistics


def test_three_point_trip(samples_factory) -> None:
    trip = samples_factory([(0, 0.0, 0.0), (60, 0.0, 0.01), (120, 0.0, 0.02)])

    stats = trip_statistics(trip)

    segment = haversine_km(0.0, 0.0, 0.0, 0.01)
    assert segment == pytest.approx(1.11, abs=0.01)
    assert stats["points_count"] == 3
    assert stats["total_distance_km"] == pytest.approx(2 * segment)
    assert stats["total_distance_km"] == pytest.approx(2.22, abs=0.01)
    assert stats["duration_min"] == 2.0
    assert stats["avg_speed_kmh"] == pytest.approx(66.7, abs=0.1)
    assert stats["max_speed_kmh"] == pytest.approx(segment * 60, rel=1e-9)
    assert stats["start_time"] == 0
    assert stats["end_time"] == 120


def test_zero_duration_trip_has_zero_speeds(samples_factory) -> None:
    trip = samples_factory([(500, 0.0, 0.0), (500, 0.0, 0.005)])

    stats = trip_statistics(trip)

    assert stats["duration_min"] == 0.0
    assert stats["avg_speed_kmh"] == 0.0
    assert stats["max_speed_kmh"] == 0.0
    assert stats["total_distance_km"] > 0


def test_zero_duration_segment_is_skipped_for_max_speed(samples_factory) -> None:
    # the middle pair shares a timestamp and would otherwise be infinite
    trip = samples_factory([(0, 0.0, 0.0), (60, 0.0, 0.01), (60, 0.0, 0.015), (180, 0.0, 0.02)])

    stats = trip_statistics(trip)

    first = haversine_km(0.0, 0.0, 0.0, 0.01) / (60 / 3600)
    last = haversine_km(0.0, 0.015, 0.0, 0.02) / (120 / 3600)
    assert stats["max_speed_kmh"] == pytest.approx(max(first, last))
    assert stats["max_speed_kmh"] != float("inf")


def test_stationary_trip(samples_factory) -> None:
    trip = samples_factory([(0, 1.0, 1.0), (60, 1.0, 1.0)])

    stats = trip_statistics(trip)

    assert stats["total_distance_km"] == 0.0
    assert stats["avg_speed_kmh"] == 0.0
    assert stats["max_speed_kmh"] == 0.0


def test_sums_are_not_rounded(samples_factory) -> None:
    trip = samples_factory([(0, 0.0, 0.0), (1, 0.0, 0.00001), (2, 0.0, 0.00002)])

    stats = trip_statistics(trip)

    assert stats["total_distance_km"] == pytest.approx(2 * haversine_km(0.0, 0.0, 0.0, 0.00001))
    assert stats["total_distance_km"] != round(stats["total_distance_km"], 3)
