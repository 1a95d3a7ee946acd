"""
Tools for splitting timestamped GPS points into trips, computing their motion
statistics and exporting them as GeoJSON LineStrings.
"""

from .geodesy import haversine_km
from .normalization import normalize_records, parse_timestamps
from .extraction import segment_trips, sort_samples
from .statistics import trip_statistics
from .geojson import build_feature_collection, write_geojson
from .pipeline import process_file

__version__ = "0.1.0"
