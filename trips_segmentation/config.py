"""
Default parameters for trip segmentation and GeoJSON export.

Every value here is also exposed as a keyword argument on the function that
uses it, so callers can override them per run.
"""

# Segmentation thresholds
TIME_GAP_MINUTES: float = 25.0
DIST_JUMP_KM: float = 2.0

# Haversine
EARTH_RADIUS_KM: float = 6371.0

# Export
MIN_POINTS_FOR_LINESTRING: int = 2
STROKE_WIDTH: int = 3
PALETTE = (
    "#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00",
    "#ffff33", "#a65628", "#f781bf", "#999999", "#66c2a5",
    "#fc8d62", "#8da0cb", "#e78ac3", "#a6d854", "#ffd92f",
    "#e5c494", "#b3b3b3",
)

# Input columns, matched case-insensitively against the header
LAT_CANDIDATES = ("lat", "latitude", "y")
LON_CANDIDATES = ("lon", "lng", "longitude", "x")
TIME_CANDIDATES = ("timestamp", "time", "datetime", "date", "ts", "iso8601")

# Files
INPUT_SUFFIX: str = ".csv"
OUTPUT_SUFFIX: str = ".geojson"
REJECT_LOG_NAME: str = "rejects.log"

# Reject reasons, in the order they are checked
REJECT_MISSING_FIELD = "missing-field"
REJECT_NON_NUMERIC = "non-numeric-coordinate"
REJECT_OUT_OF_BOUNDS = "out-of-bounds-coordinate"
REJECT_BAD_TIMESTAMP = "unparseable-timestamp"
