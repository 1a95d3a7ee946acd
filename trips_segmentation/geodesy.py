import numpy as np

from .config import EARTH_RADIUS_KM


def haversine_km(lat1, lon1, lat2, lon2, radius_km: float = EARTH_RADIUS_KM):
    """
    Great-circle distance between two points (or two arrays of points).

    Args:
        lat1, lon1 (float | numpy.ndarray): First point(s), in degrees.
        lat2, lon2 (float | numpy.ndarray): Second point(s), in degrees.
        radius_km (float): Sphere radius. Default is the mean Earth radius.

    Returns:
        float | numpy.ndarray: Distance in kilometers, same shape as the inputs.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    dphi = np.radians(np.subtract(lat2, lat1))
    dlmb = np.radians(np.subtract(lon2, lon1))

    a = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2.0) ** 2
    # rounding can push `a` a hair above 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    d = radius_km * (2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a)))

    if np.ndim(d) == 0:
        return float(d)
    return d


def consecutive_distances_km(lat: np.ndarray, lon: np.ndarray) -> np.ndarray:
    """
    Distance between each pair of consecutive points.

    Args:
        lat (numpy.ndarray): Latitudes, shape (N,).
        lon (numpy.ndarray): Longitudes, shape (N,).

    Returns:
        numpy.ndarray: Array of shape (max(N-1, 0),); element i is the distance
            from point i to point i+1.
    """
    lat = np.asarray(lat, dtype=np.float64)
    lon = np.asarray(lon, dtype=np.float64)
    if lat.shape[0] < 2:
        return np.empty(0, dtype=np.float64)
    return haversine_km(lat[:-1], lon[:-1], lat[1:], lon[1:])
