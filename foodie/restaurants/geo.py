from __future__ import annotations

import numpy as np
from sklearn.metrics.pairwise import haversine_distances

from ..config import DEFAULT_CONFIG, AppConfig
from ..errors import ValidationError
from .data_store import RestaurantStore
from .models import Restaurant

EARTH_RADIUS_M = 6_371_008.8


def haversine_meters(
    latitude: float,
    longitude: float,
    latitudes: np.ndarray,
    longitudes: np.ndarray,
) -> np.ndarray:
    """Great-circle distance in meters from one point to each of many points."""
    origin = np.radians([[latitude, longitude]])
    points = np.radians(np.column_stack([latitudes, longitudes]).astype(float))
    if len(points) == 0:
        return np.zeros(0)
    return haversine_distances(origin, points)[0] * EARTH_RADIUS_M


def find_nearby(
    store: RestaurantStore,
    latitude: float | None,
    longitude: float | None,
    radius_km: float | None = None,
    limit: int | None = None,
    config: AppConfig = DEFAULT_CONFIG,
) -> list[tuple[Restaurant, float]]:
    """
    Restaurants within ``radius_km`` of a point, nearest first.

    Returns ``(restaurant, distance_m)`` pairs, capped at ``limit``.
    """
    if latitude is None or longitude is None:
        raise ValidationError("Latitude and longitude are required")

    radius_m = (config.nearby_radius_km if radius_km is None else radius_km) * 1000
    cap = config.nearby_limit if limit is None else limit

    df = store.frame()
    if df.empty:
        return []

    distances = haversine_meters(latitude, longitude, df["latitude"].to_numpy(), df["longitude"].to_numpy())
    within = np.flatnonzero(distances <= radius_m)
    nearest = within[np.argsort(distances[within], kind="stable")][:cap]

    ids = df["id"].to_numpy()
    return [(store.get(ids[i]), float(distances[i])) for i in nearest]
