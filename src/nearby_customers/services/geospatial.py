"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import DistanceUnit

EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.609344


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    # square of half the chord length between the points
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(
    source_lat: float,
    source_lon: float,
    dest_lat: float,
    dest_lon: float,
    unit: DistanceUnit | str = DistanceUnit.KM,
) -> float:
    """Great-circle distance between two points in ``unit``.

    Identical points short-circuit to 0. ``MI`` converts to miles, any other
    unit yields kilometres. Inputs are not range checked and NaN propagates.
    """

    if source_lat == dest_lat and source_lon == dest_lon:
        return 0.0
    distance = haversine_km(source_lat, source_lon, dest_lat, dest_lon)
    if unit == DistanceUnit.MI:
        distance = distance / KM_PER_MILE
    return distance
