"""
Distance calculation using the Haversine formula.

Assumption
----------
The driver is taken to travel along the great circle between two points
on a sphere of radius 6371 km.  No road network is consulted, so every
leg is a lower bound on the real driving distance (error ~0.5 % from the
sphere approximation alone).

``asin(sqrt(a))`` is used rather than ``atan2``; near-antipodal inputs lose
a little precision, which is tolerated.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .entities import Location

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # Rounding (or out-of-range latitudes) can push a outside [0, 1]; NaN
    # fails both comparisons and propagates.
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def distance_km(a: Location, b: Location) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
