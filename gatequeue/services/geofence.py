"""Warehouse geofence evaluated once before a check-in is created."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from gatequeue.core.config import settings

EARTH_RADIUS_M = 6371e3


class GeofenceStatus(str, Enum):
    OK = "OK"
    BLOCKED = "BLOCKED"
    BYPASS = "BYPASS"


@dataclass(frozen=True)
class GeofenceResult:
    status: GeofenceStatus
    distance_m: int | None
    radius_m: float

    @property
    def allowed(self) -> bool:
        return self.status is not GeofenceStatus.BLOCKED

    @property
    def note(self) -> str:
        """Annotation appended to the check-in notes."""
        dist = "?" if self.distance_m is None else str(self.distance_m)
        return f"[GPS: {self.status.value}, Dist: {dist}m]"


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in meters."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) *
         math.sin(delta_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def check_location(
    latitude: float | None,
    longitude: float | None,
    bypass: bool = False,
    *,
    target: tuple[float, float] | None = None,
    radius_m: float | None = None,
) -> GeofenceResult:
    """Classify a device position against the warehouse geofence.

    A missing position is treated like one outside the radius. ``bypass`` only
    matters when the check would otherwise block.
    """
    target_lat, target_lng = target or (settings.warehouse_lat, settings.warehouse_lng)
    radius = settings.geofence_radius_m if radius_m is None else radius_m

    distance = None
    if latitude is not None and longitude is not None:
        distance = round(haversine_distance(latitude, longitude, target_lat, target_lng))

    if distance is not None and distance <= radius:
        status = GeofenceStatus.OK
    elif bypass:
        status = GeofenceStatus.BYPASS
    else:
        status = GeofenceStatus.BLOCKED
    return GeofenceResult(status=status, distance_m=distance, radius_m=radius)
