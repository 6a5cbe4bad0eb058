"""
Warehouse geofence checks
"""

import pytest

from gatequeue.services.geofence import GeofenceStatus, check_location, haversine_distance

TARGET = (-6.226976, 106.5446167)


def test_haversine_one_degree_latitude():
    assert haversine_distance(0, 0, 1, 0) == pytest.approx(111_195, rel=1e-3)


def test_inside_radius():
    result = check_location(-6.228776, 106.5446167, target=TARGET, radius_m=1000)  # ~200 m
    assert result.status is GeofenceStatus.OK
    assert result.allowed
    assert 190 <= result.distance_m <= 210
    assert result.note == f"[GPS: OK, Dist: {result.distance_m}m]"


def test_outside_radius_blocks():
    result = check_location(-6.240476, 106.5446167, target=TARGET, radius_m=1000)  # ~1.5 km
    assert result.status is GeofenceStatus.BLOCKED
    assert not result.allowed
    assert result.distance_m > 1000


def test_bypass_outside_radius():
    result = check_location(-6.240476, 106.5446167, bypass=True, target=TARGET, radius_m=1000)
    assert result.status is GeofenceStatus.BYPASS
    assert result.allowed
    assert result.note.startswith("[GPS: BYPASS, Dist: 15")


def test_bypass_inside_radius_is_ok():
    result = check_location(*TARGET, bypass=True, target=TARGET, radius_m=1000)
    assert result.status is GeofenceStatus.OK
    assert result.distance_m == 0


def test_missing_position():
    assert check_location(None, None, target=TARGET).status is GeofenceStatus.BLOCKED
    result = check_location(None, None, bypass=True, target=TARGET)
    assert result.status is GeofenceStatus.BYPASS
    assert result.note == "[GPS: BYPASS, Dist: ?m]"
