"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from rendermath import Quaternion, Vector3
from rendermath.scalar import PI_APPROX


@pytest.fixture
def z_axis():
    """Unit z axis."""
    return Vector3(0.0, 0.0, 1.0)


@pytest.fixture
def quarter_turn_z(z_axis):
    """Rotation by π/2 about the z axis."""
    return Quaternion.from_angle_axis(PI_APPROX / 2, z_axis)


@pytest.fixture
def unit_quaternions():
    """Three distinct unit rotations about different axes."""
    return (
        Quaternion.from_angle_axis(0.7, Vector3(1.0, 0.0, 0.0)),
        Quaternion.from_angle_axis(-1.2, Vector3(0.0, 1.0, 0.0)),
        Quaternion.from_angle_axis(2.0, Vector3(0.0, 0.6, 0.8)),
    )
