"""Quaternion model for 3D rotation.

Usage:
    quarter_turn = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(0, 0, 1))
    quarter_turn.rotate(Vector3(1, 0, 0))    # ~Vector3(x=0.0, y=1.0, z=0.0)

    # Compose: apply `first`, then `second`
    combined = second * first
"""

from __future__ import annotations

from typing import Self

from rendermath.core.storage import ComponentBuffer, ComponentField
from rendermath.quaternion import operations
from rendermath.vector.models import Vector3


class Quaternion(ComponentBuffer):
    """Quaternion (x, y, z, w) with w the scalar part.

    Unit length is expected for rotation but never enforced; call normalize()
    explicitly after accumulating products.
    """

    __slots__ = ()

    x = ComponentField(0)
    y = ComponentField(1)
    z = ComponentField(2)
    w = ComponentField(3)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> None:
        super().__init__(x, y, z, w)

    @classmethod
    def from_angle_axis(cls, angle: float, axis: Vector3) -> Self:
        """Rotation by `angle` radians about a unit `axis` (not re-normalized)."""
        return cls(*operations.angle_axis_components(angle, axis))

    @classmethod
    def identity(cls) -> Self:
        return cls(0.0, 0.0, 0.0, 1.0)

    def __add__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return operations.add(self, other)

    def __mul__(self, other: Self | float) -> Self:
        if type(other) is type(self):
            return operations.multiply(self, other)  # type: ignore[arg-type]
        if isinstance(other, int | float):
            return operations.scale(self, other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Self:
        if not isinstance(scalar, int | float):
            return NotImplemented
        return operations.scale(self, scalar)

    def dot(self, other: Quaternion) -> float:
        return operations.dot(self, other)

    def magnitude(self) -> float:
        return operations.magnitude(self)

    def normalize(self) -> Self:
        return operations.normalize(self)

    def conjugate(self) -> Self:
        return operations.conjugate(self)

    def inverse(self) -> Self:
        return operations.inverse(self)

    def rotate(self, v: Vector3) -> Vector3:
        return operations.rotate(self, v)

    def __interpolate__(self, other: Self, t: float) -> Self:
        return operations.nlerp(self, other, t)
