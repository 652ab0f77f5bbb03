"""Vector models: 2D, 3D and 4D single-precision vectors.

Usage:
    v = Vector3(3.0, 4.0, 0.0)
    v.magnitude()          # ~5.0
    v.normalize()          # Vector3(x=0.6, y=0.8, z=0.0)
    v + Vector3(1, 1, 1)   # Vector3(x=4.0, y=5.0, z=1.0)
    2 * v                  # Vector3(x=6.0, y=8.0, z=0.0)
"""

from __future__ import annotations

from typing import Self

from rendermath.core.storage import ComponentBuffer, ComponentField
from rendermath.vector import operations


class Vector(ComponentBuffer):
    """Operators and methods shared by every vector arity.

    Binary operators return NotImplemented for mismatched vector types, so
    `Vector2(...) + Vector3(...)` raises TypeError.
    """

    __slots__ = ()

    def __add__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return operations.add(self, other)

    def __sub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return operations.subtract(self, other)

    def __mul__(self, scalar: float) -> Self:
        if not isinstance(scalar, int | float):
            return NotImplemented
        return operations.scale(self, scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Self:
        return operations.negate(self)

    def dot(self, other: Self) -> float:
        return operations.dot(self, other)

    def magnitude(self) -> float:
        return operations.magnitude(self)

    def normalize(self) -> Self:
        return operations.normalize(self)

    def __interpolate__(self, other: Self, t: float) -> Self:
        return operations.lerp(self, other, t)


class Vector2(Vector):
    """2D vector (x, y)."""

    __slots__ = ()

    x = ComponentField(0)
    y = ComponentField(1)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)


class Vector3(Vector):
    """3D vector (x, y, z)."""

    __slots__ = ()

    x = ComponentField(0)
    y = ComponentField(1)
    z = ComponentField(2)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    def cross(self, other: Vector3) -> Vector3:
        return operations.cross(self, other)


class Vector4(Vector):
    """4D vector (x, y, z, w), e.g. homogeneous coordinates or RGBA."""

    __slots__ = ()

    x = ComponentField(0)
    y = ComponentField(1)
    z = ComponentField(2)
    w = ComponentField(3)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> None:
        super().__init__(x, y, z, w)
