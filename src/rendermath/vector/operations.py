"""Pure vector operations.

These are stateless functions over any Vector type. They never mutate their
arguments; each returns a new vector of the same arity as its inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from rendermath.scalar.operations import sqrt_approx

if TYPE_CHECKING:
    from rendermath.vector.models import Vector, Vector3

V = TypeVar("V", bound="Vector")


def _require_same_type(a: Vector, b: Vector, operation: str) -> None:
    if type(a) is not type(b):
        raise TypeError(f"Cannot {operation} {type(a).__name__} and {type(b).__name__}")


def add(a: V, b: V) -> V:
    """Componentwise sum.

    Raises:
        TypeError: If a and b are different vector types.
    """
    _require_same_type(a, b, "add")
    return type(a)(*(left + right for left, right in zip(a, b, strict=True)))


def subtract(a: V, b: V) -> V:
    """Componentwise difference a - b.

    Raises:
        TypeError: If a and b are different vector types.
    """
    _require_same_type(a, b, "subtract")
    return type(a)(*(left - right for left, right in zip(a, b, strict=True)))


def scale(v: V, scalar: float) -> V:
    return type(v)(*(component * scalar for component in v))


def negate(v: V) -> V:
    return type(v)(*(-component for component in v))


def dot(a: V, b: V) -> float:
    """Dot product.

    Raises:
        TypeError: If a and b are different vector types.
    """
    _require_same_type(a, b, "dot")
    return sum(left * right for left, right in zip(a, b, strict=True))


def squared_magnitude(v: Vector) -> float:
    return sum(component * component for component in v)


def magnitude(v: Vector) -> float:
    """Euclidean length via the kernel's Newton-Raphson square root."""
    return sqrt_approx(squared_magnitude(v))


def normalize(v: V) -> V:
    """Scale to unit magnitude.

    Returns:
        The normalized vector, or the zero vector of the same type when the
        magnitude is 0.
    """
    mag = magnitude(v)
    if mag == 0:
        return type(v)()
    return type(v)(*(component / mag for component in v))


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product of two 3D vectors."""
    _require_same_type(a, b, "cross")
    return type(a)(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def lerp(a: V, b: V, t: float) -> V:
    """Linear interpolation a + (b - a) * t.

    Raises:
        TypeError: If a and b are different vector types.
    """
    _require_same_type(a, b, "interpolate")
    return type(a)(*(left + (right - left) * t for left, right in zip(a, b, strict=True)))
