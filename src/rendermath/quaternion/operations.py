"""Pure quaternion operations.

Quaternions are (x, y, z, w) with w the scalar part. These functions never
mutate their arguments and never normalize implicitly: rotation helpers expect
the caller to pass unit quaternions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from rendermath.scalar.operations import cosine, sine, sqrt_approx

if TYPE_CHECKING:
    from rendermath.quaternion.models import Quaternion
    from rendermath.vector.models import Vector3

Q = TypeVar("Q", bound="Quaternion")


def angle_axis_components(angle: float, axis: Vector3) -> tuple[float, float, float, float]:
    """Components (x, y, z, w) of the rotation by `angle` radians about `axis`.

    The axis is used as given; pass a unit vector for a unit quaternion.
    """
    half_angle = angle / 2.0
    sin_half = sine(half_angle)
    return (axis.x * sin_half, axis.y * sin_half, axis.z * sin_half, cosine(half_angle))


def add(a: Q, b: Q) -> Q:
    return type(a)(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)


def scale(q: Q, scalar: float) -> Q:
    return type(q)(q.x * scalar, q.y * scalar, q.z * scalar, q.w * scalar)


def multiply(a: Q, b: Q) -> Q:
    """Hamilton product a·b. Not commutative: a·b applies b first, then a."""
    return type(a)(
        a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
        a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
        a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
    )


def dot(a: Quaternion, b: Quaternion) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def squared_magnitude(q: Quaternion) -> float:
    return q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w


def magnitude(q: Quaternion) -> float:
    return sqrt_approx(squared_magnitude(q))


def normalize(q: Q) -> Q:
    """Scale to unit magnitude; the zero quaternion if the magnitude is 0."""
    mag = magnitude(q)
    if mag == 0:
        return type(q)()
    return type(q)(q.x / mag, q.y / mag, q.z / mag, q.w / mag)


def conjugate(q: Q) -> Q:
    return type(q)(-q.x, -q.y, -q.z, q.w)


def inverse(q: Q) -> Q:
    """Conjugate divided by the squared magnitude.

    All four components, w included, share the same denominator.

    Returns:
        The inverse, or the zero quaternion if the squared magnitude is 0.
    """
    squared = squared_magnitude(q)
    if squared == 0:
        return type(q)()
    return type(q)(-q.x / squared, -q.y / squared, -q.z / squared, q.w / squared)


def rotate(q: Quaternion, v: Vector3) -> Vector3:
    """Rotate a 3D vector by q as q · (v, 0) · q⁻¹.

    Returns:
        The vector part of the product; its scalar part is discarded.
    """
    pure = type(q)(v.x, v.y, v.z, 0.0)
    result = multiply(multiply(q, pure), inverse(q))
    return type(v)(result.x, result.y, result.z)


def nlerp(a: Q, b: Q, t: float) -> Q:
    """Normalized linear interpolation along the shorter arc.

    Returns:
        Unit quaternion between a (t = 0) and b (t = 1), or the zero
        quaternion if the blend cancels out.
    """
    if dot(a, b) < 0:
        b = scale(b, -1.0)
    blended = type(a)(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
        a.w + (b.w - a.w) * t,
    )
    # Blends of unit quaternions are shorter than 1, so iterate below 1 too
    mag = sqrt_approx(squared_magnitude(blended), refine_unit_interval=True)
    if mag == 0:
        return type(a)()
    return scale(blended, 1.0 / mag)
