"""rendermath: scalar, vector and quaternion primitives for 3D graphics.

Usage:
    from rendermath import Quaternion, Vector3, degrees_to_radians

    axis = Vector3(0, 0, 1)
    spin = Quaternion.from_angle_axis(degrees_to_radians(90), axis)
    point = spin.rotate(Vector3(1, 0, 0))   # ~Vector3(x=0.0, y=1.0, z=0.0)

    with point.data(readonly=True) as view:
        vertex_buffer.write(view)           # contiguous float32 x, y, z
"""

__version__ = "0.1.0"

# Core primitives
from rendermath.core import (
    STORAGE_FORMAT,
    ComponentBuffer,
    Interpolatable,
    interpolate,
)

# Quaternion
from rendermath.quaternion import Quaternion

# Scalar kernel
from rendermath.scalar import (
    PI_APPROX,
    ScalarKernel,
    cosine,
    degrees_to_radians,
    radians_to_degrees,
    sine,
    sqrt_approx,
    tangent,
)

# Vectors
from rendermath.vector import Vector, Vector2, Vector3, Vector4

__all__ = [
    # Version
    "__version__",
    # Core
    "ComponentBuffer",
    "STORAGE_FORMAT",
    "Interpolatable",
    "interpolate",
    # Scalar
    "PI_APPROX",
    "sqrt_approx",
    "sine",
    "cosine",
    "tangent",
    "degrees_to_radians",
    "radians_to_degrees",
    "ScalarKernel",
    # Vectors
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    # Quaternion
    "Quaternion",
]
