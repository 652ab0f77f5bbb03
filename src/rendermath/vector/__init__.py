"""Vector functionality: 2D/3D/4D models and pure operations."""

from rendermath.vector.models import Vector, Vector2, Vector3, Vector4
from rendermath.vector.operations import (
    add,
    cross,
    dot,
    lerp,
    magnitude,
    negate,
    normalize,
    scale,
    squared_magnitude,
    subtract,
)

__all__ = [
    # Models
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    # Operations
    "add",
    "subtract",
    "scale",
    "negate",
    "dot",
    "cross",
    "squared_magnitude",
    "magnitude",
    "normalize",
    "lerp",
]
