"""Quaternion functionality: rotation model and pure operations."""

from rendermath.quaternion.models import Quaternion
from rendermath.quaternion.operations import (
    add,
    angle_axis_components,
    conjugate,
    dot,
    inverse,
    magnitude,
    multiply,
    nlerp,
    normalize,
    rotate,
    scale,
    squared_magnitude,
)

__all__ = [
    # Models
    "Quaternion",
    # Operations
    "angle_axis_components",
    "add",
    "scale",
    "multiply",
    "dot",
    "squared_magnitude",
    "magnitude",
    "normalize",
    "conjugate",
    "inverse",
    "rotate",
    "nlerp",
]
