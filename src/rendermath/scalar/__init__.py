"""Scalar math kernel: square root, trigonometry and angle conversion.

Functions live under this namespace so they never collide with math.sin,
math.cos or math.tan.
"""

from rendermath.scalar.kernel import ScalarKernel
from rendermath.scalar.operations import (
    PI_APPROX,
    SERIES_EPSILON,
    SQRT_EPSILON,
    cosine,
    degrees_to_radians,
    radians_to_degrees,
    sine,
    sqrt_approx,
    tangent,
)

__all__ = [
    # Constants
    "PI_APPROX",
    "SQRT_EPSILON",
    "SERIES_EPSILON",
    # Functions
    "sqrt_approx",
    "sine",
    "cosine",
    "tangent",
    "degrees_to_radians",
    "radians_to_degrees",
    # Settings-bound
    "ScalarKernel",
]
