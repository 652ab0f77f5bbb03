"""Core type definitions for rendermath."""

from typing import TypeAlias

Scalar: TypeAlias = float
"""Type alias for a scalar component.

Components are held in single-precision storage, so a `Scalar` read back from
a vector or quaternion has been rounded to the nearest 32-bit float.
"""

Components: TypeAlias = tuple[float, ...]
"""Type alias for a plain, detached copy of an entity's components."""
