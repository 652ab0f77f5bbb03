"""Core functionalities: type aliases, protocols, component storage.

Architecture Note:
    core/ holds the building blocks shared by every entity type. It depends on
    nothing else in the package; scalar/, vector/ and quaternion/ build on it.
"""

from rendermath.core.models import Interpolatable
from rendermath.core.operations import interpolate
from rendermath.core.storage import STORAGE_FORMAT, ComponentBuffer, ComponentField
from rendermath.core.types import Components, Scalar

__all__ = [
    # Types
    "Scalar",
    "Components",
    # Protocols
    "Interpolatable",
    "interpolate",
    # Storage
    "ComponentBuffer",
    "ComponentField",
    "STORAGE_FORMAT",
]
