"""Pure functions dispatching through the core protocols."""

from __future__ import annotations

from typing import TypeVar, cast

from rendermath.core.models import Interpolatable

T = TypeVar("T")


def interpolate(start: T, end: T, t: float) -> T:
    """Blend two entities using the Interpolatable protocol.

    Args:
        start: Value at t = 0 (must implement Interpolatable).
        end: Value at t = 1, same type as start.
        t: Blend factor. Values outside [0, 1] extrapolate.

    Returns:
        The blended value via __interpolate__.

    Raises:
        TypeError: If start doesn't implement Interpolatable or the types differ.
    """
    if not isinstance(start, Interpolatable):
        raise TypeError(f"{type(start).__name__} does not implement Interpolatable protocol")
    if type(start) is not type(end):
        raise TypeError(
            f"Cannot interpolate {type(start).__name__} with {type(end).__name__}"
        )
    return cast(T, start.__interpolate__(end, t))
