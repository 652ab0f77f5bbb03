"""Scalar math kernel: pure functions on floats.

Square root and trigonometry are computed by iteration rather than delegated to
the platform math library. The results are approximations tuned for the small
angles and moderate magnitudes of a rendering workload.

Usage:
    from rendermath.scalar import cosine, degrees_to_radians, sqrt_approx

    sqrt_approx(25.0)                     # ~5.0
    cosine(degrees_to_radians(60.0))      # ~0.5

Degenerate inputs never raise: a negative radicand gives 0.0 and a tangent
whose cosine is exactly zero gives 0.0.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

SQRT_EPSILON = 1e-6
"""Newton-Raphson stops once the high and low estimates are this close."""

SERIES_EPSILON = 1e-6
"""Taylor series stop once a term's magnitude is at or below this value."""

PI_APPROX = 3.1416
"""π used for angle conversion. Deliberately not math.pi."""


def sqrt_approx(
    value: float,
    *,
    epsilon: float = SQRT_EPSILON,
    refine_unit_interval: bool = False,
) -> float:
    """Approximate square root by Newton-Raphson (Babylonian) iteration.

    The high estimate starts at `value` and the low estimate at 1.0. Each step
    averages them into a new high and divides `value` by it for the new low.
    For 0 <= value < 1 the high estimate already starts below the low one, the
    loop never runs and `value` is returned unchanged unless
    `refine_unit_interval` swaps the starting estimates.

    Args:
        value: Radicand.
        epsilon: Stop once high - low is at or below this gap.
        refine_unit_interval: Iterate for 0 < value < 1 as well.

    Returns:
        The high estimate, or 0.0 for a negative radicand.
    """
    if value < 0:
        return 0.0

    high = float(value)
    low = 1.0
    if refine_unit_interval and 0.0 < high < low:
        high, low = low, high

    while high - low > epsilon:
        next_high = (high + low) / 2.0
        if next_high >= high:
            # Gap can't shrink below the float spacing at this magnitude
            logger.debug(
                "sqrt_approx(%r) stalled at %r with gap %r above epsilon %r",
                value,
                high,
                high - low,
                epsilon,
            )
            break
        high = next_high
        low = value / high
    return high


def _taylor_sum(first_term: float, angle: float, start: int, epsilon: float) -> float:
    """Sum the alternating series shared by sine (start=1) and cosine (start=0)."""
    square = angle * angle
    term = first_term
    total = first_term
    k = start
    while abs(term) > epsilon:
        term *= -square / ((k + 1) * (k + 2))
        if not math.isfinite(term):
            logger.debug("Taylor series for angle %r overflowed after power %d", angle, k)
            break
        total += term
        k += 2
    return total


def sine(angle: float, *, epsilon: float = SERIES_EPSILON) -> float:
    """Sine of an angle in radians by Taylor series around 0.

    No range reduction is applied, so accuracy drops as |angle| grows past π.
    """
    return _taylor_sum(float(angle), angle, 1, epsilon)


def cosine(angle: float, *, epsilon: float = SERIES_EPSILON) -> float:
    """Cosine of an angle in radians by Taylor series around 0.

    No range reduction is applied, so accuracy drops as |angle| grows past π.
    """
    return _taylor_sum(1.0, angle, 0, epsilon)


def tangent(angle: float, *, epsilon: float = SERIES_EPSILON) -> float:
    """Tangent as sine / cosine; 0.0 when the cosine is exactly zero."""
    cos_value = cosine(angle, epsilon=epsilon)
    if cos_value == 0:
        return 0.0
    return sine(angle, epsilon=epsilon) / cos_value


def degrees_to_radians(degrees: float, *, pi: float = PI_APPROX) -> float:
    return degrees * pi / 180.0


def radians_to_degrees(radians: float, *, pi: float = PI_APPROX) -> float:
    return radians * 180.0 / pi
