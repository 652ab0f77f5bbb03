"""Tests for the scalar math kernel.

Critical Invariants:
- Degenerate inputs return sentinels instead of raising
- sqrt_approx returns 0 <= value < 1 unchanged unless refinement is requested
- Iterations always terminate, even where epsilon is below float spacing
"""

import logging
import math

import pytest

from rendermath.scalar import (
    cosine,
    degrees_to_radians,
    radians_to_degrees,
    sine,
    sqrt_approx,
    tangent,
)
from rendermath.scalar import operations

ANGLES = [-math.pi + i * (2 * math.pi / 24) for i in range(25)]


# Square root


@pytest.mark.parametrize("value", [1.0, 2.0, 4.0, 10.0, 25.0, 99.5, 1000.0])
def test_sqrt_squares_back_to_value(value):
    root = sqrt_approx(value)
    assert root * root == pytest.approx(value, abs=1e-4)


def test_sqrt_of_perfect_square():
    assert sqrt_approx(25.0) == pytest.approx(5.0, abs=1e-6)


def test_sqrt_negative_returns_zero():
    """CRITICAL: Negative radicand is a silent degeneracy, not an error."""
    assert sqrt_approx(-1.0) == 0
    assert sqrt_approx(-1e-12) == 0


@pytest.mark.parametrize("value", [0.0, 1e-8, 0.25, 0.5, 0.999])
def test_sqrt_unit_interval_returned_unchanged(value):
    """CRITICAL: For 0 <= value < 1 the loop never runs.

    Why: Callers rely on the documented behaviour matching exactly.
    """
    assert sqrt_approx(value) == value


def test_sqrt_of_one():
    assert sqrt_approx(1.0) == 1.0


@pytest.mark.parametrize("value", [1e-4, 0.25, 0.5, 0.81])
def test_sqrt_refined_unit_interval(value):
    assert sqrt_approx(value, refine_unit_interval=True) == pytest.approx(
        math.sqrt(value), abs=1e-6
    )


def test_sqrt_refine_does_not_change_values_above_one():
    assert sqrt_approx(16.0, refine_unit_interval=True) == sqrt_approx(16.0)


def test_sqrt_terminates_for_large_values():
    """Epsilon is far below the float spacing near 1e15; must still stop."""
    assert sqrt_approx(1e30) == pytest.approx(1e15, rel=1e-9)


def test_sqrt_looser_epsilon_is_less_precise():
    coarse = sqrt_approx(2.0, epsilon=0.5)
    assert coarse != pytest.approx(math.sqrt(2.0), abs=1e-6)
    assert coarse == pytest.approx(math.sqrt(2.0), abs=0.5)


# Trigonometry


@pytest.mark.parametrize("angle", ANGLES)
def test_pythagorean_identity(angle):
    assert sine(angle) ** 2 + cosine(angle) ** 2 == pytest.approx(1.0, abs=1e-4)


@pytest.mark.parametrize("angle", ANGLES)
def test_series_match_reference_within_range(angle):
    assert sine(angle) == pytest.approx(math.sin(angle), abs=1e-5)
    assert cosine(angle) == pytest.approx(math.cos(angle), abs=1e-5)


def test_series_at_zero():
    assert sine(0.0) == 0.0
    assert cosine(0.0) == 1.0


def test_sine_is_odd_cosine_is_even():
    assert sine(-0.8) == pytest.approx(-sine(0.8))
    assert cosine(-0.8) == pytest.approx(cosine(0.8))


def test_series_overflow_terminates_and_logs(caplog):
    """A non-finite term stops the series instead of looping forever."""
    with caplog.at_level(logging.DEBUG, logger="rendermath.scalar.operations"):
        result = sine(1e200)

    assert result == 1e200
    assert "overflowed" in caplog.text


def test_tangent_matches_ratio():
    assert tangent(math.pi / 4) == pytest.approx(1.0, abs=1e-5)
    assert tangent(0.3) == pytest.approx(math.tan(0.3), abs=1e-5)
    assert tangent(0.0) == 0.0


def test_tangent_zero_cosine_returns_zero(monkeypatch):
    """CRITICAL: Exactly-zero cosine gives 0.0, never ZeroDivisionError."""
    monkeypatch.setattr(operations, "cosine", lambda angle, epsilon=None: 0.0)

    assert tangent(1.5707963) == 0.0


def test_kernel_does_not_shadow_math_module():
    assert sine is not math.sin
    assert math.sin(0.5) == pytest.approx(sine(0.5), abs=1e-6)


# Angle conversion


def test_degrees_to_radians_uses_approximate_pi():
    assert degrees_to_radians(180.0) == pytest.approx(3.1416)
    assert degrees_to_radians(180.0) != math.pi


def test_radians_to_degrees():
    assert radians_to_degrees(3.1416) == pytest.approx(180.0)
    assert radians_to_degrees(0.0) == 0.0


def test_conversion_with_custom_pi():
    assert degrees_to_radians(90.0, pi=math.pi) == pytest.approx(math.pi / 2)
    assert radians_to_degrees(math.pi, pi=math.pi) == pytest.approx(180.0)


def test_conversions_are_inverse():
    assert radians_to_degrees(degrees_to_radians(37.5)) == pytest.approx(37.5)
