"""Settings-bound access to the scalar kernel.

Usage:
    from rendermath.config import MathSettings
    from rendermath.scalar import ScalarKernel

    kernel = ScalarKernel(MathSettings(pi=3.14159265, refine_unit_interval=True))
    kernel.sqrt(0.25)   # ~0.5 instead of the unrefined 0.25
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rendermath.scalar import operations

if TYPE_CHECKING:
    from rendermath.config import MathSettings


class ScalarKernel:
    """Scalar kernel operations using the tolerances of a MathSettings.

    Args:
        settings: Optional settings (uses defaults if None). Requires the
            `config` extra when omitted.
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: MathSettings | None = None) -> None:
        if settings is None:
            from rendermath.config import MathSettings

            settings = MathSettings()
        self._settings = settings

    @property
    def settings(self) -> MathSettings:
        """Get the kernel settings."""
        return self._settings

    def sqrt(self, value: float) -> float:
        return operations.sqrt_approx(
            value,
            epsilon=self._settings.sqrt_epsilon,
            refine_unit_interval=self._settings.refine_unit_interval,
        )

    def sine(self, angle: float) -> float:
        return operations.sine(angle, epsilon=self._settings.series_epsilon)

    def cosine(self, angle: float) -> float:
        return operations.cosine(angle, epsilon=self._settings.series_epsilon)

    def tangent(self, angle: float) -> float:
        return operations.tangent(angle, epsilon=self._settings.series_epsilon)

    def degrees_to_radians(self, degrees: float) -> float:
        return operations.degrees_to_radians(degrees, pi=self._settings.pi)

    def radians_to_degrees(self, radians: float) -> float:
        return operations.radians_to_degrees(radians, pi=self._settings.pi)
