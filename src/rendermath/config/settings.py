"""Configuration settings using Pydantic Settings.

Provides typed, validated tolerances for the scalar kernel with environment
variable support.

Usage:
    from rendermath.config import MathSettings

    # Load from environment variables (RENDERMATH_*)
    settings = MathSettings()

    # Or override with explicit values
    settings = MathSettings(sqrt_epsilon=1e-9, refine_unit_interval=True)
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install rendermath[config]"
    ) from e

from rendermath.scalar.operations import PI_APPROX, SERIES_EPSILON, SQRT_EPSILON


class MathSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the scalar math kernel.

    Attributes:
        sqrt_epsilon: Newton-Raphson stopping gap between the two estimates.
        series_epsilon: Magnitude at which Taylor series stop adding terms.
        pi: Value of π used by degree/radian conversion.
        refine_unit_interval: Let sqrt_approx iterate for 0 < value < 1
            instead of returning the value unchanged.

    Environment Variables:
        RENDERMATH_SQRT_EPSILON
        RENDERMATH_SERIES_EPSILON
        RENDERMATH_PI
        RENDERMATH_REFINE_UNIT_INTERVAL
    """

    model_config = SettingsConfigDict(
        env_prefix="RENDERMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sqrt_epsilon: float = Field(default=SQRT_EPSILON, gt=0)
    series_epsilon: float = Field(default=SERIES_EPSILON, gt=0)
    pi: float = Field(default=PI_APPROX, gt=0)
    refine_unit_interval: bool = False
