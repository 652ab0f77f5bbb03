"""Configuration module using Pydantic Settings.

Provides typed configuration for the scalar kernel with environment variable
support.

Usage:
    from rendermath.config import MathSettings

    settings = MathSettings(series_epsilon=1e-9)
"""

from rendermath.config.settings import MathSettings

__all__ = [
    "MathSettings",
]
