"""Core models: shared protocols.

Protocols here are optional interfaces that entities implement to take part in
generic operations such as `interpolate`.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Interpolatable(Protocol):
    """Blend between instances (for animation and continuous transitions)."""

    def __interpolate__(self, other: Self, t: float) -> Self: ...
