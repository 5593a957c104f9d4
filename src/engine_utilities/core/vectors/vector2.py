"""2D vector."""

from __future__ import annotations

import numpy as np

from .base import VectorBase, component


class Vector2(VectorBase):
    """Two float32 components ``x`` and ``y``; defaults to (0, 0)."""

    __slots__ = ()

    SIZE = 2

    x = component(0, "X component.")
    y = component(1, "Y component.")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._v = np.array((x, y), dtype=np.float32)

    def cross(self, other: Vector2) -> float:
        """Z component of the cross product of the two vectors embedded in 3D."""
        self._require_same_kind(other, "cross")
        a, b = self._v, other._v
        return float(a[0] * b[1] - a[1] * b[0])
