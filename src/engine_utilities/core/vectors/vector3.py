"""3D vector."""

from __future__ import annotations

import numpy as np

from .base import VectorBase, component


class Vector3(VectorBase):
    """Three float32 components ``x``, ``y`` and ``z``; defaults to (0, 0, 0)."""

    __slots__ = ()

    SIZE = 3

    x = component(0, "X component.")
    y = component(1, "Y component.")
    z = component(2, "Z component.")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._v = np.array((x, y, z), dtype=np.float32)

    def cross(self, other: Vector3) -> Vector3:
        self._require_same_kind(other, "cross")
        a, b = self._v, other._v
        return Vector3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )
