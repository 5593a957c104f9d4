"""4D vector, typically a homogeneous coordinate."""

from __future__ import annotations

import numpy as np

from .base import VectorBase, component


class Vector4(VectorBase):
    __slots__ = ()

    SIZE = 4

    x = component(0, "X component.")
    y = component(1, "Y component.")
    z = component(2, "Z component.")
    w = component(3, "W component.")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self._v = np.array((x, y, z, w), dtype=np.float32)
