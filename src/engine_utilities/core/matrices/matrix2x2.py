"""2x2 matrix for linear 2D transforms."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..math import scalar
from ..vectors import Vector2
from .base import MatrixBase


class Matrix2x2(MatrixBase):
    """Row-major 2x2 float32 matrix.

    ``Matrix2x2()`` is the identity; ``Matrix2x2(m00, m01, m10, m11)`` sets
    every element.
    """

    __slots__ = ()

    SIZE = 2

    def determinant(self) -> float:
        m = self.m
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

    def cofactor(self, row: int, col: int) -> float:
        minor = self._minor(row, col)
        sign = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * float(minor[0, 0])

    def inverse(self) -> Matrix2x2:
        """Closed-form inverse, or the identity when the determinant is 0."""
        det = self.determinant()
        if det == 0.0:
            return self._singular_fallback()
        inv_det = np.float32(1.0) / np.float32(det)
        m = self.m
        return Matrix2x2(
            m[1, 1] * inv_det, -m[0, 1] * inv_det,
            -m[1, 0] * inv_det, m[0, 0] * inv_det,
        )

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        self.m[...] = ((scale_x, 0.0), (0.0, scale_y))

    def set_rotation(self, radians: float) -> None:
        """Counter-clockwise rotation; ``radians`` is used as given."""
        c = scalar.cos(radians)
        s = scalar.sin(radians)
        self.m[...] = ((c, -s), (s, c))

    @classmethod
    def scaling(cls, scale_x: float, scale_y: float) -> Matrix2x2:
        result = cls()
        result.set_scale(scale_x, scale_y)
        return result

    @classmethod
    def rotation(cls, radians: float) -> Matrix2x2:
        result = cls()
        result.set_rotation(radians)
        return result

    def _transform(self, vec: Any) -> Any:
        if isinstance(vec, Vector2):
            out = self.m @ vec.to_array()
            return Vector2(out[0], out[1])
        return NotImplemented
