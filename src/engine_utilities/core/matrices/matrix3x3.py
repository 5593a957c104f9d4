"""3x3 matrix: linear 3D transforms and homogeneous 2D transforms."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..math import scalar
from ..vectors import Vector2, Vector3
from .base import MatrixBase


class Matrix3x3(MatrixBase):
    """Row-major 3x3 float32 matrix.

    ``Matrix3x3()`` is the identity; nine positional values set every element
    row by row. The scale/rotation/translation setters build 2D homogeneous
    transforms that act on :class:`Vector2` through ``*``.
    """

    __slots__ = ()

    SIZE = 3

    def determinant(self) -> float:
        m = self.m
        return float(
            m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
            - m[0, 1] * (m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0])
            + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0])
        )

    def cofactor(self, row: int, col: int) -> float:
        minor = self._minor(row, col)
        value = minor[0, 0] * minor[1, 1] - minor[0, 1] * minor[1, 0]
        sign = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * float(value)

    def inverse(self) -> Matrix3x3:
        """Inverse as ``adjugate() * (1 / det)``; identity when det is 0."""
        det = self.determinant()
        if det == 0.0:
            return self._singular_fallback()
        return self.adjugate() * (1.0 / det)

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        self._clear()
        self.m[0, 0] = scale_x
        self.m[1, 1] = scale_y
        self.m[2, 2] = 1.0

    def set_rotation(self, radians: float) -> None:
        c = scalar.cos(radians)
        s = scalar.sin(radians)
        self._clear()
        self.m[0, 0] = c
        self.m[0, 1] = -s
        self.m[1, 0] = s
        self.m[1, 1] = c
        self.m[2, 2] = 1.0

    def set_translation(self, tx: float, ty: float) -> None:
        self._clear()
        self.m[0, 0] = 1.0
        self.m[1, 1] = 1.0
        self.m[2, 2] = 1.0
        self.m[0, 2] = tx
        self.m[1, 2] = ty

    @classmethod
    def scaling(cls, scale_x: float, scale_y: float) -> Matrix3x3:
        result = cls()
        result.set_scale(scale_x, scale_y)
        return result

    @classmethod
    def rotation(cls, radians: float) -> Matrix3x3:
        result = cls()
        result.set_rotation(radians)
        return result

    @classmethod
    def translation(cls, tx: float, ty: float) -> Matrix3x3:
        result = cls()
        result.set_translation(tx, ty)
        return result

    def _transform(self, vec: Any) -> Any:
        if isinstance(vec, Vector2):
            x, y, w = self.m @ np.array((vec.x, vec.y, 1.0), dtype=np.float32)
            if w != 0.0:
                x /= w
                y /= w
            return Vector2(x, y)
        if isinstance(vec, Vector3):
            out = self.m @ vec.to_array()
            return Vector3(out[0], out[1], out[2])
        return NotImplemented
