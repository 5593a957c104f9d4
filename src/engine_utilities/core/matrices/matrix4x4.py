"""4x4 matrix for homogeneous 3D transforms."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..math import scalar
from ..vectors import Vector3, Vector4
from .base import MatrixBase
from .matrix3x3 import Matrix3x3


class Matrix4x4(MatrixBase):
    """Row-major 4x4 float32 matrix.

    Translation lives in the last column, so points are transformed as
    column vectors: ``M * Vector3`` treats the point as (x, y, z, 1).
    """

    __slots__ = ()

    SIZE = 4

    def cofactor(self, row: int, col: int) -> float:
        minor = Matrix3x3._wrap(self._minor(row, col))
        sign = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * minor.determinant()

    def determinant(self) -> float:
        """Laplace expansion along the first row."""
        total = np.float32(0.0)
        for col in range(4):
            total += self.m[0, col] * np.float32(self.cofactor(0, col))
        return float(total)

    def inverse(self) -> Matrix4x4:
        """Inverse as ``adjugate() * (1 / det)``; identity when det is 0."""
        det = self.determinant()
        if det == 0.0:
            return self._singular_fallback()
        return self.adjugate() * (1.0 / det)

    # Each setter overwrites the whole grid; nothing from the previous
    # transform survives.

    def set_scale(self, scale_x: float, scale_y: float, scale_z: float) -> None:
        self._clear()
        self.m[0, 0] = scale_x
        self.m[1, 1] = scale_y
        self.m[2, 2] = scale_z
        self.m[3, 3] = 1.0

    def set_translation(self, tx: float, ty: float, tz: float) -> None:
        self._clear()
        self.m[0, 0] = 1.0
        self.m[1, 1] = 1.0
        self.m[2, 2] = 1.0
        self.m[3, 3] = 1.0
        self.m[0, 3] = tx
        self.m[1, 3] = ty
        self.m[2, 3] = tz

    def set_rotation(self, radians: float) -> None:
        """Rotation about the Z axis."""
        c = scalar.cos(radians)
        s = scalar.sin(radians)
        self._clear()
        self.m[0, 0] = c
        self.m[0, 1] = -s
        self.m[1, 0] = s
        self.m[1, 1] = c
        self.m[2, 2] = 1.0
        self.m[3, 3] = 1.0

    @classmethod
    def scaling(cls, scale_x: float, scale_y: float, scale_z: float) -> Matrix4x4:
        result = cls()
        result.set_scale(scale_x, scale_y, scale_z)
        return result

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Matrix4x4:
        result = cls()
        result.set_translation(tx, ty, tz)
        return result

    @classmethod
    def rotation(cls, radians: float) -> Matrix4x4:
        result = cls()
        result.set_rotation(radians)
        return result

    def _transform(self, vec: Any) -> Any:
        if isinstance(vec, Vector3):
            point = np.array((vec.x, vec.y, vec.z, 1.0), dtype=np.float32)
            x, y, z, w = self.m @ point
            if w != 0.0:
                x /= w
                y /= w
                z /= w
            return Vector3(x, y, z)
        if isinstance(vec, Vector4):
            out = self.m @ vec.to_array()
            return Vector4(out[0], out[1], out[2], out[3])
        return NotImplemented
