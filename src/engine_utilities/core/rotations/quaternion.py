"""Quaternion rotations.

Conventions:
- Storage order: [x, y, z, w], with w the real part.
- Identity is (0, 0, 0, 1).
- Composition: ``q2 * q1`` applies q1 first, then q2.
- Vector rotation: ``q.rotate(v)`` is the vector part of q * (v, 0) * q^-1.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..math import scalar
from ..matrices import Matrix3x3
from ..vectors import Vector3
from ..vectors.base import check_index, component


logger = logging.getLogger(__name__)

ArrayF32 = NDArray[np.float32]


class Quaternion:
    __slots__ = ("_v",)

    # keep numpy scalars from broadcasting over the sequence protocol
    __array_ufunc__ = None

    x = component(0, "X component of the vector part.")
    y = component(1, "Y component of the vector part.")
    z = component(2, "Z component of the vector part.")
    w = component(3, "Real part.")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0
    ) -> None:
        self._v = np.array((x, y, z, w), dtype=np.float32)

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Quaternion:
        arr = np.array(values, dtype=np.float32)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion expects shape (4,), got {arr.shape}")
        return cls(*arr)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``.

        The axis must already be unit length; it is used as given.
        """
        half = angle * 0.5
        s = scalar.sin(half)
        c = scalar.cos(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, c)

    def copy(self) -> Quaternion:
        return Quaternion(*self._v)

    def to_array(self) -> ArrayF32:
        return self._v.copy()

    # composition

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        x1, y1, z1, w1 = self._v
        x2, y2, z2, w2 = other._v
        return Quaternion(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )

    def __imul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self._v[:] = (self * other)._v
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        return float(self._v[check_index("Quaternion", index, 4)])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[check_index("Quaternion", index, 4)] = value

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._v)

    def __repr__(self) -> str:
        x, y, z, w = self
        return f"Quaternion(x={x!r}, y={y!r}, z={z!r}, w={w!r})"

    # magnitude

    def length_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return scalar.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale to unit length in place; a zero quaternion is left unchanged."""
        n = self.length()
        if n == 0.0:
            logger.debug("zero-length quaternion left unnormalized")
            return
        self._v /= np.float32(n)

    def normalized(self) -> Quaternion:
        """Unit-length copy, or the identity for a zero quaternion."""
        n = self.length()
        if n == 0.0:
            logger.debug("zero-length quaternion normalized to identity")
            return Quaternion.identity()
        return Quaternion(*(self._v / np.float32(n)))

    def conjugate(self) -> Quaternion:
        x, y, z, w = self._v
        return Quaternion(-x, -y, -z, w)

    def inverse(self) -> Quaternion:
        """Conjugate over squared length; identity for a zero quaternion."""
        len_sq = np.float32(self.length_squared())
        if len_sq == 0.0:
            logger.debug("zero-length quaternion inverted to identity")
            return Quaternion.identity()
        x, y, z, w = self._v
        return Quaternion(-x / len_sq, -y / len_sq, -z / len_sq, w / len_sq)

    # application

    def rotate(self, v: Vector3) -> Vector3:
        qv = Quaternion(v.x, v.y, v.z, 0.0)
        result = self * qv * self.inverse()
        return Vector3(result.x, result.y, result.z)

    def to_rotation_matrix(self) -> Matrix3x3:
        """Rotation matrix of the normalized quaternion, acting on column vectors."""
        x, y, z, w = self.normalized()._v

        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z

        return Matrix3x3(
            1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy),
            2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx),
            2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy),
        )

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
        """Component-wise linear interpolation, then normalization.

        ``t`` is clamped to [0, 1]. This is not slerp: the angular speed is
        not constant along the path.
        """
        t = np.float32(scalar.clamp01(t))
        return Quaternion(*(a._v + (b._v - a._v) * t)).normalized()
