"""Behavior shared by the fixed-size vector types.

Components live in a contiguous float32 array of shape (SIZE,). Operators
return new vectors; the compound operators and the named setters mutate the
receiver in place.

Division by a zero scalar is deliberately unguarded and yields IEEE inf/NaN
components. ``normalize``/``normalized`` are the guarded paths.
"""

from __future__ import annotations

from numbers import Real
from typing import ClassVar, Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..math import scalar


ArrayF32 = NDArray[np.float32]

_V = TypeVar("_V", bound="VectorBase")


def component(index: int, doc: str) -> property:
    """Build a float property bound to one slot of the component array."""

    def getter(self: VectorBase) -> float:
        return float(self._v[index])

    def setter(self: VectorBase, value: float) -> None:
        self._v[index] = value

    return property(getter, setter, doc=doc)


def check_index(owner: str, index: object, size: int) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{owner} indices must be integers, not {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"{owner} index out of range: {index}")
    return int(index)


class VectorBase:
    __slots__ = ("_v",)

    SIZE: ClassVar[int] = 0

    # keep numpy scalars from broadcasting over the sequence protocol
    __array_ufunc__ = None

    _v: ArrayF32

    @classmethod
    def _wrap(cls: type[_V], data: ArrayF32) -> _V:
        obj = cls.__new__(cls)
        obj._v = np.ascontiguousarray(data, dtype=np.float32)
        return obj

    @classmethod
    def from_array(cls: type[_V], values: ArrayLike) -> _V:
        arr = np.array(values, dtype=np.float32)
        if arr.shape != (cls.SIZE,):
            raise ValueError(f"{cls.__name__} expects shape ({cls.SIZE},), got {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def zero(cls: type[_V]) -> _V:
        return cls._wrap(np.zeros(cls.SIZE, dtype=np.float32))

    @classmethod
    def one(cls: type[_V]) -> _V:
        return cls._wrap(np.ones(cls.SIZE, dtype=np.float32))

    def copy(self: _V) -> _V:
        return self._wrap(self._v.copy())

    def to_array(self) -> ArrayF32:
        return self._v.copy()

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def _require_same_kind(self, other: object, op: str) -> None:
        if not self._same_kind(other):
            raise TypeError(
                f"{op} requires two {type(self).__name__} values, got {type(other).__name__}"
            )

    # arithmetic

    def __add__(self: _V, other: _V) -> _V:
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self._v + other._v)

    def __sub__(self: _V, other: _V) -> _V:
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self._v - other._v)

    def __neg__(self: _V) -> _V:
        return self._wrap(-self._v)

    def __mul__(self: _V, factor: float) -> _V:
        if not isinstance(factor, Real):
            return NotImplemented
        return self._wrap(self._v * np.float32(factor))

    __rmul__ = __mul__

    def __truediv__(self: _V, factor: float) -> _V:
        if not isinstance(factor, Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._wrap(self._v / np.float32(factor))

    def __iadd__(self: _V, other: _V) -> _V:
        if not self._same_kind(other):
            return NotImplemented
        self._v += other._v
        return self

    def __isub__(self: _V, other: _V) -> _V:
        if not self._same_kind(other):
            return NotImplemented
        self._v -= other._v
        return self

    def __imul__(self: _V, factor: float) -> _V:
        if not isinstance(factor, Real):
            return NotImplemented
        self._v *= np.float32(factor)
        return self

    def __itruediv__(self: _V, factor: float) -> _V:
        if not isinstance(factor, Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v /= np.float32(factor)
        return self

    # comparison and container protocol

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        return float(self._v[check_index(type(self).__name__, index, self.SIZE)])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[check_index(type(self).__name__, index, self.SIZE)] = value

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._v)

    def __repr__(self) -> str:
        parts = ", ".join(repr(c) for c in self)
        return f"{type(self).__name__}({parts})"

    # geometry

    def length_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return scalar.sqrt(self.length_squared())

    def dot(self: _V, other: _V) -> float:
        self._require_same_kind(other, "dot")
        return float(np.dot(self._v, other._v))

    def normalized(self: _V) -> _V:
        """Return a unit-length copy, or the zero vector if the length is 0."""
        n = self.length()
        if n == 0.0:
            return self.zero()
        return self._wrap(self._v / np.float32(n))

    def normalize(self) -> None:
        n = self.length()
        if n != 0.0:
            self._v /= np.float32(n)

    @staticmethod
    def distance(a: _V, b: _V) -> float:
        return (a - b).length()

    @staticmethod
    def lerp(a: _V, b: _V, t: float) -> _V:
        """Interpolate from ``a`` to ``b`` with ``t`` clamped to [0, 1]."""
        a._require_same_kind(b, "lerp")
        t = scalar.clamp01(t)
        # weighted form keeps both endpoints exact
        return a * (1.0 - t) + b * t

    # transform-style aliases over the same components

    def set_position(self: _V, position: _V) -> None:
        self._require_same_kind(position, "set_position")
        self._v[:] = position._v

    def move(self: _V, offset: _V) -> None:
        self._require_same_kind(offset, "move")
        self._v += offset._v

    def set_scale(self: _V, factors: _V) -> None:
        self._require_same_kind(factors, "set_scale")
        self._v[:] = factors._v

    def scale(self: _V, factors: _V) -> None:
        """Multiply component-wise by ``factors`` in place."""
        self._require_same_kind(factors, "scale")
        self._v *= factors._v

    def set_origin(self: _V, origin: _V) -> None:
        self._require_same_kind(origin, "set_origin")
        self._v[:] = origin._v
