"""Behavior shared by the square matrix types.

Storage is a row-major float32 grid exposed as the attribute ``m`` with
shape (SIZE, SIZE). A default-constructed matrix is the identity.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, ClassVar, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..vectors.base import check_index


logger = logging.getLogger(__name__)

ArrayF32 = NDArray[np.float32]

_M = TypeVar("_M", bound="MatrixBase")


class MatrixBase(ABC):
    __slots__ = ("m",)

    SIZE: ClassVar[int] = 0

    # keep numpy scalars from broadcasting over the sequence protocol
    __array_ufunc__ = None

    m: ArrayF32

    def __init__(self, *elements: float) -> None:
        n = self.SIZE
        if not elements:
            self.m = np.empty((n, n), dtype=np.float32)
            self.set_identity()
        elif len(elements) == n * n:
            self.m = np.array(elements, dtype=np.float32).reshape(n, n)
        else:
            raise ValueError(
                f"{type(self).__name__} takes 0 or {n * n} elements, got {len(elements)}"
            )

    @classmethod
    def _wrap(cls: type[_M], data: ArrayF32) -> _M:
        obj = cls.__new__(cls)
        obj.m = np.ascontiguousarray(data, dtype=np.float32)
        return obj

    @classmethod
    def from_rows(cls: type[_M], rows: ArrayLike) -> _M:
        arr = np.array(rows, dtype=np.float32)
        n = cls.SIZE
        if arr.shape != (n, n):
            raise ValueError(f"{cls.__name__} expects shape ({n}, {n}), got {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def identity(cls: type[_M]) -> _M:
        return cls._wrap(np.eye(cls.SIZE, dtype=np.float32))

    @classmethod
    def zero(cls: type[_M]) -> _M:
        return cls._wrap(np.zeros((cls.SIZE, cls.SIZE), dtype=np.float32))

    def copy(self: _M) -> _M:
        return self._wrap(self.m.copy())

    def to_array(self) -> ArrayF32:
        return self.m.copy()

    def set_identity(self) -> None:
        self.m[...] = np.eye(self.SIZE, dtype=np.float32)

    def _clear(self) -> None:
        self.m.fill(0.0)

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    # arithmetic

    def __add__(self: _M, other: _M) -> _M:
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self.m + other.m)

    def __sub__(self: _M, other: _M) -> _M:
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self.m - other.m)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._wrap(self.m * np.float32(other))
        if self._same_kind(other):
            return self._multiply(other)
        return self._transform(other)

    def __rmul__(self: _M, factor: float) -> _M:
        if not isinstance(factor, Real):
            return NotImplemented
        return self._wrap(self.m * np.float32(factor))

    def __iadd__(self: _M, other: _M) -> _M:
        if not self._same_kind(other):
            return NotImplemented
        self.m += other.m
        return self

    def __isub__(self: _M, other: _M) -> _M:
        if not self._same_kind(other):
            return NotImplemented
        self.m -= other.m
        return self

    def __imul__(self: _M, factor: float) -> _M:
        if not isinstance(factor, Real):
            return NotImplemented
        self.m *= np.float32(factor)
        return self

    def _multiply(self: _M, other: _M) -> _M:
        """Row-by-column product accumulated into a zero matrix."""
        n = self.SIZE
        result = self.zero()
        for row in range(n):
            for col in range(n):
                for k in range(n):
                    result.m[row, col] += self.m[row, k] * other.m[k, col]
        return result

    def _transform(self, vec: Any) -> Any:
        return NotImplemented

    def transform(self, vec: Any) -> Any:
        """Apply this matrix to a vector of a supported size."""
        result = self._transform(vec)
        if result is NotImplemented:
            raise TypeError(
                f"{type(self).__name__} cannot transform {type(vec).__name__}"
            )
        return result

    # comparison and element access

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None  # type: ignore[assignment]

    def _key(self, key: object) -> tuple[int, int]:
        name = type(self).__name__
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"{name} elements are addressed as m[row, col]")
        return (
            check_index(name, key[0], self.SIZE),
            check_index(name, key[1], self.SIZE),
        )

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self.m[self._key(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.m[self._key(key)] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.m.tolist()!r})"

    # linear algebra

    def transpose(self: _M) -> _M:
        return self._wrap(self.m.T.copy())

    def _minor(self, row: int, col: int) -> ArrayF32:
        name = type(self).__name__
        row = check_index(name, row, self.SIZE)
        col = check_index(name, col, self.SIZE)
        return np.delete(np.delete(self.m, row, axis=0), col, axis=1)

    @abstractmethod
    def cofactor(self, row: int, col: int) -> float:
        """Signed minor of the element at (row, col)."""

    @abstractmethod
    def determinant(self) -> float:
        """Scalar determinant of the grid."""

    def cofactor_matrix(self: _M) -> _M:
        n = self.SIZE
        result = self.zero()
        for row in range(n):
            for col in range(n):
                result.m[row, col] = self.cofactor(row, col)
        return result

    def adjugate(self: _M) -> _M:
        """Transpose of the cofactor matrix."""
        return self.cofactor_matrix().transpose()

    def _singular_fallback(self: _M) -> _M:
        logger.debug("%s is singular, inverse falls back to identity", type(self).__name__)
        return self.identity()
