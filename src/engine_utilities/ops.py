"""Named forms of the arithmetic operators.

Each binary function returns a new value. The ``*_in_place`` variants mutate
their first argument and return ``None``. Operand combinations the value types
do not support raise ``TypeError`` instead of falling back to a rebinding.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, TypeVar

from .core.matrices.base import MatrixBase
from .core.rotations import Quaternion
from .core.vectors.base import VectorBase


_T = TypeVar("_T")


def _apply(left: Any, right: Any, method: str, symbol: str) -> Any:
    fn = getattr(type(left), method, None)
    result = NotImplemented if fn is None else fn(left, right)
    if result is NotImplemented:
        raise TypeError(
            f"unsupported operand types for {symbol}: "
            f"{type(left).__name__!r} and {type(right).__name__!r}"
        )
    return result


def _require_scalar(factor: object) -> None:
    if not isinstance(factor, Real):
        raise TypeError(f"expected a real scalar, got {type(factor).__name__!r}")


def add(a: _T, b: _T) -> _T:
    return _apply(a, b, "__add__", "+")


def subtract(a: _T, b: _T) -> _T:
    return _apply(a, b, "__sub__", "-")


def negate(value: _T) -> _T:
    if not isinstance(value, VectorBase):
        raise TypeError(f"cannot negate {type(value).__name__!r}")
    return -value


def scale(value: _T, factor: float) -> _T:
    """Multiply a vector or matrix by a scalar."""
    _require_scalar(factor)
    return _apply(value, factor, "__mul__", "*")


def divide(value: _T, factor: float) -> _T:
    """Divide a vector by a scalar. A zero factor gives inf/NaN components."""
    _require_scalar(factor)
    return _apply(value, factor, "__truediv__", "/")


def multiply_matrix(a: _T, b: _T) -> _T:
    if not isinstance(a, MatrixBase) or type(a) is not type(b):
        raise TypeError(
            f"multiply_matrix needs two matrices of the same size, "
            f"got {type(a).__name__!r} and {type(b).__name__!r}"
        )
    return a * b


def transform_vector(matrix: MatrixBase, vec: VectorBase) -> VectorBase:
    return matrix.transform(vec)


def multiply_quaternion(a: Quaternion, b: Quaternion) -> Quaternion:
    if not isinstance(a, Quaternion):
        raise TypeError(f"expected a Quaternion, got {type(a).__name__!r}")
    return _apply(a, b, "__mul__", "*")


def add_in_place(target: Any, other: Any) -> None:
    _apply(target, other, "__iadd__", "+=")


def subtract_in_place(target: Any, other: Any) -> None:
    _apply(target, other, "__isub__", "-=")


def scale_in_place(target: Any, factor: float) -> None:
    _require_scalar(factor)
    _apply(target, factor, "__imul__", "*=")


def divide_in_place(target: Any, factor: float) -> None:
    _require_scalar(factor)
    _apply(target, factor, "__itruediv__", "/=")


def multiply_quaternion_in_place(target: Quaternion, other: Quaternion) -> None:
    _apply(target, other, "__imul__", "*=")
