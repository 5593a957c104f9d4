from __future__ import annotations

import numpy as np
import pytest

from engine_utilities import (
    Matrix2x2,
    Matrix3x3,
    Matrix4x4,
    Quaternion,
    Vector2,
    Vector3,
    Vector4,
    ops,
)


def test_named_binary_operations_match_operators() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert ops.add(a, b) == a + b
    assert ops.subtract(a, b) == a - b
    assert ops.scale(a, 3.0) == a * 3.0
    assert ops.divide(a, 2.0) == a / 2.0
    assert ops.negate(a) == -a

    m = Matrix2x2(1.0, 2.0, 3.0, 4.0)
    assert ops.add(m, m) == m + m
    assert ops.scale(m, 0.5) == m * 0.5
    assert ops.multiply_matrix(m, m.inverse()) == m * m.inverse()


def test_named_operations_return_new_values() -> None:
    a = Vector2(1.0, 1.0)
    result = ops.add(a, Vector2(1.0, 2.0))
    assert result is not a
    assert a == Vector2(1.0, 1.0)


def test_transform_vector() -> None:
    t = Matrix4x4.translation(1.0, 2.0, 3.0)
    assert ops.transform_vector(t, Vector3.zero()) == Vector3(1.0, 2.0, 3.0)
    assert ops.transform_vector(t, Vector4(0.0, 0.0, 0.0, 1.0)) == Vector4(1.0, 2.0, 3.0, 1.0)
    assert ops.transform_vector(Matrix3x3.translation(1.0, 1.0), Vector2.one()) == Vector2(2.0, 2.0)
    with pytest.raises(TypeError):
        ops.transform_vector(Matrix2x2(), Vector4())


def test_multiply_quaternion() -> None:
    i = Quaternion(1.0, 0.0, 0.0, 0.0)
    j = Quaternion(0.0, 1.0, 0.0, 0.0)
    assert ops.multiply_quaternion(i, j) == Quaternion(0.0, 0.0, 1.0, 0.0)

    q = Quaternion(1.0, 0.0, 0.0, 0.0)
    assert ops.multiply_quaternion_in_place(q, j) is None
    assert q == Quaternion(0.0, 0.0, 1.0, 0.0)


def test_in_place_variants_mutate_and_return_none() -> None:
    v = Vector4(2.0, 4.0, 6.0, 8.0)
    assert ops.add_in_place(v, Vector4.one()) is None
    assert v == Vector4(3.0, 5.0, 7.0, 9.0)
    ops.subtract_in_place(v, Vector4.one())
    ops.scale_in_place(v, 0.5)
    ops.divide_in_place(v, 2.0)
    assert v == Vector4(0.5, 1.0, 1.5, 2.0)

    m = Matrix3x3()
    ops.scale_in_place(m, 3.0)
    ops.add_in_place(m, Matrix3x3.identity())
    assert m == Matrix3x3.identity() * 4.0


def test_divide_by_zero_propagates_ieee_values() -> None:
    v = ops.divide(Vector2(1.0, -1.0), 0.0)
    assert np.isposinf(v.x)
    assert np.isneginf(v.y)


def test_unsupported_combinations_raise_type_error() -> None:
    with pytest.raises(TypeError):
        ops.add(Vector2(), Matrix2x2())
    with pytest.raises(TypeError):
        ops.scale(Vector3(), Vector3())
    with pytest.raises(TypeError):
        ops.scale(Quaternion(), 2.0)
    with pytest.raises(TypeError):
        ops.scale_in_place(Quaternion(), 2.0)
    with pytest.raises(TypeError):
        ops.divide_in_place(Matrix2x2(), 2.0)
    with pytest.raises(TypeError):
        ops.multiply_matrix(Matrix2x2(), Matrix3x3())
    with pytest.raises(TypeError):
        ops.multiply_matrix(Vector2(), Vector2())
    with pytest.raises(TypeError):
        ops.multiply_quaternion(Matrix2x2(), Matrix2x2())
    with pytest.raises(TypeError):
        ops.negate(Quaternion())
