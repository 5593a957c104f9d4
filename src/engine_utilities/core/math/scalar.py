"""Scalar math core.

Elementary functions implemented with fixed-cost approximations instead of
the platform math library:
- sqrt: Newton-Raphson, fixed iteration count, initial guess n/2.
- sin: angle wrapped into [-pi, pi], then a Taylor series summed until a
  term drops below a fixed tolerance.
- cos: angle wrapped into [-pi, pi], then a fixed number of Taylor terms.

Arithmetic runs in single precision (float32); results are returned as
Python ``float`` or ``int``. Accuracy is roughly 1e-5 relative for sqrt on
moderate inputs and for sin/cos within a few hundred turns of zero.
"""

from __future__ import annotations

import numpy as np

from .constants import APPROXIMATION, E, PI, TWO_PI


_f32 = np.float32


def square(number: float) -> float:
    x = _f32(number)
    return float(x * x)


def cube(number: float) -> float:
    x = _f32(number)
    return float(x * x * x)


def sqrt(number: float) -> float:
    """Square root by Newton-Raphson.

    Non-positive input returns 0. Exactly ``APPROXIMATION.sqrt_iterations``
    steps are taken from ``number / 2``; convergence is not checked.
    """
    n = _f32(number)
    if n <= 0:
        return 0.0
    two = _f32(2.0)
    xi = n / two
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        for _ in range(APPROXIMATION.sqrt_iterations):
            xi = xi - (xi * xi - n) / (two * xi)
    return float(xi)


def power(base: float, exponent: float) -> float:
    """Repeated multiplication, once per loop counter value below ``exponent``.

    Zero, negative or NaN exponents give 1. A fractional exponent counts its
    partial step, so ``power(b, 2.5)`` multiplies three times. An infinite
    exponent gives the limit of the product.
    """
    e = float(exponent)
    if not e > 0.0:
        return 1.0
    b = _f32(base)
    if np.isinf(e):
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.power(b, _f32(e)))
    count = int(e)
    if e > count:
        count += 1
    result = _f32(1.0)
    with np.errstate(over="ignore", invalid="ignore"):
        for done in range(1, count + 1):
            result *= b
            if result == 0 or not np.isfinite(result) or abs(b) == 1:
                # saturated: the remaining steps can only flip the sign
                if b < 0 and (count - done) % 2:
                    result = -result
                break
    return float(result)


def exp(exponent: float) -> float:
    return power(E, exponent)


def abs_int(number: int) -> int:
    n = int(number)
    if n < 0:
        return -1 * n
    return n


def fabs(number: float) -> float:
    x = _f32(number)
    if x < 0:
        return float(x * _f32(-1.0))
    return float(x)


def maximum(a: float, b: float) -> float:
    if a > b:
        return float(_f32(a))
    return float(_f32(b))


def minimum(a: float, b: float) -> float:
    if a < b:
        return float(_f32(a))
    return float(_f32(b))


def round(number: float) -> int | float:
    """Truncate, then add one if the truncated fraction is at least 0.5.

    Negative inputs are truncated toward zero and never rounded down:
    ``round(-1.7) == -1``. Like ``floor`` and ``ceil``, non-finite input is
    returned unchanged as a float.
    """
    x = _f32(number)
    if not np.isfinite(x):
        return float(x)
    int_part = int(x)
    if x - _f32(int_part) >= _f32(0.5):
        return int_part + 1
    return int_part


def floor(number: float) -> int | float:
    """Truncation toward zero."""
    x = _f32(number)
    if not np.isfinite(x):
        return float(x)
    return int(x)


def ceil(number: float) -> int | float:
    """Truncation plus one, also for inputs that are already integral."""
    x = _f32(number)
    if not np.isfinite(x):
        return float(x)
    return int(x) + 1


def mod(a: float, b: float) -> float:
    """Fractional part of ``a / b``; 0 when ``b`` is 0, NaN when the quotient
    is not finite.

    This is not the conventional remainder: ``mod(5, 2) == 0.5``.
    """
    divisor = _f32(b)
    if divisor == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        q = _f32(a) / divisor
    if not np.isfinite(q):
        return float("nan")
    return float(q - _f32(int(q)))


def factorial(number: int) -> int:
    result = 1
    for i in range(int(number), 0, -1):
        result *= i
    return result


def sin(angle: float) -> float:
    """Taylor series sine, angle in radians.

    Terms are added until one falls below ``APPROXIMATION.sin_tolerance``;
    the first term is always used. The angle is first shifted by whole turns
    into [-pi, pi]; non-finite input yields NaN.
    """
    wrapped = _wrap_angle(float(angle))
    if np.isnan(wrapped):
        return float("nan")
    x = _f32(wrapped)
    tolerance = _f32(APPROXIMATION.sin_tolerance)
    result = _f32(0.0)
    term = x
    n = 0
    while n == 0 or abs(term) >= tolerance:
        result += term
        n += 1
        term *= -x * x / _f32((2 * n) * (2 * n + 1))
    return float(result)


def cos(angle: float) -> float:
    """Taylor series cosine, angle in radians.

    The angle is first shifted by whole turns into [-pi, pi], then
    ``APPROXIMATION.cos_terms`` terms are added after the leading 1.
    """
    wrapped = _wrap_angle(float(angle))
    if np.isnan(wrapped):
        return float("nan")
    x = _f32(wrapped)
    x2 = x * x
    result = _f32(1.0)
    term = _f32(1.0)
    sign = -1
    for k in range(1, APPROXIMATION.cos_terms + 1):
        i = 2 * k
        term *= x2 / _f32(i * (i - 1))
        result += _f32(sign) * term
        sign = -sign
    return float(result)


def _wrap_angle(radians: float) -> float:
    if not np.isfinite(radians):
        return float("nan")
    x = radians
    while x > PI or x < -PI:
        turns = int(x / TWO_PI)
        if turns == 0:
            turns = 1 if x > 0 else -1
        x -= turns * TWO_PI
    return x


def radians(deg: float) -> float:
    return float(_f32(deg) * _f32(PI) / _f32(180.0))


def degrees(rad: float) -> float:
    return float(_f32(rad) * _f32(180.0) / _f32(PI))


def circle_area(radius: float) -> float:
    r = _f32(radius)
    return float(_f32(PI) * r * r)


def circle_circumference(radius: float) -> float:
    return float(_f32(2.0) * _f32(PI) * _f32(radius))


def rect_area(width: float, height: float) -> float:
    return float(_f32(width) * _f32(height))


def rect_perimeter(width: float, height: float) -> float:
    return float(_f32(2.0) * (_f32(width) + _f32(height)))


def tri_area(base: float, height: float) -> float:
    return float(_f32(0.5) * _f32(base) * _f32(height))


def tri_perimeter(side1: float, side2: float, side3: float) -> float:
    return float(_f32(side1) + _f32(side2) + _f32(side3))


def equilateral_perimeter(side: float) -> float:
    return float(_f32(3.0) * _f32(side))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance between two 2D points."""
    dx = _f32(x2) - _f32(x1)
    dy = _f32(y2) - _f32(y1)
    return sqrt(float(dx * dx + dy * dy))


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; ``t`` is not clamped."""
    s = _f32(start)
    return float(s + (_f32(end) - s) * _f32(t))


def clamp01(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return float(t)
