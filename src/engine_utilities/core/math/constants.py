"""Canonical math constants and approximation parameters.

Values are single precision, matching the storage type of every vector,
matrix and quaternion in the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np


PI: Final[float] = float(np.float32(3.14159265358979323846))
TWO_PI: Final[float] = float(np.float32(6.28318530717958647692))
HALF_PI: Final[float] = float(np.float32(1.57079632679489661923))
QUARTER_PI: Final[float] = float(np.float32(0.785398163397448309616))

DEG_TO_RAD: Final[float] = float(np.float32(PI) / np.float32(180.0))
RAD_TO_DEG: Final[float] = float(np.float32(180.0) / np.float32(PI))

# Euler's number
E: Final[float] = float(np.float32(2.71828182845904523536))

EPSILON: Final[float] = float(np.float32(1e-6))

ONE: Final[float] = 1.0
ZERO: Final[float] = 0.0

# Large finite surrogates, not IEEE infinities.
INF: Final[float] = float(np.float32(1e30))
NEG_INF: Final[float] = float(np.float32(-1e30))


@dataclass(frozen=True, slots=True)
class ApproximationSettings:
    sqrt_iterations: int
    sin_tolerance: float
    cos_terms: int


APPROXIMATION: Final[ApproximationSettings] = ApproximationSettings(
    sqrt_iterations=10,
    sin_tolerance=1e-7,
    cos_terms=5,
)
