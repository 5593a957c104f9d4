"""Fixed-size vectors, matrices and quaternions over a hand-written scalar math core."""

from __future__ import annotations

from .core.math import constants, scalar
from .core.matrices import Matrix2x2, Matrix3x3, Matrix4x4
from .core.rotations import Quaternion
from .core.vectors import Vector2, Vector3, Vector4
from . import ops

__version__ = "0.1.0"

__all__ = [
    "Matrix2x2",
    "Matrix3x3",
    "Matrix4x4",
    "Quaternion",
    "Vector2",
    "Vector3",
    "Vector4",
    "__version__",
    "constants",
    "ops",
    "scalar",
]
