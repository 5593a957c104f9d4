"""Matrix namespace."""

from .matrix2x2 import Matrix2x2  # noqa: F401
from .matrix3x3 import Matrix3x3  # noqa: F401
from .matrix4x4 import Matrix4x4  # noqa: F401
