"""Vector namespace."""

from .vector2 import Vector2  # noqa: F401
from .vector3 import Vector3  # noqa: F401
from .vector4 import Vector4  # noqa: F401
