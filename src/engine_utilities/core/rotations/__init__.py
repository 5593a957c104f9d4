"""Rotation namespace."""

from .quaternion import Quaternion  # noqa: F401
