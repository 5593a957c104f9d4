"""Scalar math namespace."""

from . import constants, scalar  # noqa: F401
from .constants import APPROXIMATION, ApproximationSettings  # noqa: F401
