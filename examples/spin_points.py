"""Spin a square of points about the Z axis with a quaternion (toy loop)."""

from __future__ import annotations

from engine_utilities import Quaternion, Vector3
from engine_utilities.core.math.constants import DEG_TO_RAD


if __name__ == "__main__":
    points = [
        Vector3(1.0, 1.0, 0.0),
        Vector3(-1.0, 1.0, 0.0),
        Vector3(-1.0, -1.0, 0.0),
        Vector3(1.0, -1.0, 0.0),
    ]
    axis = Vector3(0.0, 0.0, 1.0)
    step = Quaternion.from_axis_angle(axis, 3.0 * DEG_TO_RAD)

    orientation = Quaternion.identity()
    frames = 30
    for _ in range(frames):
        orientation *= step
        orientation.normalize()

    # 30 steps of 3 degrees: a quarter turn
    for p in points:
        print(p, "->", orientation.rotate(p))
