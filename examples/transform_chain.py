"""Compose scale, rotation and translation into one 4x4 model matrix."""

from __future__ import annotations

from engine_utilities import Matrix4x4, Vector3, Vector4
from engine_utilities.core.math.constants import HALF_PI


if __name__ == "__main__":
    scale = Matrix4x4.scaling(2.0, 2.0, 2.0)
    rotate = Matrix4x4.rotation(HALF_PI)
    translate = Matrix4x4.translation(10.0, 0.0, -5.0)

    # applied right to left: scale, then rotate, then translate
    model = translate * rotate * scale

    print("model:", model)
    print("point:", model * Vector3(1.0, 0.0, 0.0))
    print("direction:", model * Vector4(1.0, 0.0, 0.0, 0.0))
    print("round trip:", model.inverse() * (model * Vector3(1.0, 2.0, 3.0)))
