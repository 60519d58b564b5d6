"""Vector math for the tank game.

The package is deliberately small: a fixed-dimension vector type for
positions, velocities and forces, plus the settings that control how
vectors are printed.
"""

from .config import RenderSettings, load_render_settings
from .vector import Angle, Scalar, Vector, Vector2, Vector2d, Vector3, Vector3d, Vector4

__all__ = [
    "Angle",
    "Scalar",
    "Vector",
    "Vector2",
    "Vector2d",
    "Vector3",
    "Vector3d",
    "Vector4",
    "RenderSettings",
    "load_render_settings",
]
