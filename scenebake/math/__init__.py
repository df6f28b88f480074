"""
Математический суб‑пакет: Vec2, Vec3.
"""

from scenebake.math.vec2 import Vec2
from scenebake.math.vec3 import Vec3

__all__ = ["Vec2", "Vec3"]
