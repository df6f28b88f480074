"""
Пакет scene – сцена прогона, меши и модели.
"""

from scenebake.scene.mesh import CompactVertex, Mesh
from scenebake.scene.model import Model
from scenebake.scene.scene import Scene

__all__ = ["CompactVertex", "Mesh", "Model", "Scene"]
