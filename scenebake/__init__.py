"""
scenebake – офлайн‑шаг ассет‑конвейера: OBJ/MTL → нормализованная сцена
(дедуплицированные буферы вершин/индексов, таблица материалов,
связки меш ↔ материал).
"""

from scenebake.utils import logger, Config
from scenebake.errors import (
    SceneBakeError, AssetIOError, FormatError, UnsupportedFaceError, DegenerateUVError,
)
from scenebake.math import Vec2, Vec3
from scenebake.assets import Material, load_mtl
from scenebake.scene import CompactVertex, Mesh, Model, Scene
from scenebake.mesh import AttributeIndex, deduplicate, compute_tangents
from scenebake.utils.loader import load_obj
from scenebake.pipeline import process_file, run

__version__ = "1.0.0"

__all__ = [
    "Config",
    "SceneBakeError",
    "AssetIOError",
    "FormatError",
    "UnsupportedFaceError",
    "DegenerateUVError",
    "Vec2",
    "Vec3",
    "Material",
    "load_mtl",
    "CompactVertex",
    "Mesh",
    "Model",
    "Scene",
    "AttributeIndex",
    "deduplicate",
    "compute_tangents",
    "load_obj",
    "process_file",
    "run",
]
