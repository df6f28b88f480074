"""
Меш одной группы `usemtl` – уже дедуплицированные вершины и индексы.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from scenebake.math.vec2 import Vec2
from scenebake.math.vec3 import Vec3

# position | normal | tangent | bitangent | texcoord
VERTEX_STRIDE = 3 + 3 + 3 + 3 + 2


class CompactVertex(NamedTuple):
    position: Vec3
    normal: Vec3
    texcoord: Vec2
    tangent: Vec3
    bitangent: Vec3


class Mesh:
    """Буферы вершин/индексов одного меша (столбцами, float32 / uint32)."""
    def __init__(self,
                 name: str,
                 positions: np.ndarray,
                 normals: np.ndarray,
                 texcoords: np.ndarray,
                 indices: np.ndarray,
                 tangents: np.ndarray = None,
                 bitangents: np.ndarray = None):
        self.name = name

        self.positions = np.asarray(positions, dtype=np.float32).reshape((-1, 3))
        self.normals = np.asarray(normals, dtype=np.float32).reshape((-1, 3))
        self.texcoords = np.asarray(texcoords, dtype=np.float32).reshape((-1, 2))
        self.indices = np.asarray(indices, dtype=np.uint32).ravel()

        count = len(self.positions)
        self.tangents = (np.asarray(tangents, dtype=np.float32).reshape((-1, 3))
                         if tangents is not None else np.zeros((count, 3), np.float32))
        self.bitangents = (np.asarray(bitangents, dtype=np.float32).reshape((-1, 3))
                           if bitangents is not None else np.zeros((count, 3), np.float32))

        self.vertex_count = count
        self.index_count = len(self.indices)

        # bounding sphere
        if count:
            self._bounding_center = self.positions.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(self.positions - self._bounding_center, axis=1).max())
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) в координатах модели."""
        return self._bounding_center.copy(), self._bounding_radius

    @property
    def index_size(self) -> int:
        """2, если все индексы помещаются в uint16, иначе 4."""
        return 2 if self.vertex_count <= 0x10000 else 4

    def compact_indices(self) -> np.ndarray:
        """Индексы в самом узком типе (uint16 / uint32)."""
        if self.index_size == 2:
            return self.indices.astype(np.uint16)
        return self.indices.copy()

    def interleaved(self) -> np.ndarray:
        """Вершины одним массивом (N, 14) float32 – готово к записи в GPU‑буфер."""
        return np.column_stack([
            self.positions, self.normals, self.tangents, self.bitangents, self.texcoords,
        ]).astype(np.float32).reshape((-1, VERTEX_STRIDE))

    def vertex(self, i: int) -> CompactVertex:
        return CompactVertex(
            position=Vec3.from_np(self.positions[i]),
            normal=Vec3.from_np(self.normals[i]),
            texcoord=Vec2.from_np(self.texcoords[i]),
            tangent=Vec3.from_np(self.tangents[i]),
            bitangent=Vec3.from_np(self.bitangents[i]),
        )

    def triangles(self) -> np.ndarray:
        """Индексы треугольников формы (M, 3)."""
        return self.indices.reshape((-1, 3))

    def __repr__(self):
        return (f"Mesh({self.name!r}, vertices={self.vertex_count}, "
                f"indices={self.index_count})")
