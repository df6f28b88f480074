# -*- coding: utf-8 -*-
"""
Дедупликация вершин одной группы.

Каждый угол грани – тройка индексов (p, t, n). Одинаковые тройки в
пределах группы превращаются в одну вершину выходного буфера; индексы
треугольников ссылаются на неё.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence, Tuple

import numpy as np

from scenebake.errors import FormatError


class AttributeIndex(NamedTuple):
    """1‑based индексы позиции, texcoord (0 = «нет») и нормали.

    Порядок – лексикографический (p, потом t, потом n), как у кортежа.
    """
    p: int
    t: int
    n: int


Triangle = Tuple[AttributeIndex, AttributeIndex, AttributeIndex]


class VertexBuffer(NamedTuple):
    positions: np.ndarray    # (N, 3) float32
    normals: np.ndarray      # (N, 3) float32
    texcoords: np.ndarray    # (N, 2) float32, V уже перевёрнут
    indices: np.ndarray      # (3 * M,) uint32
    keys: np.ndarray         # (N, 3) int64 – исходная тройка каждой вершины

    @property
    def vertex_count(self) -> int:
        return len(self.positions)


def split_quad(corners: Sequence[AttributeIndex]) -> list[Triangle]:
    """3 угла → один треугольник, 4 угла → (0,1,2) и (0,2,3)."""
    if len(corners) == 3:
        return [(corners[0], corners[1], corners[2])]
    if len(corners) == 4:
        return [(corners[0], corners[1], corners[2]),
                (corners[0], corners[2], corners[3])]
    raise ValueError(f"face must have 3 or 4 corners, got {len(corners)}")


def deduplicate(triangles: Sequence[Triangle],
                positions: np.ndarray,
                texcoords: np.ndarray,
                normals: np.ndarray,
                path=None) -> VertexBuffer:
    """
    Построить компактный буфер вершин и индексов.

    `texcoords[0]` – texcoord по‑умолчанию (для t == 0); остальные
    массивы индексируются как `p - 1` / `n - 1`. Вершины идут в порядке
    первого появления, V‑компонента переворачивается ровно один раз.
    """
    slots: dict[AttributeIndex, int] = {}
    indices = np.empty(len(triangles) * 3, dtype=np.uint32)
    k = 0
    for tri in triangles:
        for corner in tri:
            slot = slots.get(corner)
            if slot is None:
                slot = len(slots)
                slots[corner] = slot
            indices[k] = slot
            k += 1

    keys = np.array(list(slots), dtype=np.int64).reshape((-1, 3))
    _check_range(keys[:, 0], len(positions), "position", path)
    _check_range(keys[:, 1], len(texcoords) - 1, "texcoord", path, allow_zero=True)
    _check_range(keys[:, 2], len(normals), "normal", path)

    out_texcoords = np.asarray(texcoords, dtype=np.float32)[keys[:, 1]].copy()
    out_texcoords[:, 1] = 1.0 - out_texcoords[:, 1]

    return VertexBuffer(
        positions=np.asarray(positions, dtype=np.float32)[keys[:, 0] - 1],
        normals=np.asarray(normals, dtype=np.float32)[keys[:, 2] - 1],
        texcoords=out_texcoords,
        indices=indices,
        keys=keys,
    )


def _check_range(column: np.ndarray, size: int, what: str, path, allow_zero=False):
    if not len(column):
        return
    low = 0 if allow_zero else 1
    bad = column[(column < low) | (column > size)]
    if len(bad):
        raise FormatError(
            f"face references {what} {int(bad[0])}, but only {size} declared", path)
