# -*- coding: utf-8 -*-
"""
Базис касательного пространства (tangent / bitangent) по треугольникам.

Для треугольника (v0, v1, v2):

    e1 = p1 - p0,  e2 = p2 - p0
    d1 = uv1 - uv0, d2 = uv2 - uv0
    r  = 1 / (d1.x * d2.y - d1.y * d2.x)
    T  = r * (e1 * d2.y - e2 * d1.y)
    B  = r * (e2 * d1.x - e1 * d2.x)

Все три вершины получают T/B *этого* треугольника – значение от ранее
обработанного треугольника с общей вершиной перезаписывается
(без усреднения). Вершины, не входящие ни в один треугольник,
остаются с нулевыми векторами.
"""

from __future__ import annotations

import numba as nb
import numpy as np

from scenebake.errors import DegenerateUVError

POLICIES = ("propagate", "error")


# error_model="numpy": деление на 0 даёт ±inf/NaN, а не ZeroDivisionError
@nb.njit(cache=True, nogil=True, error_model="numpy")
def _tangent_kernel(positions, texcoords, indices, tangents, bitangents, dets):
    for k in range(indices.shape[0] // 3):
        i0 = indices[3 * k]
        i1 = indices[3 * k + 1]
        i2 = indices[3 * k + 2]

        d1u = texcoords[i1, 0] - texcoords[i0, 0]
        d1v = texcoords[i1, 1] - texcoords[i0, 1]
        d2u = texcoords[i2, 0] - texcoords[i0, 0]
        d2v = texcoords[i2, 1] - texcoords[i0, 1]

        det = d1u * d2v - d1v * d2u
        dets[k] = det
        r = np.float32(1.0) / det

        for c in range(3):
            e1 = positions[i1, c] - positions[i0, c]
            e2 = positions[i2, c] - positions[i0, c]
            t = (e1 * d2v - e2 * d1v) * r
            b = (e2 * d1u - e1 * d2u) * r
            tangents[i0, c] = t
            tangents[i1, c] = t
            tangents[i2, c] = t
            bitangents[i0, c] = b
            bitangents[i1, c] = b
            bitangents[i2, c] = b


def compute_tangents(positions: np.ndarray,
                     texcoords: np.ndarray,
                     indices: np.ndarray,
                     policy: str = "propagate",
                     epsilon: float = 1e-12) -> tuple[np.ndarray, np.ndarray]:
    """
    Вернуть (tangents, bitangents) формы (N, 3) float32.

    policy="propagate" – вырожденная UV‑развёртка даёт inf/NaN в выходе;
    policy="error"     – DegenerateUVError, если |det| < epsilon.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown degenerate UV policy: {policy!r}")

    positions = np.ascontiguousarray(positions, dtype=np.float32).reshape((-1, 3))
    texcoords = np.ascontiguousarray(texcoords, dtype=np.float32).reshape((-1, 2))
    indices = np.ascontiguousarray(indices, dtype=np.int64).ravel()
    if len(indices) % 3:
        raise ValueError(f"index count {len(indices)} is not a multiple of 3")
    if len(texcoords) != len(positions):
        raise ValueError(f"{len(texcoords)} texcoords for {len(positions)} positions")
    # ядро не проверяет границы
    if len(indices) and (indices.min() < 0 or indices.max() >= len(positions)):
        bad = int(indices.min()) if indices.min() < 0 else int(indices.max())
        raise ValueError(f"index {bad} out of range for {len(positions)} vertices")

    tangents = np.zeros_like(positions)
    bitangents = np.zeros_like(positions)
    dets = np.empty(len(indices) // 3, dtype=np.float32)
    if len(indices):
        _tangent_kernel(positions, texcoords, indices, tangents, bitangents, dets)

    if policy == "error":
        bad = np.flatnonzero(np.abs(dets) < epsilon)
        if len(bad):
            raise DegenerateUVError(
                f"triangle {int(bad[0])} has a degenerate UV mapping "
                f"(det={float(dets[bad[0]])!r})", triangle=int(bad[0]))
    return tangents, bitangents
