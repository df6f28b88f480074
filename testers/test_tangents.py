# -*- coding: utf-8 -*-
import numpy as np
import pytest

from scenebake.errors import DegenerateUVError
from scenebake.mesh.tangents import compute_tangents

TRI_POS = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float32)


def test_identity_uv_mapping():
    uv = np.array([[0, 0], [1, 0], [0, 1]], dtype=np.float32)
    t, b = compute_tangents(TRI_POS, uv, np.array([0, 1, 2], dtype=np.uint32))
    assert np.allclose(t, [[1, 0, 0]] * 3)
    assert np.allclose(b, [[0, 1, 0]] * 3)


def test_scaled_uv_mapping():
    uv = np.array([[0, 0], [0.5, 0], [0, 2]], dtype=np.float32)
    t, b = compute_tangents(TRI_POS, uv, np.array([0, 1, 2]))
    assert np.allclose(t[0], [2, 0, 0])
    assert np.allclose(b[0], [0, 0.5, 0])


def test_last_triangle_overwrites_shared_vertex():
    pos = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=np.float32)
    uv = np.array([[0, 0], [1, 0], [0, 1], [0, 1]], dtype=np.float32)
    # второй треугольник (0, 1, 3) лежит в плоскости XZ
    t, b = compute_tangents(pos, uv, np.array([0, 1, 2, 0, 1, 3]))
    assert np.allclose(b[0], [0, 0, 1])
    assert np.allclose(b[1], [0, 0, 1])
    assert np.allclose(b[2], [0, 1, 0])     # только первый треугольник
    assert np.allclose(b[3], [0, 0, 1])
    assert np.allclose(t, [[1, 0, 0]] * 4)


def test_unreferenced_vertex_is_zero():
    pos = np.vstack([TRI_POS, [[5, 5, 5]]]).astype(np.float32)
    uv = np.array([[0, 0], [1, 0], [0, 1], [0.3, 0.3]], dtype=np.float32)
    t, b = compute_tangents(pos, uv, np.array([0, 1, 2]))
    assert np.all(t[3] == 0) and np.all(b[3] == 0)


def test_degenerate_uv_propagates():
    uv = np.full((3, 2), 0.5, dtype=np.float32)
    t, b = compute_tangents(TRI_POS, uv, np.array([0, 1, 2]))
    assert not np.isfinite(t).all()
    assert not np.isfinite(b).all()


def test_degenerate_uv_error_policy():
    uv = np.full((3, 2), 0.5, dtype=np.float32)
    with pytest.raises(DegenerateUVError) as info:
        compute_tangents(TRI_POS, uv, np.array([0, 1, 2]), policy="error")
    assert info.value.triangle == 0


def test_bad_arguments():
    uv = np.zeros((3, 2), dtype=np.float32)
    with pytest.raises(ValueError):
        compute_tangents(TRI_POS, uv, np.array([0, 1, 2]), policy="average")
    with pytest.raises(ValueError):
        compute_tangents(TRI_POS, uv, np.array([0, 1]))


def test_out_of_range_indices_rejected():
    uv = np.array([[0, 0], [1, 0], [0, 1]], dtype=np.float32)
    with pytest.raises(ValueError, match="out of range"):
        compute_tangents(TRI_POS, uv, np.array([0, 1, 1000000]))
    with pytest.raises(ValueError, match="out of range"):
        compute_tangents(TRI_POS, uv, np.array([0, -1, 2]))
    with pytest.raises(ValueError, match="texcoords"):
        compute_tangents(TRI_POS, uv[:2], np.array([0, 1, 2]))


def test_empty_buffers():
    t, b = compute_tangents(np.zeros((0, 3)), np.zeros((0, 2)), np.zeros(0, dtype=np.uint32))
    assert t.shape == b.shape == (0, 3)
