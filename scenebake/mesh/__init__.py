"""
Пакет mesh – дедупликация вершин и касательное пространство.
"""

from scenebake.mesh.dedup import AttributeIndex, VertexBuffer, deduplicate, split_quad
from scenebake.mesh.tangents import compute_tangents

__all__ = ["AttributeIndex", "VertexBuffer", "deduplicate", "split_quad", "compute_tangents"]
