"""
Пакет assets – материалы и загрузчик MTL‑библиотек.
"""

from scenebake.assets.material import Material
from scenebake.assets.mtl_loader import load_mtl

__all__ = ["Material", "load_mtl"]
