# -*- coding: utf-8 -*-
"""
Трёхмерный вектор float32 – цвета материалов, позиции и базис
касательного пространства при выдаче отдельной вершины.
"""
import numpy as np


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @classmethod
    def from_np(cls, array) -> "Vec3":
        a = np.asarray(array, dtype=np.float32).reshape(3)
        return cls(*a)

    # -------------------------------------------------
    # компоненты
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __iter__(self):
        return iter(self.to_tuple())

    def dot(self, other) -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other):
        return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
