# -*- coding: utf-8 -*-
"""
Двумерный вектор float32 (texcoord).
"""
import numpy as np


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @classmethod
    def from_np(cls, array) -> "Vec2":
        a = np.asarray(array, dtype=np.float32).reshape(2)
        return cls(*a)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __iter__(self):
        return iter(self.to_tuple())

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
