# -*- coding: utf-8 -*-
"""
Материал из MTL‑библиотеки.

Хранит только то, что понимает загрузчик: имя, пути к albedo‑ и
normal‑картам (строки, сами изображения не открываются),
specular‑цвет, specular‑power и specular‑coefficient.
"""

from __future__ import annotations

from scenebake.math.vec3 import Vec3

DEFAULT_SPECULAR_POWER = 16.0


class Material:
    """Запись таблицы материалов сцены."""

    def __init__(
        self,
        name: str,
        albedo_tex: str = "",
        normal_tex: str = "",
        specular_color: Vec3 | None = None,
        specular_power: float = DEFAULT_SPECULAR_POWER,
        specular_coefficient: float = 0.0,
    ) -> None:
        self.name = name
        self.albedo_tex = albedo_tex
        self.normal_tex = normal_tex
        self.specular_color = specular_color if specular_color is not None else Vec3()
        self.specular_power = float(specular_power)
        self.specular_coefficient = float(specular_coefficient)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "albedo_tex": self.albedo_tex,
            "normal_tex": self.normal_tex,
            "specular_color": list(self.specular_color.to_tuple()),
            "specular_power": self.specular_power,
            "specular_coefficient": self.specular_coefficient,
        }

    def __repr__(self) -> str:
        return (f"Material({self.name!r}, albedo={self.albedo_tex!r}, "
                f"normal={self.normal_tex!r})")
