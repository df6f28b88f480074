"""
Сцена прогона – общие для всех входных файлов таблицы мешей,
материалов и моделей. Записи только добавляются: ничего не удаляется
и не сливается (даже материалы с одинаковыми именами).
"""

from __future__ import annotations

from typing import Iterable

from scenebake.assets.material import Material
from scenebake.scene.mesh import Mesh
from scenebake.scene.model import Model


class Scene:
    """Агрегатор результатов всех файлов одного прогона."""
    def __init__(self):
        self._meshes: list[Mesh] = []
        self._materials: list[Material] = []
        self._models: list[Model] = []

    # Снаружи – только чтение; добавление идёт через commit().
    @property
    def meshes(self) -> tuple[Mesh, ...]:
        return tuple(self._meshes)

    @property
    def materials(self) -> tuple[Material, ...]:
        return tuple(self._materials)

    @property
    def models(self) -> tuple[Model, ...]:
        return tuple(self._models)

    @property
    def num_meshes(self) -> int:
        return len(self._meshes)

    @property
    def num_materials(self) -> int:
        return len(self._materials)

    @property
    def num_models(self) -> int:
        return len(self._models)

    def commit(self, meshes: Iterable[Mesh] = (), materials: Iterable[Material] = (),
               models: Iterable[Model] = ()) -> None:
        """Дописать результаты одного файла в конец таблиц."""
        meshes, materials, models = list(meshes), list(materials), list(models)
        if len(meshes) != len(models):
            raise ValueError(
                f"every mesh needs a model: {len(meshes)} meshes, {len(models)} models")
        self._meshes.extend(meshes)
        self._materials.extend(materials)
        self._models.extend(models)

    def find_material(self, name: str) -> Material | None:
        """Первый материал с таким именем (или None)."""
        for m in self._materials:
            if m.name == name:
                return m
        return None

    def to_dict(self) -> dict:
        """Краткое описание сцены (без вершинных данных)."""
        meshes = []
        for m in self._meshes:
            center, radius = m.bounding_sphere
            meshes.append({
                "name": m.name,
                "vertex_count": m.vertex_count,
                "index_count": m.index_count,
                "bounding_sphere": {"center": [float(c) for c in center],
                                    "radius": float(radius)},
            })
        return {
            "meshes": meshes,
            "materials": [m.to_dict() for m in self._materials],
            "models": [m.to_dict() for m in self._models],
        }

    def __repr__(self):
        return (f"Scene(meshes={self.num_meshes}, materials={self.num_materials}, "
                f"models={self.num_models})")
