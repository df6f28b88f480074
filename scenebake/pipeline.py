# -*- coding: utf-8 -*-
"""
Конвейер: OBJ → группы → (dedup → tangents) → меши сцены.

Файлы обрабатываются строго по очереди. Результат файла попадает в
сцену только целиком, после успешной обработки всех его групп –
упавший файл в сцену ничего не добавляет.
"""

from __future__ import annotations

from typing import Iterable

from scenebake.mesh.dedup import deduplicate
from scenebake.mesh.tangents import compute_tangents
from scenebake.multithread.task_pool import TaskPool
from scenebake.scene.mesh import Mesh
from scenebake.scene.scene import Scene
from scenebake.utils.config import Config
from scenebake.utils.loader import Group, ObjData, load_obj
from scenebake.utils.logger import logger
from scenebake.utils.profiler import Profiler


def build_mesh(group: Group, obj: ObjData, config: Config) -> Mesh:
    """Dedup + tangents одной группы."""
    vb = deduplicate(group.triangles, obj.positions, obj.texcoords, obj.normals, obj.path)
    tangents, bitangents = compute_tangents(
        vb.positions, vb.texcoords, vb.indices,
        policy=config["degenerate_uv"], epsilon=float(config["uv_epsilon"]),
    )
    return Mesh(group.name, vb.positions, vb.normals, vb.texcoords, vb.indices,
                tangents=tangents, bitangents=bitangents)


def build_meshes(obj: ObjData, config: Config) -> list[Mesh]:
    """Меши всех групп файла – в порядке групп."""
    workers = int(config["workers"])
    if workers <= 1 or len(obj.groups) <= 1:
        return [build_mesh(g, obj, config) for g in obj.groups]
    with TaskPool(max_workers=workers) as pool:
        for g in obj.groups:
            pool.submit(build_mesh, g, obj, config)
        return pool.wait_all()


def process_file(path, scene: Scene, config: Config | None = None) -> ObjData:
    """Разобрать один OBJ и дописать его меши/материалы/модели в `scene`."""
    config = config if config is not None else Config()
    with Profiler(f"process {path}") as prof:
        obj = load_obj(path, mesh_offset=scene.num_meshes, config=config)
        meshes = build_meshes(obj, config)
    scene.commit(meshes=meshes, materials=obj.materials, models=obj.models)

    for model in obj.models:
        if scene.find_material(model.material_name) is None:
            logger.warning(f"[Pipeline] {path}: mesh '{model.mesh_name}' uses unknown "
                           f"material '{model.material_name}'")
    logger.info(f"[Pipeline] {path}: +{len(meshes)} mesh(es), "
                f"+{len(obj.materials)} material(s) in {prof.elapsed_ms:.1f} ms -> {scene!r}")
    return obj


def run(paths: Iterable, config: Config | None = None, scene: Scene | None = None) -> Scene:
    """Обработать файлы по порядку в одну общую сцену."""
    config = config if config is not None else Config()
    scene = scene if scene is not None else Scene()
    for path in paths:
        process_file(path, scene, config)
    return scene
