# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ (подмножество) в три прохода по одному буферу:

1. подсчёт `v` / `vt` / `vn` / `usemtl`; каждая `mtllib` сразу
   загружается через `load_mtl`;
2. заполнение плоских массивов позиций, нормалей и texcoords
   (размеры известны после прохода 1);
3. разбиение граней `f` по группам `usemtl` + имена мешей.

Ограничение: флаг «текстурирован» общий на весь файл (есть ли хоть
одна `vt`). Файл, где часть граней `p/t/n`, а часть `p//n`, не
загружается – UnsupportedFaceError.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from scenebake.assets.material import Material
from scenebake.assets.mtl_loader import load_mtl
from scenebake.errors import FormatError, UnsupportedFaceError
from scenebake.math.vec2 import Vec2
from scenebake.mesh.dedup import AttributeIndex, Triangle, split_quad
from scenebake.scene.model import Model
from scenebake.utils.config import Config
from scenebake.utils.fileio import load_file_data
from scenebake.utils.logger import logger
from scenebake.utils.names import bound_name
from scenebake.utils.profiler import Profiler
from scenebake.utils.scanner import LineScanner, Record


class Group:
    """Грани между одной `usemtl` и следующей – будущий меш."""
    def __init__(self, name: str, material_name: str):
        self.name = name
        self.material_name = material_name
        self.triangles: list[Triangle] = []

    def __repr__(self):
        return (f"Group({self.name!r}, material={self.material_name!r}, "
                f"triangles={len(self.triangles)})")


class ObjData:
    """Результат разбора одного OBJ‑файла (ещё не в сцене)."""
    def __init__(self, path):
        self.path = path
        self.positions = np.zeros((0, 3), dtype=np.float32)
        self.normals = np.zeros((0, 3), dtype=np.float32)
        # texcoords[0] – значение по‑умолчанию для t == 0
        self.texcoords = np.zeros((1, 2), dtype=np.float32)
        self.textured = False
        self.groups: list[Group] = []
        self.models: list[Model] = []
        self.materials: list[Material] = []


def resolve_mtllib(name: str, obj_path) -> Path:
    """Сначала относительно рабочей папки, потом – рядом с OBJ‑файлом."""
    candidate = Path(name)
    if candidate.is_file() or candidate.is_absolute():
        return candidate
    beside = Path(obj_path).parent / name
    return beside if beside.is_file() else candidate


def load_obj(path, mesh_offset: int = 0, config: Config | None = None) -> ObjData:
    """
    Разобрать OBJ‑файл.

    `mesh_offset` – сколько мешей уже есть в сцене прогона; от него
    считаются синтезированные имена `mesh<N>`.
    """
    config = config if config is not None else Config()
    scanner = LineScanner(load_file_data(path), config["max_line_length"], path=str(path))
    obj = ObjData(path)

    with Profiler(f"{path}: count pass"):
        counts = _count_pass(scanner, obj, config)
    with Profiler(f"{path}: attribute pass"):
        _attribute_pass(scanner, obj, counts, config)
    with Profiler(f"{path}: face pass"):
        _face_pass(scanner, obj, mesh_offset, config)

    logger.info(
        f"[ObjLoader] {path}: {len(obj.positions)} positions, {len(obj.texcoords) - 1} "
        f"texcoords, {len(obj.normals)} normals, {len(obj.groups)} group(s)"
    )
    return obj


# ----------------------------------------------------------------------
# Проход 1
# ----------------------------------------------------------------------
def _count_pass(scanner: LineScanner, obj: ObjData, config: Config) -> dict:
    counts = {"v": 0, "vt": 0, "vn": 0, "usemtl": 0}
    for record in scanner.records():
        if record.header in counts:
            counts[record.header] += 1
        elif record.header == "mtllib":
            mtl_path = resolve_mtllib(record.value(), obj.path)
            load_mtl(mtl_path, obj.materials, config)
    return counts


# ----------------------------------------------------------------------
# Проход 2
# ----------------------------------------------------------------------
def _attribute_pass(scanner: LineScanner, obj: ObjData, counts: dict, config: Config):
    positions = np.empty((counts["v"], 3), dtype=np.float32)
    normals = np.empty((counts["vn"], 3), dtype=np.float32)
    texcoords = np.empty((counts["vt"] + 1, 2), dtype=np.float32)
    texcoords[0] = Vec2(*config["default_texcoord"]).as_np()

    iv = ivn = 0
    ivt = 1
    for record in scanner.records():
        if record.header == "v":
            positions[iv] = record.expect(3, float)
            iv += 1
        elif record.header == "vt":
            texcoords[ivt] = record.expect(2, float)
            ivt += 1
            obj.textured = True
        elif record.header == "vn":
            normals[ivn] = record.expect(3, float)
            ivn += 1

    obj.positions, obj.normals, obj.texcoords = positions, normals, texcoords


# ----------------------------------------------------------------------
# Проход 3
# ----------------------------------------------------------------------
def _face_pass(scanner: LineScanner, obj: ObjData, mesh_offset: int, config: Config):
    records = list(scanner.records())
    prev: Record | None = None     # предыдущая непустая строка (комментарий тоже)
    current: Group | None = None

    for i, record in enumerate(records):
        if record.header == "usemtl":
            material_name = _bounded(record.value(), record, config)
            nxt = records[i + 1] if i + 1 < len(records) else None
            name = _mesh_name(prev, nxt, mesh_offset + len(obj.groups), config)
            current = Group(name, material_name)
            obj.groups.append(current)
            obj.models.append(Model(name, material_name))
        elif record.header == "f":
            if current is None:
                raise FormatError("face before any 'usemtl'", record.path, record.line)
            current.triangles.extend(split_quad(_parse_face(record, obj.textured)))
        if not record.blank:
            prev = record


def _mesh_name(prev: Record | None, nxt: Record | None, ordinal: int, config: Config) -> str:
    """`g` на строке до `usemtl`, иначе `g` сразу после, иначе `mesh<N>`."""
    for candidate in (prev, nxt):
        if candidate is not None and candidate.header == "g":
            return _bounded(candidate.value(), candidate, config)
    return f"mesh{ordinal}"


def _bounded(name: str, record: Record, config: Config) -> str:
    return bound_name(name, config["max_name_length"], config["name_overflow"],
                      record.path, record.line)


def _parse_face(record: Record, textured: bool) -> list[AttributeIndex]:
    corners = record.args
    if len(corners) not in (3, 4):
        raise UnsupportedFaceError(
            f"Can't load this OBJ: face has {len(corners)} corners (3 or 4 supported)",
            record.path, record.line)
    return [_parse_corner(c, textured, record) for c in corners]


def _parse_corner(corner: str, textured: bool, record: Record) -> AttributeIndex:
    parts = corner.split("/")
    grammar = "p/t/n" if textured else "p//n"
    ok = len(parts) == 3 and parts[0] and parts[2] and (bool(parts[1]) == textured)
    if ok:
        try:
            p, n = int(parts[0]), int(parts[2])
            t = int(parts[1]) if textured else 0
        except ValueError:
            ok = False
    if not ok:
        raise UnsupportedFaceError(
            f"Can't load this OBJ: corner '{corner}' does not match {grammar}",
            record.path, record.line)
    if p < 1 or n < 1 or (textured and t < 1):
        raise UnsupportedFaceError(
            f"Can't load this OBJ: corner '{corner}' has a non-positive index",
            record.path, record.line)
    return AttributeIndex(p, t, n)
