# -*- coding: utf-8 -*-
"""
conftest.py – фикстуры для тестов конвейера.
Все файлы пишутся во временную папку, она же становится рабочей
(от неё резолвятся `mtllib` и ищется scenebake.json).
"""

import textwrap
from pathlib import Path

import pytest

from scenebake.utils.config import Config


# ----------------------------------------------------------------------
# Образцы входных данных
# ----------------------------------------------------------------------
CUBE_MTL = """\
# two materials
newmtl Metal
Ks 0.5 0.25 1.0
Ns 32
map_Kd metal_albedo.png
map_bump metal_normal.png
map_bump metal_normal_2.png

newmtl Glass
map_Kd glass.png
"""

TEXTURED_OBJ = """\
mtllib cube.mtl
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
g Turret
usemtl Metal
f 1/1/1 2/2/1 3/3/1 4/4/1
usemtl Glass
f 1/1/1 2/2/1 3/3/1
f 1/1/1 3/3/1 4/4/1
"""

UNTEXTURED_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
usemtl Plain
f 1//1 2//1 3//1
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Пустая рабочая папка."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SCENEBAKE_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def write(workdir):
    """write(name, text) → путь к созданному файлу."""
    def _write(name: str, text: str) -> Path:
        path = workdir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config(workdir) -> Config:
    """Настройки по‑умолчанию (без файла на диске)."""
    return Config(data={})


@pytest.fixture
def cube(write) -> Path:
    """Текстурированный OBJ + его MTL."""
    write("cube.mtl", CUBE_MTL)
    return write("cube.obj", TEXTURED_OBJ)


@pytest.fixture
def plain(write) -> Path:
    """OBJ без texcoords и без mtllib."""
    return write("plain.obj", UNTEXTURED_OBJ)
