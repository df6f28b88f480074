# -*- coding: utf-8 -*-
import pytest

from scenebake.assets.material import Material, DEFAULT_SPECULAR_POWER
from scenebake.assets.mtl_loader import load_mtl
from scenebake.errors import AssetIOError, FormatError
from scenebake.math.vec3 import Vec3


def test_materials_parsed(write, config):
    path = write("lib.mtl", """\
        newmtl Metal
        Ks 0.5 0.25 1.0
        Ns 32
        map_Kd metal_albedo.png
        map_bump first.png
        map_bump second.png
        illum 2

        newmtl Glass
        map_Kd a.png
        map_Kd b.png
    """)
    materials = []
    added = load_mtl(path, materials, config)

    assert added == materials
    metal, glass = materials
    assert metal.name == "Metal"
    assert metal.albedo_tex == "metal_albedo.png"
    assert metal.normal_tex == "first.png"
    assert metal.specular_color == Vec3(0.5, 0.25, 1.0)
    assert metal.specular_coefficient == 32.0
    assert metal.specular_power == DEFAULT_SPECULAR_POWER
    assert glass.albedo_tex == "b.png"
    assert glass.normal_tex == ""
    assert glass.specular_color == Vec3(0, 0, 0)


def test_existing_materials_untouched(write, config):
    path = write("lib.mtl", "newmtl New\n")
    old = Material("Old", albedo_tex="old.png")
    materials = [old]
    load_mtl(path, materials, config)
    assert [m.name for m in materials] == ["Old", "New"]
    assert materials[0] is old
    assert old.albedo_tex == "old.png"


def test_later_map_bump_not_parsed(write, config):
    path = write("lib.mtl", """\
        newmtl A
        map_bump first.png
        map_bump -bm 0.5 second.png
    """)
    (mat,) = load_mtl(path, [], config)
    assert mat.normal_tex == "first.png"


@pytest.mark.parametrize("text", [
    "newmtl\n",
    "newmtl A\nKs 1 1\n",
    "newmtl A\nNs\n",
    "newmtl A\nmap_Kd\n",
    "map_Kd orphan.png\n",
])
def test_malformed_library(write, config, text):
    path = write("bad.mtl", text)
    with pytest.raises(FormatError):
        load_mtl(path, [], config)


def test_missing_library(workdir, config):
    with pytest.raises(AssetIOError):
        load_mtl(workdir / "nope.mtl", [], config)


def test_long_material_name_truncated(write):
    from scenebake.utils.config import Config
    path = write("lib.mtl", "newmtl " + "m" * 20 + "\n")
    materials = []
    load_mtl(path, materials, Config(data={"max_name_length": 8}))
    assert materials[0].name == "mmmmmmmm"

    with pytest.raises(FormatError, match="exceeds 8"):
        load_mtl(path, [], Config(data={"max_name_length": 8, "name_overflow": "error"}))
