# -*- coding: utf-8 -*-
"""
Загрузчик MTL‑библиотек (только подмножество директив):

    newmtl <name>       – новый материал
    map_Kd <path>       – albedo‑карта (последняя побеждает)
    map_bump <path>     – normal/bump‑карта (побеждает первая)
    Ks <r> <g> <b>      – specular‑цвет
    Ns <x>              – specular‑coefficient

Остальные директивы игнорируются.
"""

from __future__ import annotations

from scenebake.assets.material import Material
from scenebake.errors import FormatError
from scenebake.math.vec3 import Vec3
from scenebake.utils.config import Config
from scenebake.utils.fileio import load_file_data
from scenebake.utils.logger import logger
from scenebake.utils.names import bound_name
from scenebake.utils.scanner import LineScanner


def load_mtl(path, materials: list[Material], config: Config | None = None) -> list[Material]:
    """
    Разобрать MTL‑файл и дописать его материалы в конец `materials`.
    Уже лежащие там записи (из предыдущих файлов) не трогаются.
    Возвращает список только что добавленных материалов.
    """
    config = config if config is not None else Config()
    scanner = LineScanner(load_file_data(path), config["max_line_length"], path=str(path))

    def name_of(record):
        return bound_name(record.value(), config["max_name_length"],
                          config["name_overflow"], record.path, record.line)

    # Проход 1 – считаем материалы
    expected = sum(1 for r in scanner.records() if r.header == "newmtl")
    logger.debug(f"[MtlLoader] {path}: {expected} material(s)")

    # Проход 2 – заполняем
    added: list[Material] = []
    current: Material | None = None
    for record in scanner.records():
        if record.empty:
            continue
        if record.header == "newmtl":
            current = Material(name_of(record))
            added.append(current)
            continue
        if record.header not in ("map_Kd", "map_bump", "Ks", "Ns"):
            continue
        if current is None:
            raise FormatError(f"'{record.header}' before any 'newmtl'",
                              record.path, record.line)

        if record.header == "map_Kd":
            current.albedo_tex = name_of(record)
        elif record.header == "map_bump":
            # первая карта нормалей побеждает, последующие строки не разбираются
            if current.normal_tex:
                continue
            current.normal_tex = name_of(record)
        elif record.header == "Ks":
            current.specular_color = Vec3(*record.expect(3, float))
        elif record.header == "Ns":
            current.specular_coefficient = record.expect(1, float)[0]

    materials.extend(added)
    logger.info(f"[MtlLoader] Loaded {len(added)} material(s) from {path}")
    return added
