# -*- coding: utf-8 -*-
"""
Командная строка:

    python -m scenebake scene_a.obj scene_b.obj ...

Файлы обрабатываются по порядку в одну сцену. Код выхода 0 – успех,
1 – любая ошибка конвейера (сообщение в stderr).
"""

from __future__ import annotations

import argparse
import sys

from scenebake.errors import SceneBakeError, UnsupportedFaceError
from scenebake.pipeline import run
from scenebake.utils.config import Config
from scenebake.utils.logger import logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenebake",
        description="Convert OBJ/MTL scene descriptions into one normalized scene.",
    )
    parser.add_argument("files", nargs="+", help="input .obj files, processed in order")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = Config()
        set_level(config["log_level"])
        scene = run(args.files, config)
    except UnsupportedFaceError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (SceneBakeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info(f"[Main] Done: {scene.num_meshes} mesh(es), {scene.num_materials} "
                f"material(s), {scene.num_models} model(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
