"""
Чтение исходного файла целиком в память (до начала разбора).
"""

from pathlib import Path

from scenebake.errors import AssetIOError
from scenebake.utils.logger import logger


def load_file_data(path) -> bytes:
    """Прочитать файл целиком. Нет файла / нет доступа → AssetIOError."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise AssetIOError(f"Cannot read {p}: {exc.strerror or exc}") from exc
    logger.debug(f"[FileIO] Read {len(data)} bytes from {p}")
    return data
