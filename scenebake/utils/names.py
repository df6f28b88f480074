"""
Имена мешей/материалов/текстур – строки ограниченной длины.
"""

from scenebake.errors import FormatError
from scenebake.utils.logger import logger

DEFAULT_MAX_NAME_LENGTH = 127


def bound_name(name: str, max_length: int = DEFAULT_MAX_NAME_LENGTH,
               overflow: str = "truncate", path=None, line: int | None = None) -> str:
    """
    Вернуть имя не длиннее `max_length` символов.

    overflow="truncate" – обрезать и предупредить в лог,
    overflow="error"    – FormatError.
    """
    if len(name) <= max_length:
        return name
    if overflow == "error":
        raise FormatError(f"name '{name[:32]}...' exceeds {max_length} characters",
                          path, line)
    logger.warning(f"[Names] '{name[:32]}...' truncated to {max_length} characters")
    return name[:max_length]
