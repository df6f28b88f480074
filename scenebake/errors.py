# -*- coding: utf-8 -*-
"""
Исключения конвейера. Все они фатальны: файл (и весь прогон)
считается испорченным, частичный результат не сохраняется.
"""


class SceneBakeError(Exception):
    """Базовый класс всех ошибок scenebake."""


class AssetIOError(SceneBakeError, OSError):
    """Исходный файл не найден или не читается."""


class FormatError(SceneBakeError, ValueError):
    """Директива не разбирается: неверное число или тип аргументов."""

    def __init__(self, message: str, path=None, line: int | None = None):
        self.path = str(path) if path is not None else None
        self.line = line
        if self.path is not None and line is not None:
            message = f"{self.path}:{line}: {message}"
        elif self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class UnsupportedFaceError(FormatError):
    """Грань не из 3/4 углов или не в грамматике файла (p/t/n vs p//n)."""


class DegenerateUVError(SceneBakeError, ArithmeticError):
    """Определитель UV‑дельт треугольника ≈ 0 (только при политике 'error')."""

    def __init__(self, message: str, triangle: int | None = None):
        self.triangle = triangle
        super().__init__(message)
