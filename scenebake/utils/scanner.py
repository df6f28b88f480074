# -*- coding: utf-8 -*-
"""
Построчный сканер буфера + маленький токенизатор.

Буфер (bytes) никогда не изменяется – каждый проход начинается
заново с его начала, поэтому загрузчики OBJ/MTL делают по нескольку
независимых проходов по одним и тем же данным.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from scenebake.errors import FormatError
from scenebake.utils.logger import logger

DEFAULT_MAX_LINE_LENGTH = 1024


class LineScanner:
    """Перезапускаемый источник строк поверх неизменяемого буфера."""

    def __init__(self, data: bytes, max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
                 path=None):
        self.data = bytes(data)
        self.max_line_length = int(max_line_length)
        self.path = path

    def next_line(self, cursor: int | None) -> tuple[str, int | None]:
        """
        Вернуть (строка, новый курсор). Курсор `None` – конец буфера.
        Строка длиннее лимита обрезается до `max_line_length` байт.
        """
        if cursor is None or cursor >= len(self.data):
            return "", None
        end = self.data.find(b"\n", cursor)
        if end < 0:
            raw = self.data[cursor:]
            new_cursor = None
        else:
            raw = self.data[cursor:end]
            new_cursor = end + 1 if end + 1 < len(self.data) else None
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        if len(raw) > self.max_line_length:
            logger.debug(f"[Scanner] {self.path or '<buffer>'}: line truncated "
                         f"to {self.max_line_length} bytes")
            raw = raw[:self.max_line_length]
        return raw.decode("utf-8", errors="replace"), new_cursor

    def lines(self) -> Iterator[str]:
        """Новый проход по буферу с самого начала."""
        cursor: int | None = 0
        while cursor is not None:
            line, cursor = self.next_line(cursor)
            yield line

    def records(self) -> Iterator[Record]:
        """То же, что `lines()`, но уже разобранные на токены (с номером строки)."""
        for number, line in enumerate(self.lines(), start=1):
            yield tokenize(line, number, self.path)


class Record(NamedTuple):
    """Одна строка: заголовок‑директива и её аргументы."""
    header: str
    args: tuple[str, ...]
    line: int = 0
    path: str | None = None
    comment: bool = False

    @property
    def empty(self) -> bool:
        """Нет директивы: пустая строка или комментарий."""
        return not self.header

    @property
    def blank(self) -> bool:
        """Строка без единого токена (комментарий пустой строкой не считается)."""
        return self.empty and not self.comment

    def expect(self, count: int, kind=str) -> list:
        """
        Проверить арность и привести аргументы к `kind`.
        Неверное число или тип → FormatError.
        """
        if len(self.args) != count:
            raise FormatError(
                f"'{self.header}' expects {count} argument(s), got {len(self.args)}",
                self.path, self.line,
            )
        try:
            return [kind(a) for a in self.args]
        except ValueError:
            raise FormatError(
                f"'{self.header}' has a malformed argument: {' '.join(self.args)}",
                self.path, self.line,
            ) from None

    def value(self) -> str:
        """Единственный строковый аргумент (имя, путь)."""
        return self.expect(1)[0]


def tokenize(line: str, number: int = 0, path=None) -> Record:
    """Разбить строку на заголовок и аргументы. Комментарии дают пустой Record."""
    parts = line.split()
    if not parts:
        return Record("", (), number, path)
    if parts[0].startswith("#"):
        return Record("", (), number, path, comment=True)
    return Record(parts[0], tuple(parts[1:]), number, path)
