"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл на диске при этом не создаётся, конвейер работает «офлайн»).
"""

import json
import os
from pathlib import Path
from scenebake.utils.logger import logger

CONFIG_ENV = "SCENEBAKE_CONFIG"
CONFIG_FILENAME = "scenebake.json"

DEFAULT_CONFIG = {
    "max_line_length": 1024,
    "max_name_length": 127,
    "name_overflow": "truncate",        # truncate | error
    "default_texcoord": [0.5, 0.5],
    "degenerate_uv": "propagate",       # propagate | error
    "uv_epsilon": 1e-12,
    "workers": 1,
    "log_level": "INFO",
}

_CHOICES = {
    "name_overflow": ("truncate", "error"),
    "degenerate_uv": ("propagate", "error"),
}


def default_config_path() -> Path:
    """`$SCENEBAKE_CONFIG`, иначе `scenebake.json` в рабочей папке."""
    return Path(os.environ.get(CONFIG_ENV, CONFIG_FILENAME))


class Config:
    """Настройки конвейера. Отсутствующие ключи берутся из DEFAULT_CONFIG."""

    def __init__(self, path: str | Path | None = None, data: dict | None = None):
        self.path = Path(path) if path is not None else default_config_path()
        if data is not None:
            self.data = dict(data)
        else:
            self._load()
        self.validate()

    def _load(self):
        if self.path.is_file():
            with self.path.open("r", encoding="utf-8") as f:
                self.data = json.load(f)
            logger.info(f"[Config] Loaded configuration from {self.path}.")
        else:
            logger.debug("[Config] No config file – using defaults.")
            self.data = {}

    def validate(self):
        for key, choices in _CHOICES.items():
            if self[key] not in choices:
                raise ValueError(
                    f"[Config] '{key}' must be one of {choices}, got {self[key]!r}"
                )
        if int(self["max_line_length"]) <= 0:
            raise ValueError("[Config] 'max_line_length' must be positive")
        if int(self["max_name_length"]) <= 0:
            raise ValueError("[Config] 'max_name_length' must be positive")

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.validate()

    def get(self, key, default=None):
        return self.data.get(key, DEFAULT_CONFIG.get(key, default))
