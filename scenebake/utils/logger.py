# scenebake/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для всего конвейера.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("SceneBake")

logger = init_logger()

def set_level(level: str = "INFO"):
    """Установить уровень логгера по имени ('DEBUG', 'INFO', ...)."""
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(value)
