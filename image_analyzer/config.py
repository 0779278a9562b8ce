"""Настройки анализатора из переменных окружения.

Значения читаются один раз при импорте. Аргументы функций и конструкторов
имеют приоритет над этими значениями.

Переменные:
    IMAGE_ANALYZER_TARGET_SIDE: целевая длина короткой стороны рабочей копии, px.
    IMAGE_ANALYZER_FETCH_TIMEOUT: таймаут сетевого запроса, секунды.
    IMAGE_ANALYZER_LOG_LEVEL: уровень логирования для `configure_logging`.
    IMAGE_ANALYZER_USER_AGENT: заголовок User-Agent при загрузке по URL.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive, using default {default}")
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive, using default {default}")
        return default
    return value


def _valid_level(name: str, default: str = "INFO") -> str:
    level = name.upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    logger.warning(f"Unknown log level {name!r}, using default {default}")
    return default


TARGET_SIDE: int = _env_int("IMAGE_ANALYZER_TARGET_SIDE", 500)
FETCH_TIMEOUT: float = _env_float("IMAGE_ANALYZER_FETCH_TIMEOUT", 10.0)
LOG_LEVEL: str = _valid_level(os.environ.get("IMAGE_ANALYZER_LOG_LEVEL", "INFO"))
USER_AGENT: str = os.environ.get("IMAGE_ANALYZER_USER_AGENT", "image-analyzer/0.1")


def configure_logging(level: Optional[str] = None) -> None:
    """Настраивает корневой логгер для приложений, использующих пакет.

    Библиотека сама обработчики не устанавливает.
    """
    logging.basicConfig(
        level=_valid_level(level) if level else LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(module)s: %(message)s",
        datefmt="%H:%M:%S",
    )
