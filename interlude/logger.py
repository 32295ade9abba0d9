"""
Logger — Логгер проекта interlude

Импорт пакета не настраивает вывод: модульный логгер "interlude" получает
только NullHandler, а записи уходят в иерархию logging хост-приложения.

Для отдельных скриптов и отладки вывод включается явно:
    setup_logger(level="DEBUG")

Уровень по умолчанию берётся из переменной окружения LOG_LEVEL (default: INFO).
Библиотечные функции на горячем пути не логируют; логгер используют
trace-обёртки и слой контрактов.
"""

import logging
import os
import sys
from typing import Final

__all__ = ["DEFAULT_LOGGER_NAME", "logger", "setup_logger"]

DEFAULT_LOGGER_NAME: Final[str] = "interlude"


def _has_output_handler(log: logging.Logger) -> bool:
    return any(not isinstance(h, logging.NullHandler) for h in log.handlers)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Подключение stdout handler к логгеру (вызывается приложением, не пакетом).

    Повторный вызов для уже настроенного логгера не добавляет handler.
    Настроенный логгер не передаёт записи родителю, чтобы root handler
    хост-приложения не дублировал их.

    Args:
        name: Имя логгера (обычно имя проекта)
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Формат сообщений (optional)

    Returns:
        Настроенный logging.Logger
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    log = logging.getLogger(name)

    if not _has_output_handler(log):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        log.addHandler(handler)
        log.setLevel(getattr(logging, level.upper(), logging.INFO))
        log.propagate = False

    return log


logger = logging.getLogger(DEFAULT_LOGGER_NAME)
logger.addHandler(logging.NullHandler())
