"""Logger configuration для fluent."""

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["LoggingConfig", "logger", "setup_logger"]


@dataclass(frozen=True)
class LoggingConfig:
    """
    Конфигурация логирования.

    level по умолчанию берётся из переменной окружения LOG_LEVEL (INFO).
    """
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "fluent",
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Настройка и возврат logger.

    Повторный вызов для уже настроенного logger ничего не меняет.

    Args:
        name: Имя logger (дочерние модули используют "fluent.<module>")
        config: Конфигурация (default: LoggingConfig())

    Returns:
        Настроенный logging.Logger
    """
    config = config or LoggingConfig()
    log = logging.getLogger(name)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=config.format_string, datefmt=config.datefmt))
        log.addHandler(handler)
        log.setLevel(getattr(logging, config.level.upper(), logging.INFO))
        log.propagate = False

    return log


logger = setup_logger()
