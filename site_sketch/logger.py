# === FILE: site_sketch/logger.py ===
"""Логгер SiteSketch.

Журнал пишется в stderr: stdout занят итоговым документом, если файл вывода
не задан. Тихий режим (``--silent``) поднимает уровень до ERROR, так что
строки прогресса и ошибки отдельных URL пропадают.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteSketch"
SILENT_LEVEL: Final[str] = "ERROR"


def configure(
    *,
    level: Union[int, str] = "INFO",
    silent: bool = False,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Перенастраивает логгер проекта, заменяя ранее установленные обработчики."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(SILENT_LEVEL if silent else level)

    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    lg.addHandler(console)

    if log_file is not None:
        # 5 MB x 3
        rotating = RotatingFileHandler(
            str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        rotating.setFormatter(formatter)
        lg.addHandler(rotating)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "DEFAULT_FORMAT", "LOGGER_NAME"]
