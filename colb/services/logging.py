"""
Diagnostic logging for colb.

ColbLogger routes records to stderr and/or a rotating file under ~/.colb/
according to LoggingConfig. Both are off by default, so a plain ``colb
build`` prints nothing but the tool output and colb's step headers.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_FILE = Path.home() / ".colb" / "colb.log"


class ColbLogger(ILogger):
    """
    ILogger backed by a stdlib ``logging.Logger``.

    Args:
        config: Level and enabled outputs (defaults: warning, none)
        name: Name of the underlying stdlib logger
        log_file: File written when ``config.file`` is set
    """

    MAX_FILE_SIZE = 5 * 1024 * 1024
    BACKUP_COUNT = 2

    def __init__(
        self,
        config: LoggingConfig | None = None,
        name: str = "colb",
        log_file: Path = DEFAULT_LOG_FILE,
    ) -> None:
        config = config or LoggingConfig()
        self.log_file = log_file
        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, config.level.upper()))
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in self._handlers(config):
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    def _handlers(self, config: LoggingConfig) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if config.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                )
            )
        return handlers

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def log(self, level: int, message: str, *args: Any) -> None:
        self._logger.log(level, message, *args)


class NullLogger(ILogger):
    """Discards everything; used before bootstrap and in tests."""

    def log(self, level: int, message: str, *args: Any) -> None:
        pass


def get_logger() -> ILogger:
    """Logger from the container, or a NullLogger before bootstrap."""
    from ..core.di import resolve_or_default

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
