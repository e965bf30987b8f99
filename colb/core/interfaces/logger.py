"""
Diagnostic logging interface.

Everything the user is meant to read goes through IPresenter. ILogger
carries the debug trail (resolved paths, argv, exit codes) and is silent
unless enabled through COLB_LOGGING__* settings.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """printf-style logger; ``args`` are interpolated only if the record is emitted."""

    @abstractmethod
    def log(self, level: int, message: str, *args: Any) -> None:
        """Emit ``message % args`` at a stdlib logging level."""

    def debug(self, message: str, *args: Any) -> None:
        self.log(logging.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log(logging.INFO, message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self.log(logging.WARNING, message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log(logging.ERROR, message, *args)
