"""
Core infrastructure for colb.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for pluggable services
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container, reset_container
from .exceptions import (
    EXIT_SENTINEL,
    ColbConfigError,
    ColbContextError,
    ColbException,
    ColbExecutionError,
    ConfigFileError,
    ConfigInitConflictError,
    ConfigParseError,
    PackageNotFoundError,
    StageConsumedError,
    ToolNotFoundError,
)

__all__ = [
    "EXIT_SENTINEL",
    "ColbConfigError",
    "ColbContextError",
    "ColbException",
    "ColbExecutionError",
    "ConfigFileError",
    "ConfigInitConflictError",
    "ConfigParseError",
    "PackageNotFoundError",
    "ServiceContainer",
    "StageConsumedError",
    "ToolNotFoundError",
    "bootstrap",
    "get_container",
    "reset",
    "reset_container",
]
