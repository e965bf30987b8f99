"""
Service lookup with a fallback for code running without bootstrap().
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .container import get_container

T = TypeVar("T")


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """Registered service for ``interface``, otherwise ``default_factory()``.

    Example:
        >>> from colb.core.interfaces.logger import ILogger
        >>> from colb.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    instance = get_container().try_resolve(interface)
    if instance is None:
        return default_factory()
    return instance
