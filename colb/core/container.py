"""
Service registry for colb.

A thin layer over dependency-injector: each service type maps to one
provider. ``bootstrap()`` fills the registry once per process; tests swap
individual providers with ``override``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps service types (ILogger, IPresenter, ProcessRunner, ...) to providers."""

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    def __contains__(self, interface: type) -> bool:
        return interface in self._providers

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Always hand out ``instance``."""
        self._providers[interface] = providers.Object(instance)

    def register_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Create the service on first resolve and reuse it afterwards."""
        self._providers[interface] = providers.Singleton(factory)

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Replace whatever is registered for ``interface``."""
        self._providers[interface] = provider

    def resolve(self, interface: type[T]) -> T:
        """
        Raises:
            KeyError: Nothing is registered for ``interface``
        """
        try:
            provider = self._providers[interface]
        except KeyError:
            raise KeyError(f"No provider registered for: {interface.__name__}") from None
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        if interface not in self:
            return None
        return self.resolve(interface)


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """The process-wide container, created on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Drop the process-wide container and everything registered in it."""
    global _container
    _container = None
