"""
Application bootstrap for colb.

Registers the runtime settings, presenter, logger and process runner with
the service container. Called once at CLI startup; later calls are no-ops
until reset().
"""

from .container import ServiceContainer, get_container, reset_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .settings import ColbSettings, load_settings

_initialized = False


def bootstrap(settings: ColbSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the colb application.

    Args:
        settings: Runtime settings (loaded from the environment if omitted)

    Returns:
        The populated container
    """
    global _initialized

    container = get_container()
    if not _initialized:
        _register_services(container, settings or load_settings())
        _initialized = True
    return container


def _register_services(container: ServiceContainer, settings: ColbSettings) -> None:
    from ..presenters.console import ConsolePresenter
    from ..services.execution.runner import ProcessRunner
    from ..services.logging import ColbLogger

    container.register_instance(ColbSettings, settings)
    container.register_instance(IPresenter, ConsolePresenter())  # type: ignore[type-abstract]
    container.register_singleton(ILogger, lambda: ColbLogger(settings.logging))  # type: ignore[type-abstract]
    container.register_singleton(
        ProcessRunner,
        lambda: ProcessRunner(
            presenter=container.resolve(IPresenter),  # type: ignore[type-abstract]
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
            tools=settings.tools,
        ),
    )


def reset() -> None:
    """Forget all registrations (for tests)."""
    global _initialized
    reset_container()
    _initialized = False
