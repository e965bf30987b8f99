"""
Click decorators for colb CLI commands.

- handle_errors: Turns ColbException into an error message and exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.di import resolve_or_default
from ..core.exceptions import ColbException
from ..core.interfaces.presenter import IPresenter
from ..presenters.console import ConsolePresenter
from ..services.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator reporting colb errors to the user.

    Any ColbException raised by the command is printed as
    ``Error: <message>`` on stderr and ends the process with the
    exception's exit code.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def build(ctx: ColbContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except ColbException as e:
            get_logger().debug("Command failed: %s", e)
            presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
            presenter.print_error(e.message)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
