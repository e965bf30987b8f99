"""
Invocation models.

Intent selects which packages a configured build acts on; RunResult is the
outcome of handing a token sequence to an external process.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import EXIT_SENTINEL
from .base import ImmutableModel


class DependenciesOf(ImmutableModel):
    """Everything the package transitively needs, excluding the package itself."""

    package: str

    def selection(self) -> list[str]:
        return ["--packages-up-to", self.package, "--packages-skip", self.package]


class ExactPackage(ImmutableModel):
    """Only the package itself."""

    package: str

    def selection(self) -> list[str]:
        return ["--packages-select", self.package]


Intent = Union[DependenciesOf, ExactPackage]


class Exited(ImmutableModel):
    """The process was launched and terminated.

    ``code`` is the raw exit code, or EXIT_SENTINEL when the process was
    terminated without one.
    """

    code: int

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def exit_code(self) -> int:
        return self.code


class LaunchFailed(ImmutableModel):
    """The executable could not be located or started."""

    executable: str
    reason: str

    @property
    def success(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        return EXIT_SENTINEL


RunResult = Union[Exited, LaunchFailed]
