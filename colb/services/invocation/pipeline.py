"""
Staged construction of colcon command lines.

colcon's argument grammar is order sensitive: everything after
``--cmake-args`` is handed to CMake until the next colcon option, later
``-D`` definitions override earlier ones, and package selection has to
come after all build configuration. Each stage below is its own class and
only offers the operations that are legal at that point:

    ColconInvocation --build()--> BuildVerb --configure()--> ConfiguredBuild --run(intent)
    ColconInvocation --test()/test_result()--> BasicVerb --run()

Advancing a stage consumes it; using a consumed stage raises
StageConsumedError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.exceptions import StageConsumedError
from ...core.models.config import BuildConfiguration, EventHandlers, InstallLayout
from .args import ArgStack

if TYPE_CHECKING:
    from ...core.models.invocation import Intent, RunResult
    from ..execution.runner import ProcessRunner

COLCON = "colcon"
NINJA = "ninja"
CTEST = "ctest"

LOG_DIR = "log"
NULL_LOG = "/dev/null"
BUILD_BASE = "build"
INSTALL_BASE = "install"


def handler_arg(name: str, enabled: bool) -> str:
    return f"{name}{'+' if enabled else '-'}"


def cmake_arg(name: str, value: str) -> str:
    return f"-D{name}={value}"


def event_handler_args(handlers: EventHandlers) -> list[str]:
    """``--event-handlers`` followed by all four handler toggles."""
    return [
        "--event-handlers",
        handler_arg("summary", handlers.summary),
        handler_arg("console_start_end", handlers.console_start_end),
        handler_arg("console_cohesion", handlers.console_cohesion),
        handler_arg("desktop_notification", handlers.desktop_notification),
    ]


@dataclass(frozen=True)
class TestConfiguration:
    """Options for ``colcon test`` on one package."""

    __test__ = False

    package: str
    event_handlers: EventHandlers


@dataclass(frozen=True)
class TestResultConfiguration:
    """Options for ``colcon test-result`` on one package."""

    __test__ = False

    package: str
    verbose: bool = True
    all: bool = True


class _Stage:
    """Accumulated tokens plus workspace, owned by exactly one live stage."""

    def __init__(self, args: ArgStack, workspace: Path) -> None:
        self._args = args
        self._workspace = workspace
        self._consumed = False

    @property
    def workspace(self) -> Path:
        return self._workspace

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def tokens(self) -> list[str]:
        """Tokens accumulated so far."""
        self._check()
        return self._args.to_list()

    def _check(self) -> None:
        if self._consumed:
            raise StageConsumedError(f"{type(self).__name__} has already been advanced")

    def _take(self) -> tuple[ArgStack, Path]:
        """Hand the accumulated state to the next stage."""
        self._check()
        self._consumed = True
        return self._args, self._workspace


class ColconInvocation(_Stage):
    """
    First stage: log destination and workspace.

    Args:
        workspace: Workspace root, used as working directory
        log: Write colcon logs to <workspace>/log instead of discarding them
    """

    def __init__(self, workspace: Path | str, log: bool = False) -> None:
        args = ArgStack().arg("--log-base").arg(LOG_DIR if log else NULL_LOG)
        super().__init__(args, Path(workspace))

    def build(self, layout: InstallLayout | None = None) -> BuildVerb:
        """Select the ``build`` verb with workspace-relative output locations."""
        args, workspace = self._take()
        layout = layout or InstallLayout()
        args.arg("build")
        args.args(["--build-base", BUILD_BASE, "--install-base", INSTALL_BASE])
        if layout.symlink:
            args.arg("--symlink-install")
        if layout.merge:
            args.arg("--merge-install")
        return BuildVerb(args, workspace)

    def test(self, config: TestConfiguration) -> BasicVerb:
        """Select the ``test`` verb for a single package."""
        args, workspace = self._take()
        args.arg("test")
        args.args(event_handler_args(config.event_handlers))
        args.args(["--ctest-args", "--output-on-failure"])
        args.args(["--packages-select", config.package])
        return BasicVerb(args, workspace)

    def test_result(self, config: TestResultConfiguration) -> BasicVerb:
        """Select the ``test-result`` verb, reading results recorded under build/<package>."""
        args, workspace = self._take()
        args.arg("test-result")
        args.args(["--test-result-base", f"{BUILD_BASE}/{config.package}"])
        if config.verbose:
            args.arg("--verbose")
        if config.all:
            args.arg("--all")
        return BasicVerb(args, workspace)


class BuildVerb(_Stage):
    """``colcon build`` before the build profile has been applied."""

    def configure(self, config: BuildConfiguration) -> ConfiguredBuild:
        """
        Apply a build profile.

        All CMake definitions share one ``--cmake-args`` flag (colcon keeps
        only the last occurrence of the flag). The build type definition goes
        last so no pass-through cmake argument can shadow it.
        """
        args, workspace = self._take()
        if config.parallel_jobs is not None:
            args.args(["--executor", "parallel", "--parallel-workers", str(config.parallel_jobs)])
        args.args(event_handler_args(config.event_handlers))
        if config.mixins:
            args.arg("--mixin").args(config.mixins)
        args.arg("--cmake-args")
        args.arg(cmake_arg("BUILD_TESTING", "ON" if config.build_tests else "OFF"))
        args.args(config.cmake_args)
        args.arg(cmake_arg("CMAKE_BUILD_TYPE", config.build_type.value))
        return ConfiguredBuild(args, workspace)


class ConfiguredBuild(_Stage):
    """Fully configured ``colcon build``; only package selection is left."""

    def command(self, intent: Intent) -> list[str]:
        """Final token list for ``intent`` without running it."""
        return [*self.tokens, *intent.selection()]

    def run(self, intent: Intent, runner: ProcessRunner) -> RunResult:
        """Append the package selection for ``intent`` and run colcon."""
        args, workspace = self._take()
        args.args(intent.selection())
        return runner.run(COLCON, args.to_list(), workspace)


class BasicVerb(_Stage):
    """``colcon test`` / ``colcon test-result``; complete once the verb is chosen."""

    def run(self, runner: ProcessRunner) -> RunResult:
        args, workspace = self._take()
        return runner.run(COLCON, args.to_list(), workspace)


@dataclass(frozen=True)
class DirectInvocation:
    """A command for a tool other than colcon."""

    program: str
    args: tuple[str, ...]
    cwd: Path

    def run(self, runner: ProcessRunner) -> RunResult:
        return runner.run(self.program, list(self.args), self.cwd)


def package_build_dir(workspace: Path | str, package: str) -> str:
    return f"{workspace}/{BUILD_BASE}/{package}"


def ninja_build_target(workspace: Path | str, package: str, target: str) -> DirectInvocation:
    """Rebuild a single target inside the package's existing build tree."""
    return DirectInvocation(
        program=NINJA,
        args=("-C", package_build_dir(workspace, package), target),
        cwd=Path(workspace),
    )


CTEST_REGEX_SPECIAL = frozenset("\\^$.|?*+()[]{}")


def escape_test_name(test: str) -> str:
    """Escape characters ctest would interpret as regex syntax."""
    return "".join(f"\\{c}" if c in CTEST_REGEX_SPECIAL else c for c in test)


def ctest_single(workspace: Path | str, package: str, test: str) -> DirectInvocation:
    """Run exactly one test; the regex is anchored so ``foo`` never matches ``foo_extra``."""
    return DirectInvocation(
        program=CTEST,
        args=(
            "--test-dir",
            package_build_dir(workspace, package),
            "--output-on-failure",
            "-R",
            f"^{escape_test_name(test)}$",
        ),
        cwd=Path(workspace),
    )
