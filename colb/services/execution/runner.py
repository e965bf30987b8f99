"""
Process runner for external build and test tools.

Runs one command at a time in the foreground, with the child inheriting
stdin/stdout/stderr, and reports how it ended.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from ...core.exceptions import EXIT_SENTINEL
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.config import ToolsConfig
from ...core.models.invocation import Exited, LaunchFailed, RunResult


class ProcessRunner:
    """
    Runs external tools and reports their exit status.

    Tool names (``colcon``, ``ninja``, ``ctest``) are mapped to executables
    through ToolsConfig, so a tool can be pointed at a different binary
    with e.g. COLB_TOOLS__COLCON.

    Usage:
        runner = ProcessRunner(presenter, logger)
        result = runner.run("colcon", ["build"], workspace)
        if not result.success:
            ...
    """

    def __init__(
        self,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
        tools: ToolsConfig | None = None,
    ) -> None:
        self._presenter = presenter
        self._logger = logger
        self._tools = tools

    @property
    def presenter(self) -> IPresenter:
        if self._presenter is None:
            from ...core.di import resolve_or_default
            from ...presenters.console import ConsolePresenter

            self._presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
        return self._presenter

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ..logging import get_logger

            self._logger = get_logger()
        return self._logger

    @property
    def tools(self) -> ToolsConfig:
        if self._tools is None:
            from ...core.di import resolve_or_default
            from ...core.settings import ColbSettings

            self._tools = resolve_or_default(ColbSettings, ColbSettings).tools
        return self._tools

    def executable_for(self, program: str) -> str:
        """Executable configured for a tool name; unknown names are used verbatim."""
        return self.tools.model_dump().get(program) or program

    def run(self, program: str, args: Sequence[str], cwd: Path | str) -> RunResult:
        """
        Echo and execute one command, blocking until it exits.

        Args:
            program: Tool name or executable
            args: Arguments, passed without shell interpretation
            cwd: Working directory

        Returns:
            Exited with the raw exit code (EXIT_SENTINEL if killed by a
            signal), or LaunchFailed if the executable could not be started.
        """
        executable = self.executable_for(program)
        argv = [executable, *args]
        self.presenter.command(executable, list(args))
        self.logger.debug("Running %s in %s", argv, cwd)

        if not Path(cwd).is_dir():
            self.logger.error("Working directory does not exist: %s", cwd)
            return LaunchFailed(
                executable=executable,
                reason=f"Working directory '{cwd}' does not exist",
            )

        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except FileNotFoundError as e:
            self.logger.error("Executable not found: %s", executable)
            return LaunchFailed(executable=executable, reason=f"'{executable}' not found: {e}")
        except OSError as e:
            self.logger.error("Could not launch %s: %s", executable, e)
            return LaunchFailed(executable=executable, reason=str(e))

        code = completed.returncode
        if code < 0:
            # Terminated by signal -code
            self.logger.warning("%s terminated by signal %d", executable, -code)
            code = EXIT_SENTINEL
        self.logger.debug("%s exited with %d", executable, code)
        return Exited(code=code)
