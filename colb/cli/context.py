"""
Click context extension for colb CLI.

Provides ColbContext dataclass that holds colb-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import config_path, load_config
from ..core.di import resolve_or_default
from ..core.interfaces.presenter import IPresenter
from ..core.models.config import ColbConfig
from ..presenters.console import ConsolePresenter
from ..services.context.locator import resolve_package, resolve_workspace
from ..services.execution.runner import ProcessRunner
from ..services.orchestration.coordinator import Coordinator


@dataclass
class ColbContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup; the workspace is detected at that point,
    the configuration is loaded on first use so that ``colb init`` works
    even when an existing config file is broken.

    Attributes:
        cwd: Current working directory (start of package detection)
        workspace: Canonical workspace root
        presenter: User-facing output
        runner: Executes external tools
    """

    cwd: Path
    workspace: Path
    presenter: IPresenter
    runner: ProcessRunner
    _config: ColbConfig | None = field(default=None, repr=False)

    @classmethod
    def create(cls, workspace: str | None = None, cwd: Path | None = None) -> ColbContext:
        """Create a ColbContext for the current environment.

        Args:
            workspace: Explicit workspace path (--workspace), detected if None
            cwd: Working directory override (defaults to Path.cwd())
        """
        if cwd is None:
            cwd = Path.cwd()
        return cls(
            cwd=cwd,
            workspace=resolve_workspace(workspace, cwd),
            presenter=resolve_or_default(IPresenter, ConsolePresenter),  # type: ignore[type-abstract]
            runner=resolve_or_default(ProcessRunner, ProcessRunner),
        )

    @property
    def config_file(self) -> Path:
        return config_path(self.workspace)

    @property
    def is_configured(self) -> bool:
        """Whether the workspace has a .colb.toml."""
        return self.config_file.exists()

    @property
    def config(self) -> ColbConfig:
        """Workspace configuration (defaults if unconfigured)."""
        if self._config is None:
            self._config = load_config(self.workspace)
        return self._config

    def package(self, explicit: str | None) -> str:
        """Package given on the command line, or the one containing cwd."""
        return resolve_package(explicit, self.cwd)

    def coordinator(self) -> Coordinator:
        return Coordinator(
            workspace=self.workspace,
            config=self.config,
            runner=self.runner,
            presenter=self.presenter,
        )
