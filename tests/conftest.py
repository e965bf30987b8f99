"""
Shared pytest fixtures for colb tests.

This module provides:
- workspace: A colcon-style workspace with one package
- recording_runner: ProcessRunner stand-in that records invocations
- run_cli: Helper to invoke the colb CLI in-process with the recording runner
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result
from dependency_injector import providers

from colb.cli import cli
from colb.core.bootstrap import bootstrap, reset
from colb.core.container import get_container
from colb.core.models.invocation import Exited, RunResult
from colb.core.settings import ColbSettings
from colb.services.execution.runner import ProcessRunner


class RecordingRunner(ProcessRunner):
    """Records every command instead of executing it.

    Results are taken from ``results`` in order; once exhausted every
    command succeeds.
    """

    def __init__(self, results: list[RunResult] | None = None) -> None:
        super().__init__()
        self.results: list[RunResult] = list(results or [])
        self.calls: list[tuple[str, list[str], Path]] = []

    def run(self, program, args, cwd) -> RunResult:
        self.calls.append((program, list(args), Path(cwd)))
        if self.results:
            return self.results.pop(0)
        return Exited(code=0)

    @property
    def programs(self) -> list[str]:
        return [program for program, _, _ in self.calls]


@pytest.fixture(autouse=True)
def clean_container():
    """Give every test a fresh service container."""
    reset()
    yield
    reset()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """
    Create a workspace with an existing build/ directory and one package.

    Layout:
        ws/build/
        ws/src/my_pkg/package.xml
        ws/src/my_pkg/src/
    """
    ws = tmp_path / "ws"
    (ws / "build").mkdir(parents=True)
    pkg = ws / "src" / "my_pkg"
    (pkg / "src").mkdir(parents=True)
    (pkg / "package.xml").write_text("<package><name>not_the_dir_name</name></package>\n")
    return ws.resolve()


@pytest.fixture
def package_dir(workspace: Path) -> Path:
    return workspace / "src" / "my_pkg"


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def run_cli(recording_runner: RecordingRunner) -> Callable[..., Result]:
    """
    Provide a helper that runs colb in-process.

    The container is bootstrapped up front and its ProcessRunner replaced
    by the recording runner, so no external tool is ever launched.
    """

    def _run(*args: str) -> Result:
        bootstrap(ColbSettings())
        get_container().override(ProcessRunner, providers.Object(recording_runner))
        return CliRunner().invoke(cli, list(args))

    return _run
