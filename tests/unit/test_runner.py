"""
Unit tests for ProcessRunner.

These tests launch the current Python interpreter as the "tool" so they
need no colcon installation.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

from colb.core.exceptions import EXIT_SENTINEL
from colb.core.interfaces.presenter import IPresenter
from colb.core.models.config import ToolsConfig
from colb.core.models.invocation import Exited, LaunchFailed
from colb.services.execution.runner import ProcessRunner
from colb.services.logging import NullLogger


@pytest.fixture
def presenter():
    return MagicMock(spec=IPresenter)


@pytest.fixture
def runner(presenter):
    return ProcessRunner(
        presenter=presenter,
        logger=NullLogger(),
        tools=ToolsConfig(colcon=sys.executable),
    )


class TestProcessRunner:
    """Tests for launching tools and reporting their status."""

    def test_zero_exit(self, runner, tmp_path):
        result = runner.run(sys.executable, ["-c", "pass"], tmp_path)
        assert result == Exited(code=0)
        assert result.success is True

    def test_non_zero_exit_is_reported_verbatim(self, runner, tmp_path):
        result = runner.run(sys.executable, ["-c", "import sys; sys.exit(3)"], tmp_path)
        assert result == Exited(code=3)
        assert result.success is False

    def test_runs_in_working_directory(self, runner, tmp_path):
        script = "import os, sys; sys.exit(0 if os.path.exists('marker') else 1)"
        (tmp_path / "marker").touch()
        assert runner.run(sys.executable, ["-c", script], tmp_path).success

    def test_tool_name_maps_to_configured_executable(self, runner, presenter, tmp_path):
        result = runner.run("colcon", ["-c", "import sys; sys.exit(5)"], tmp_path)
        assert result.exit_code == 5
        presenter.command.assert_called_once_with(sys.executable, ["-c", "import sys; sys.exit(5)"])

    def test_unknown_tool_name_used_verbatim(self, runner):
        assert runner.executable_for("cmake") == "cmake"
        assert runner.executable_for("ninja") == "ninja"

    def test_command_echoed_before_execution(self, runner, presenter, tmp_path):
        runner.run(sys.executable, ["-c", "pass"], tmp_path)
        presenter.command.assert_called_once_with(sys.executable, ["-c", "pass"])

    def test_missing_executable_is_launch_failure(self, runner, tmp_path):
        result = runner.run("colb-no-such-tool", ["--help"], tmp_path)
        assert isinstance(result, LaunchFailed)
        assert result.executable == "colb-no-such-tool"
        assert "colb-no-such-tool" in result.reason
        assert result.exit_code == EXIT_SENTINEL

    def test_missing_working_directory_is_launch_failure(self, runner, tmp_path):
        missing = tmp_path / "does" / "not" / "exist"

        result = runner.run(sys.executable, ["-c", "pass"], missing)

        assert isinstance(result, LaunchFailed)
        assert str(missing) in result.reason
        assert "not found" not in result.reason
        assert result.exit_code == EXIT_SENTINEL

    @pytest.mark.skipif(os.name == "nt", reason="POSIX signals")
    def test_signal_termination_maps_to_sentinel(self, runner, tmp_path):
        script = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
        result = runner.run(sys.executable, ["-c", script], tmp_path)
        assert result == Exited(code=EXIT_SENTINEL)
