"""
Shared helpers for commands that run external tools.
"""

from ...core.exceptions import ToolNotFoundError
from ...core.models.invocation import LaunchFailed, RunResult


def exit_with(result: RunResult) -> None:
    """
    End the command with the status of the last step that ran.

    Raises:
        ToolNotFoundError: The step's executable could not be launched
        SystemExit: The step exited non-zero
    """
    if isinstance(result, LaunchFailed):
        raise ToolNotFoundError(result.reason, executable=result.executable)
    if result.exit_code != 0:
        raise SystemExit(result.exit_code)
