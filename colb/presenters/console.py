"""
Console presenter for terminal output.

Step headers and echoed commands are framed so the output of the invoked
tools stands apart from colb's own lines:

    ┌[ Building 'foo' ]
    └> colcon --log-base /dev/null build ...
    [ \\ \\ \\ Output / / / ]
"""

import sys
from collections.abc import Sequence

from ..core.interfaces.presenter import IPresenter

DECO = "\033[90m"  # bright black
HEADER = "\033[1;94m"  # bold bright blue
RESET = "\033[0m"


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Formats output for human-readable terminal display.
    """

    def __init__(self, use_color: bool = True, file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to sys.stdout)
        """
        self._file = file
        self._use_color = use_color

    @property
    def out(self):
        return self._file or sys.stdout

    @property
    def color(self) -> bool:
        return self._use_color and self.out.isatty()

    def _style(self, style: str, text: str) -> str:
        if self.color:
            return f"{style}{text}{RESET}"
        return text

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self.out, flush=True)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        if self.color:
            print(f"\033[91mError: {message}\033[0m", file=sys.stderr)
        else:
            print(f"Error: {message}", file=sys.stderr)

    def header(self, title: str) -> None:
        self.print(f"{self._style(DECO, '┌[')} {self._style(HEADER, title)} {self._style(DECO, ']')}")

    def context(self, message: str) -> None:
        self.print(f"{self._style(DECO, '└>')} {message}")

    def command(self, executable: str, args: Sequence[str]) -> None:
        self.context(" ".join([executable, *args]))
        self.print(self._style(DECO, "[ \\ \\ \\") + " Output " + self._style(DECO, "/ / / ]"))
