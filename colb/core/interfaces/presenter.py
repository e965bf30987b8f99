"""
Presenter interface definitions for user-facing output.

Step headers, context lines and echoed command lines all go through an
IPresenter so commands and services never print directly.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations handle formatting and displaying output
    to the user.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def header(self, title: str) -> None:
        """Announce the start of a step (e.g. "Building 'foo'")."""
        pass

    @abstractmethod
    def context(self, message: str) -> None:
        """Print a detail line belonging to the current header."""
        pass

    @abstractmethod
    def command(self, executable: str, args: Sequence[str]) -> None:
        """
        Echo a command line right before it is executed.

        Args:
            executable: Program name as it will be looked up
            args: Arguments in the order they are passed
        """
        pass
