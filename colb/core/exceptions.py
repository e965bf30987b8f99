"""
Custom exception hierarchy for colb.

Every fatal, user-facing condition is a ColbException subclass carrying the
exit code the CLI should terminate with. A non-zero exit from an invoked
tool is not an exception: it is propagated as the command's exit status.
"""

from __future__ import annotations

# Exit status used when a process could not be launched or was terminated
# without an exit code (e.g. killed by a signal).
EXIT_SENTINEL = -1


class ColbException(Exception):
    """
    Base exception for all colb errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, tool names, etc.)
        exit_code: Exit code for the CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ColbConfigError(ColbException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ColbConfigError):
    """
    Error reading or writing a configuration file.

    Raised for permission errors, unreadable files and failed writes.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigParseError(ConfigFileError):
    """The configuration file is not valid TOML or does not match the profile schema."""

    pass


class ConfigInitConflictError(ConfigFileError):
    """
    A configuration file already exists and overwriting was not forced.

    The existing file is left untouched.
    """

    pass


# =============================================================================
# Context Detection Errors
# =============================================================================


class ColbContextError(ColbException):
    """Base class for workspace/package detection errors."""

    pass


class PackageNotFoundError(ColbContextError):
    """No package was given and none could be detected from the current directory."""

    def __init__(
        self,
        message: str = "Could not detect package, try specifying it explicitly!",
        *,
        start_dir: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if start_dir:
            ctx["start_dir"] = start_dir
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class ColbExecutionError(ColbException):
    """Base class for execution-related errors."""

    pass


class ToolNotFoundError(ColbExecutionError):
    """
    An external tool (colcon, ninja, ctest) could not be launched.

    Distinct from a tool that ran and returned a non-zero exit code.
    """

    exit_code: int = EXIT_SENTINEL

    def __init__(
        self,
        message: str,
        *,
        executable: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if executable:
            ctx["executable"] = executable
        super().__init__(message, context=ctx, cause=cause)
        self.executable = executable


class StageConsumedError(ColbExecutionError, RuntimeError):
    """
    An invocation stage was used after it had already been advanced.

    Indicates a programming error in the caller, not a user error.
    """

    pass
