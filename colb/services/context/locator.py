"""
Workspace and package detection.

Both are found by walking up from the current directory until a directory
containing a marker file is reached.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ...config import CONFIG_FILENAME
from ...core.exceptions import PackageNotFoundError
from ..logging import get_logger

WORKSPACE_MARKERS: tuple[str, ...] = ("build", CONFIG_FILENAME)
PACKAGE_MARKERS: tuple[str, ...] = ("package.xml",)


def contains_marker(path: Path, markers: Iterable[str]) -> bool:
    """Check whether any marker exists directly inside ``path``.

    Errors while probing (permission denied, symlink loops) count as absent.
    """
    for marker in markers:
        candidate = path / marker
        try:
            if candidate.exists():
                return True
        except OSError as e:
            get_logger().debug("Ignoring unreadable marker %s: %s", candidate, e)
    return False


def find_upward(markers: Iterable[str], start_dir: Path | str | None = None) -> Path | None:
    """
    Find the nearest directory, starting at ``start_dir``, that contains a marker.

    Args:
        markers: File or directory names to look for
        start_dir: Directory to start from (defaults to cwd)

    Returns:
        The matching directory, or None if no ancestor matches.
    """
    markers = tuple(markers)
    try:
        start = Path(start_dir if start_dir is not None else Path.cwd()).resolve()
    except OSError as e:
        get_logger().debug("Could not resolve start directory %s: %s", start_dir, e)
        return None

    for candidate in [start, *start.parents]:
        if contains_marker(candidate, markers):
            return candidate
    return None


def detect_workspace(start_dir: Path | str | None = None) -> Path | None:
    """Nearest ancestor holding a build/ directory or a .colb.toml."""
    return find_upward(WORKSPACE_MARKERS, start_dir)


def detect_package(start_dir: Path | str | None = None) -> str | None:
    """Name of the nearest ancestor directory holding a package.xml."""
    package_dir = find_upward(PACKAGE_MARKERS, start_dir)
    if package_dir is None or not package_dir.name:
        return None
    return package_dir.name


def resolve_workspace(explicit: str | None, start_dir: Path | str | None = None) -> Path:
    """
    Determine the workspace root.

    Uses the explicit path if given, otherwise the detected workspace,
    otherwise the current directory.
    """
    if explicit:
        workspace = Path(explicit)
    else:
        workspace = detect_workspace(start_dir) or Path(start_dir or Path.cwd())
    try:
        return workspace.resolve()
    except OSError:
        return workspace.absolute()


def resolve_package(explicit: str | None, start_dir: Path | str | None = None) -> str:
    """
    Determine the package to act on.

    Raises:
        PackageNotFoundError: No explicit package and none detected.
    """
    if explicit:
        return explicit
    package = detect_package(start_dir)
    if package is None:
        raise PackageNotFoundError(start_dir=str(start_dir) if start_dir else None)
    get_logger().debug("Detected package %s", package)
    return package
