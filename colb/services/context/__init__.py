"""
Workspace and package detection from the filesystem.
"""

from .locator import (
    contains_marker,
    detect_package,
    detect_workspace,
    find_upward,
    resolve_package,
    resolve_workspace,
)

__all__ = [
    "contains_marker",
    "detect_package",
    "detect_workspace",
    "find_upward",
    "resolve_package",
    "resolve_workspace",
]
