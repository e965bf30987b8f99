"""
Click command implementations for colb CLI.

Each module corresponds to a colb command (e.g., build.py implements
'colb build'). Commands are registered with the main CLI group via the
register_commands() function in colb.cli.
"""

from .build import build
from .init import init
from .test import test

COMMANDS = [
    init,
    build,
    test,
]

__all__ = [
    "COMMANDS",
    "build",
    "init",
    "test",
]
