"""
Execution of external tools.
"""

from .runner import ProcessRunner

__all__ = ["ProcessRunner"]
