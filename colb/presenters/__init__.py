"""
Output presenters for colb CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
