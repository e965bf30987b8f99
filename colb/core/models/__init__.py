"""
Pydantic models for colb configuration and invocation results.
"""

from .base import ColbBaseModel, ImmutableModel
from .config import (
    BuildConfiguration,
    BuildType,
    ColbConfig,
    EventHandlers,
    InstallLayout,
    LoggingConfig,
    ToolsConfig,
)
from .invocation import DependenciesOf, ExactPackage, Exited, Intent, LaunchFailed, RunResult

__all__ = [
    "BuildConfiguration",
    "BuildType",
    "ColbBaseModel",
    "ColbConfig",
    "DependenciesOf",
    "EventHandlers",
    "ExactPackage",
    "Exited",
    "ImmutableModel",
    "InstallLayout",
    "Intent",
    "LaunchFailed",
    "LoggingConfig",
    "RunResult",
    "ToolsConfig",
]
