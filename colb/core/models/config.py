"""
Configuration models.

Provides Pydantic models for the build profiles persisted in .colb.toml.
Defaults are exposed as named constructors that return a fresh value on
every call; there is no shared default instance.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import ColbBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_MIXINS: tuple[str, ...] = ("compile-commands", "ninja", "mold", "ccache")
DEFAULT_PARALLEL_JOBS = 8


class ConfigBaseModel(ColbBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        frozen=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class BuildType(str, Enum):
    """CMake build type."""

    DEBUG = "Debug"
    RELEASE = "Release"
    REL_WITH_DEB_INFO = "RelWithDebInfo"


class EventHandlers(ConfigBaseModel):
    """Toggles for colcon's event handlers.

    Field defaults match the ``default()`` preset.
    """

    summary: bool = True
    console_start_end: bool = True
    console_cohesion: bool = False
    desktop_notification: bool = False

    @classmethod
    def default(cls) -> EventHandlers:
        """Summary and start/end lines, nothing else."""
        return cls()

    @classmethod
    def silent(cls) -> EventHandlers:
        """All handlers off."""
        return cls(
            summary=False,
            console_start_end=False,
            console_cohesion=False,
            desktop_notification=False,
        )

    @classmethod
    def compile_logs_only(cls) -> EventHandlers:
        """Only grouped compiler output."""
        return cls.silent().model_copy(update={"console_cohesion": True})


class BuildConfiguration(ConfigBaseModel):
    """A build profile: how colcon is configured for one kind of build."""

    mixins: tuple[str, ...]
    cmake_args: tuple[str, ...] = ()
    build_type: BuildType
    parallel_jobs: Annotated[int, Field(ge=1)] | None = None
    event_handlers: EventHandlers
    build_tests: bool

    @field_validator("mixins")
    @classmethod
    def validate_unique_mixins(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Mixins are applied in order and must not repeat."""
        seen: set[str] = set()
        for mixin in v:
            if mixin in seen:
                raise ValueError(f"Duplicate mixin: {mixin}")
            seen.add(mixin)
        return v

    @classmethod
    def upstream(cls) -> BuildConfiguration:
        """Profile for building the dependencies of the active package."""
        return cls(
            mixins=DEFAULT_MIXINS,
            build_type=BuildType.DEBUG,
            parallel_jobs=DEFAULT_PARALLEL_JOBS,
            event_handlers=EventHandlers.default(),
            build_tests=False,
        )

    @classmethod
    def active(cls) -> BuildConfiguration:
        """Profile for building the active package itself."""
        return cls(
            mixins=DEFAULT_MIXINS,
            build_type=BuildType.DEBUG,
            parallel_jobs=DEFAULT_PARALLEL_JOBS,
            event_handlers=EventHandlers.compile_logs_only(),
            build_tests=True,
        )


class InstallLayout(ConfigBaseModel):
    """Install tree layout options for ``colcon build``."""

    symlink: bool = False
    merge: bool = False


class ColbConfig(ConfigBaseModel):
    """Complete colb configuration: the dependency and package profiles.

    Sections missing from a config file fall back to their defaults.
    """

    upstream: BuildConfiguration = Field(default_factory=BuildConfiguration.upstream)
    package: BuildConfiguration = Field(default_factory=BuildConfiguration.active)
    install: InstallLayout = Field(default_factory=InstallLayout)

    @classmethod
    def default(cls) -> ColbConfig:
        """Fresh default configuration."""
        return cls()


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class ToolsConfig(ConfigBaseModel):
    """Names (or paths) of the external executables colb invokes."""

    colcon: str = "colcon"
    ninja: str = "ninja"
    ctest: str = "ctest"
