"""
Pydantic Settings for colb runtime options.

Runtime options (logging, tool executables) come from environment variables
and defaults. Build profiles live in the workspace's .colb.toml and are
handled by colb.config.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings

from .models.config import LoggingConfig, ToolsConfig


class ColbSettings(BaseSettings):
    """Colb runtime settings with environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (COLB_<section>__<field>), e.g.
       COLB_LOGGING__LEVEL=debug or COLB_TOOLS__COLCON=/opt/colcon/bin/colcon
    3. Model defaults
    """

    model_config = {
        "env_prefix": "COLB_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    logging: LoggingConfig = LoggingConfig()
    tools: ToolsConfig = ToolsConfig()


def load_settings() -> ColbSettings:
    """Load colb settings from the environment."""
    return ColbSettings()
