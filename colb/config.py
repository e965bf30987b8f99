"""Configuration loading and persistence for colb.

The build profiles live in ``.colb.toml`` at the workspace root. A missing
file is not an error: the default profiles are used and nothing is written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError

from .core.exceptions import ConfigFileError, ConfigInitConflictError, ConfigParseError
from .core.models.config import BuildConfiguration, ColbConfig

CONFIG_FILENAME = ".colb.toml"

CONFIG_HEADER = """\
# colb configuration file
#
# [upstream] configures the build of the dependencies of a package,
# [package] configures the build of the package itself.
# build_type is one of "Debug", "Release", "RelWithDebInfo".
"""


def config_path(workspace: Path | str) -> Path:
    """Path of the config file for a workspace."""
    return Path(workspace) / CONFIG_FILENAME


def load_config(workspace: Path | str) -> ColbConfig:
    """
    Load the profile pair for a workspace.

    Args:
        workspace: Workspace root

    Returns:
        Parsed configuration, or the defaults if no config file exists

    Raises:
        ConfigFileError: The file exists but cannot be read
        ConfigParseError: The file is not valid TOML or not a valid configuration
    """
    path = config_path(workspace)
    if not path.exists():
        return ColbConfig.default()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(
            f"Could not parse config file: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Could not open config file: {e}", file_path=str(path), cause=e
        ) from e

    try:
        return ColbConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(
            f"Could not parse config file: {e}", file_path=str(path), cause=e
        ) from e


def _toml_value(val: Any) -> str:
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, (int, float)):
        return str(val)
    if isinstance(val, (list, tuple)):
        return "[" + ", ".join(_toml_value(v) for v in val) + "]"
    # JSON string escapes are valid TOML basic-string escapes
    return json.dumps(str(val))


def _profile_lines(name: str, profile: BuildConfiguration) -> list[str]:
    lines = [f"[{name}]"]
    data = profile.model_dump(mode="json")
    handlers = data.pop("event_handlers")
    for key, val in data.items():
        if val is None:
            continue
        lines.append(f"{key} = {_toml_value(val)}")
    lines.append("")
    lines.append(f"[{name}.event_handlers]")
    for key, val in handlers.items():
        lines.append(f"{key} = {_toml_value(val)}")
    lines.append("")
    return lines


def render_config(config: ColbConfig) -> str:
    """Serialize a configuration to TOML text."""
    # Build TOML content manually (to avoid adding a TOML writer dependency)
    lines = [CONFIG_HEADER]
    lines.extend(_profile_lines("upstream", config.upstream))
    lines.extend(_profile_lines("package", config.package))

    lines.append("[install]")
    for key, val in config.install.model_dump(mode="json").items():
        lines.append(f"{key} = {_toml_value(val)}")
    lines.append("")

    return "\n".join(lines)


def save_config(config: ColbConfig, path: Path) -> None:
    """Write a configuration to ``path``, replacing any existing file."""
    try:
        path.write_text(render_config(config))
    except OSError as e:
        raise ConfigFileError(f"Could not create '{path}': {e}", file_path=str(path), cause=e) from e


def init_config(workspace: Path | str, force: bool = False) -> Path:
    """
    Write the default configuration into a workspace.

    Args:
        workspace: Workspace root
        force: Overwrite an existing config file

    Returns:
        Path of the written file

    Raises:
        ConfigInitConflictError: The file exists and ``force`` is not set
        ConfigFileError: The file could not be written
    """
    path = config_path(workspace)
    if path.exists() and not force:
        raise ConfigInitConflictError(
            f"Will not overwrite '{path}' without --force", file_path=str(path)
        )
    save_config(ColbConfig.default(), path)
    return path
