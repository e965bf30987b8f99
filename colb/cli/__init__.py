"""
Click-based CLI for colb.

This module provides the main Click command group and serves as the
entry point for the colb CLI.

Usage:
    from colb.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.bootstrap import bootstrap
from .context import ColbContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("colb")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="colb")
@click.option(
    "-w",
    "--workspace",
    type=click.Path(file_okay=False),
    default=None,
    help="Workspace root (default: detected from the current directory).",
)
@click.pass_context
def cli(ctx: click.Context, workspace: str | None) -> None:
    """colb - a colcon wrapper for faster change-compile-test cycles

    \b
    Quick Start:
        colb build             Build the current package and its dependencies
        colb test              Rebuild and test the current package
        colb test -t <name>    Rebuild and run a single test

    \b
    Configuration:
        colb init              Write .colb.toml with the default profiles
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    bootstrap()
    colb_ctx = ColbContext.create(workspace=workspace)
    colb_ctx.presenter.header("Workspace")
    if colb_ctx.is_configured:
        colb_ctx.presenter.context(
            f"{colb_ctx.workspace} (Using configuration from {colb_ctx.config_file.name})"
        )
    else:
        colb_ctx.presenter.context(f"{colb_ctx.workspace} (Unconfigured)")
    ctx.obj = colb_ctx


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "ColbContext",
    "__version__",
    "cli",
    "register_commands",
]
