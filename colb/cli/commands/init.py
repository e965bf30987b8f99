"""
Native Click implementation of the init command.

Usage: colb init [--force]
"""

import click

from ...config import init_config
from ..context import ColbContext
from ..decorators import handle_errors


@click.command("init")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite an existing configuration file.",
)
@click.pass_obj
@handle_errors
def init(ctx: ColbContext, force: bool) -> None:
    """Write the default configuration file.

    Creates .colb.toml in the workspace root with the default
    dependency (upstream) and package profiles.

    \b
    Examples:

        colb init        # Create .colb.toml, refuse if one exists

        colb init -f     # Replace an existing .colb.toml
    """
    path = init_config(ctx.workspace, force=force)
    ctx.presenter.print(f"Initialized default configuration at '{path}'")
