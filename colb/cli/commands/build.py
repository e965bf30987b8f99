"""
Native Click implementation of the build command.

Usage: colb build [PACKAGE] [--skip-dependencies]
"""

import click

from ..context import ColbContext
from ..decorators import handle_errors
from ._execution import exit_with


@click.command("build")
@click.argument("package", required=False)
@click.option(
    "-s",
    "--skip-dependencies",
    is_flag=True,
    default=False,
    help="Don't rebuild the dependencies of the package.",
)
@click.pass_obj
@handle_errors
def build(ctx: ColbContext, package: str | None, skip_dependencies: bool) -> None:
    """Build a package (default: the package containing the current directory).

    Dependencies are built first with the [upstream] profile, then the
    package itself with the [package] profile.

    \b
    Examples:
        colb build              # Build the current package and its dependencies
        colb build my_pkg -s    # Build only my_pkg
    """
    package = ctx.package(package)
    result = ctx.coordinator().build(package, skip_dependencies=skip_dependencies)
    exit_with(result)
