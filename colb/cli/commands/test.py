"""
Native Click implementation of the test command.

Usage: colb test [PACKAGE] [--test NAME] [--skip-rebuild] [--rebuild-dependencies]
"""

import click

from ..context import ColbContext
from ..decorators import handle_errors
from ._execution import exit_with


@click.command("test")
@click.argument("package", required=False)
@click.option("-t", "--test", "test_name", help="Build and run only this test.")
@click.option(
    "-s",
    "--skip-rebuild",
    is_flag=True,
    default=False,
    help="Don't rebuild the package before testing.",
)
@click.option(
    "-r",
    "--rebuild-dependencies",
    is_flag=True,
    default=False,
    help="Rebuild the dependencies of the package first.",
)
@click.pass_obj
@handle_errors
def test(
    ctx: ColbContext,
    package: str | None,
    test_name: str | None,
    skip_rebuild: bool,
    rebuild_dependencies: bool,
) -> None:
    """Run tests for a package (default: the package containing the current directory).

    Without --test the package is rebuilt, its whole test suite runs and
    the results are summarized. With --test only that test target is
    rebuilt and run.

    \b
    Examples:
        colb test                       # Rebuild and test the current package
        colb test my_pkg -t test_math   # Rebuild and run only test_math
        colb test -s                    # Run the tests without rebuilding
    """
    package = ctx.package(package)
    result = ctx.coordinator().test(
        package,
        test=test_name,
        skip_rebuild=skip_rebuild,
        rebuild_dependencies=rebuild_dependencies,
    )
    exit_with(result)
