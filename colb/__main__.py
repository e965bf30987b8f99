"""
Entry point for the `colb` command-line interface.

colb is a colcon wrapper for faster change-compile-test cycles: it builds
a package together with its dependencies, or rebuilds and runs a single
test, with one short command.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the colb CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
