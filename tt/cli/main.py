"""Root CLI callback for tt."""

import typer

from tt import __version__
from tt.cli.utils import setup_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tt {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """tt - a git helper with AI-assisted commit messages."""
    setup_logging(is_verbose=verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
