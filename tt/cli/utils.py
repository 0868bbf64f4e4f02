"""Shared utility functions for CLI commands."""

import logging
import os
import sys
from typing import Callable, Optional, TextIO, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

T = TypeVar("T")

SPINNER = "dots"

SEPARATOR = "=" * 60


def setup_logging(*, is_verbose: bool) -> None:
    """Configure logging based on verbosity.

    Args:
        is_verbose: Whether to enable debug logging.
    """
    log_level = "DEBUG" if is_verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_time=is_verbose, show_path=is_verbose)],
        force=True,
    )


def run_with_spinner(
    title: str,
    action: Callable[[], T],
    stream: Optional[TextIO] = None,
    animate: Optional[bool] = None,
) -> T:
    """Run a blocking action under a rich status spinner.

    The status display owns its refresh thread; leaving the ``with`` block
    stops and joins it and restores the cursor whether the action returns
    or raises. When the stream is not a terminal the title is printed once
    and no spinner is started.

    Args:
        title: Text shown next to the spinner.
        action: The blocking call to run.
        stream: Output stream (defaults to stderr).
        animate: Force animation on or off (defaults to stream.isatty()).

    Returns:
        Whatever the action returns.
    """
    stream = stream or sys.stderr
    if animate is None:
        animate = stream.isatty()

    if not animate:
        typer.echo(title, file=stream)
        return action()

    console = Console(file=stream, force_terminal=True)
    with console.status(title, spinner=SPINNER):
        result = action()
    console.print(title, markup=False, highlight=False)
    return result


def redact_api_key(key: str) -> str:
    """Redact an API key, keeping the first and last 4 characters.

    Keys of 8 characters or fewer are fully masked.
    """
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]


def echo_framed(text: str, header: Optional[str] = None) -> None:
    """Print text between separator lines, with an optional header."""
    typer.echo("")
    if header:
        typer.echo(header)
    typer.echo(SEPARATOR)
    typer.echo(text)
    typer.echo(SEPARATOR)
