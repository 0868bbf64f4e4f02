"""CLI entry point for tt.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from tt.cli.aic import aic_command, ap_command
from tt.cli.commit import commit_command, push_command
from tt.cli.config import config_app, key_get_command, key_set_command
from tt.cli.main import main_command


# Main application
app = typer.Typer(
    name="tt",
    help="tt: git helper with AI-assisted commit messages",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# AI commit commands and their aliases
app.command("aic")(aic_command)
for _alias in ("ai-commit", "ai", "ac"):
    app.command(_alias, hidden=True)(aic_command)

app.command("ap")(ap_command)
for _alias in ("aip", "aicommitpush"):
    app.command(_alias, hidden=True)(ap_command)

app.command("commit")(commit_command)
app.command("c", hidden=True)(commit_command)
app.command("push")(push_command)
app.command("key-set")(key_set_command)
app.command("key-get")(key_get_command)

# Root callback for --version and --verbose
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "aic_command",
    "ap_command",
    "commit_command",
    "push_command",
    "key_set_command",
    "key_get_command",
    "main_command",
]
