"""CLI commands for committing and pushing without AI generation."""

import typer

from tt.cli.aic import report_error, report_push_failure
from tt.cli.utils import echo_framed, run_with_spinner
from tt.config import CommitOptions
from tt.errors import TTError
from tt.git import operations
from tt.git.exceptions import PushError
from tt.workflow import CommitExecutor


def commit_command(
    message: str = typer.Argument(..., help="Commit message"),
    add_first: bool = typer.Option(
        False,
        "--add",
        "-a",
        help="Add all files before committing",
    ),
    push_after: bool = typer.Option(
        False,
        "--push",
        "-p",
        help="Push after committing",
    ),
) -> None:
    """Commit changes, optionally staging everything first and pushing after."""
    if len(message.strip()) < 3:
        typer.echo("Commit message too short.", err=True)
        raise typer.Exit(1)

    options = CommitOptions(add_first=add_first, push_after=push_after)

    try:
        result = run_with_spinner(
            "Creating commit...",
            lambda: CommitExecutor().execute(message.strip(), options),
        )
    except PushError as e:
        report_push_failure(e)
        raise typer.Exit(1)
    except TTError as e:
        report_error(e)
        raise typer.Exit(1)

    if result.output:
        typer.echo(result.output)
    echo_framed(f"Message: {message.strip()}", header="Commit successful!")
    if result.pushed:
        typer.echo("Changes pushed to remote.", err=True)


def push_command() -> None:
    """Push changes, setting the upstream if it is not configured."""
    try:
        output, upstream_set = run_with_spinner("Pushing changes to remote...", operations.push)
    except TTError as e:
        report_error(e)
        raise typer.Exit(1)

    if output:
        typer.echo(output)
    status = "Upstream set and changes pushed" if upstream_set else "Changes pushed to remote"
    echo_framed(status, header="Push completed!")
