"""CLI commands for AI-generated commit messages."""

from typing import Optional

import typer

from tt import global_config
from tt.cli.terminal import QuestionaryTerminal
from tt.cli.utils import echo_framed, run_with_spinner
from tt.config import CommitOptions
from tt.errors import TTError
from tt.git.exceptions import NoChangesError, PushError
from tt.workflow import LoopOutcome, LoopState, run_ai_commit


def report_error(e: TTError) -> None:
    """Print a TTError with its kind label."""
    typer.echo(f"{e.kind.label} error: {e}", err=True)


def report_push_failure(e: PushError) -> None:
    """Report a push failure that happened after a successful commit."""
    if e.result is not None and e.result.output:
        typer.echo(e.result.output)
    typer.echo("Commit created successfully.", err=True)
    typer.echo("Push failed, but commit was successful.", err=True)
    report_error(e)


def report_no_changes() -> None:
    """Display a git-style message for an empty working tree."""
    typer.echo("nothing to commit (no staged or unstaged changes)", err=True)
    typer.echo("", err=True)
    typer.echo("Make some changes first, then run tt aic again.", err=True)


def _run(options: CommitOptions, header: str) -> LoopOutcome:
    """Load settings and run the AI commit workflow, exiting 1 on failure."""
    try:
        settings = global_config.load_settings()
        typer.echo(header, err=True)
        return run_ai_commit(
            settings,
            options,
            QuestionaryTerminal(),
            progress=run_with_spinner,
            on_model=lambda name: typer.echo(f"Using model: {name}", err=True),
        )

    except NoChangesError:
        report_no_changes()
        raise typer.Exit(1)
    except PushError as e:
        report_push_failure(e)
        raise typer.Exit(1)
    except TTError as e:
        report_error(e)
        raise typer.Exit(1)


def aic_command(
    auto_commit: bool = typer.Option(
        False,
        "--commit",
        "-c",
        help="Automatically create commit with generated message",
    ),
    add_first: bool = typer.Option(
        True,
        "--add/--no-add",
        "-a",
        help="Stage all changes before committing",
    ),
    push_after: bool = typer.Option(
        False,
        "--push",
        "-p",
        help="Push after committing",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use for generation (overrides default_model from config)",
    ),
) -> None:
    """Generate AI-powered commit messages from your changes."""
    options = CommitOptions(
        auto_commit=auto_commit,
        add_first=add_first,
        push_after=push_after,
        model_override=model,
    )
    outcome = _run(options, "AI Commit")

    if outcome.state == LoopState.CANCELLED:
        typer.echo("Commit canceled.", err=True)
        return

    result = outcome.commit_result
    if result is not None and result.output:
        typer.echo(result.output)
    typer.echo("Commit created successfully.", err=True)
    if result is not None and result.pushed:
        status = "Upstream set and changes pushed" if result.upstream_set else "Changes pushed to remote"
        echo_framed(status, header="Push completed!")


def ap_command(
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use for generation (overrides default_model from config)",
    ),
) -> None:
    """Generate an AI commit message, commit everything and push in one step."""
    options = CommitOptions(
        auto_commit=True,
        add_first=True,
        push_after=True,
        model_override=model,
    )
    outcome = _run(options, "AI Commit & Push")

    result = outcome.commit_result
    if result is not None and result.output:
        typer.echo(result.output)
    status = "Changes committed and pushed"
    if result is not None and result.upstream_set:
        status = "Changes committed, upstream set and pushed"
    echo_framed(f"Message: {outcome.message.text}\nStatus: {status}", header="Push completed!")
