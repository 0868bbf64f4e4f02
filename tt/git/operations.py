"""Git commands that change the repository.

Contains:
- stage_all: Stage every change in the working tree
- commit: Create a commit with a message
- has_upstream: Whether the current branch tracks a remote branch
- push: Push, setting the upstream when none is configured
"""

import logging
from pathlib import Path
from typing import Optional

from tt.git.exceptions import (
    CommitError,
    GitError,
    PushError,
    StageError,
    ToolUnavailableError,
)
from tt.git.runner import _run_git_command

logger = logging.getLogger(__name__)


def stage_all(cwd: Optional[Path] = None) -> str:
    """Stage all changes with ``git add .``.

    Raises:
        StageError: If git add fails.
    """
    try:
        return _run_git_command(["add", "."], cwd=cwd)
    except ToolUnavailableError:
        raise
    except GitError as e:
        raise StageError(f"Failed to stage changes: {e}", output=str(e))


def commit(message: str, cwd: Optional[Path] = None) -> str:
    """Create a commit.

    Args:
        message: The commit message.
        cwd: Repository directory (defaults to the current directory).

    Returns:
        git's output for the new commit.

    Raises:
        CommitError: If git commit fails.
    """
    try:
        return _run_git_command(["commit", "-m", message], cwd=cwd)
    except ToolUnavailableError:
        raise
    except GitError as e:
        raise CommitError(f"Failed to commit: {e}", output=str(e))


def has_upstream(cwd: Optional[Path] = None) -> bool:
    """Check whether the current branch has an upstream configured."""
    try:
        _run_git_command(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"],
            cwd=cwd,
        )
        return True
    except ToolUnavailableError:
        raise
    except GitError:
        return False


def push(cwd: Optional[Path] = None) -> tuple[str, bool]:
    """Push the current branch.

    Without an upstream, runs ``git push --set-upstream origin HEAD``.

    Returns:
        Tuple of (git output, whether the upstream was set).

    Raises:
        PushError: If the push fails.
    """
    set_upstream = not has_upstream(cwd)
    if set_upstream:
        logger.info("No upstream branch configured, setting it to origin/HEAD")
        args = ["push", "--set-upstream", "origin", "HEAD"]
    else:
        args = ["push"]

    try:
        return _run_git_command(args, cwd=cwd), set_upstream
    except ToolUnavailableError:
        raise
    except GitError as e:
        action = "push and set upstream" if set_upstream else "push"
        raise PushError(f"Failed to {action}: {e}", output=str(e))
