"""Git command runner and repository checks.

Contains:
- _run_git_command: Run a git command and return its output
- ensure_git_available: Fail if git is not on PATH
- ensure_repository: Fail if not inside a git working tree
"""

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from tt.git.exceptions import GitError, NoRepositoryError, ToolUnavailableError


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run in (defaults to the current directory).

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command fails.
        ToolUnavailableError: If git is not installed.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise ToolUnavailableError("Git is not installed or not in PATH.")


def ensure_git_available() -> None:
    """Check that the git executable can be found.

    Raises:
        ToolUnavailableError: If git is not on PATH.
    """
    if shutil.which("git") is None:
        raise ToolUnavailableError("Git is not installed or not in PATH.")


def ensure_repository(cwd: Optional[Path] = None) -> None:
    """Check that cwd is inside a git working tree.

    Raises:
        NoRepositoryError: If not in a git repository.
    """
    try:
        _run_git_command(["rev-parse", "--is-inside-work-tree"], cwd=cwd)
    except ToolUnavailableError:
        raise
    except GitError:
        raise NoRepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
