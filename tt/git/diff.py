"""Git diff collection.

Contains:
- DiffScope: Which side of the index a diff came from
- DiffPayload: The pending change set handed to the prompt builder
- get_diff: Staged diff, falling back to the unstaged diff
- get_changed_files: Staged file names, falling back to unstaged names
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from tt.git.exceptions import NoChangesError
from tt.git.runner import _run_git_command, ensure_git_available, ensure_repository


class DiffScope(Enum):
    """Where a diff was taken from."""

    STAGED = "staged"
    UNSTAGED = "unstaged"


# git diff arguments per scope
_DIFF_ARGS = {
    DiffScope.STAGED: ["diff", "--staged"],
    DiffScope.UNSTAGED: ["diff"],
}


@dataclass(frozen=True)
class DiffPayload:
    """A non-empty diff with the files it touches."""

    text: str
    scope: DiffScope
    files: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("DiffPayload requires non-empty diff text")


def _split_names(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_diff(cwd: Optional[Path] = None) -> DiffPayload:
    """Get the pending change set.

    The staged diff wins; the unstaged diff is only read when nothing is
    staged.

    Args:
        cwd: Repository directory (defaults to the current directory).

    Returns:
        The DiffPayload for whichever scope has changes.

    Raises:
        ToolUnavailableError: If git is not installed.
        NoRepositoryError: If not in a git repository.
        NoChangesError: If both staged and unstaged diffs are empty.
        GitError: If a diff query fails.
    """
    ensure_git_available()
    ensure_repository(cwd)

    for scope in (DiffScope.STAGED, DiffScope.UNSTAGED):
        text = _run_git_command(_DIFF_ARGS[scope], cwd=cwd)
        if text:
            files = _split_names(_run_git_command(_DIFF_ARGS[scope] + ["--name-only"], cwd=cwd))
            return DiffPayload(text=text, scope=scope, files=files)

    raise NoChangesError("No changes detected in the repository.")


def get_changed_files(cwd: Optional[Path] = None) -> list[str]:
    """Get the names of changed files, staged first.

    Args:
        cwd: Repository directory (defaults to the current directory).

    Returns:
        List of file paths relative to the repository root.

    Raises:
        ToolUnavailableError: If git is not installed.
        NoChangesError: If neither staged nor unstaged files changed.
        GitError: If a name query fails.
    """
    ensure_git_available()

    for scope in (DiffScope.STAGED, DiffScope.UNSTAGED):
        files = _split_names(_run_git_command(_DIFF_ARGS[scope] + ["--name-only"], cwd=cwd))
        if files:
            return files

    raise NoChangesError("No changed files detected in the repository.")
