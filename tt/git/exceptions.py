"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- ToolUnavailableError: git is not installed or not on PATH
- NoRepositoryError: The working directory is not inside a repository
- NoChangesError: Neither staged nor unstaged changes exist
- SideEffectError: Base for failures that mutate the repository
- StageError, CommitError, PushError: Failures of each side-effect step
"""

from tt.errors import ErrorKind, TTError


class GitError(TTError):
    """Custom exception for git-related errors."""

    kind = ErrorKind.COLLECTION


class ToolUnavailableError(GitError):
    """Raised when the git executable cannot be found."""

    kind = ErrorKind.PRECONDITION


class NoRepositoryError(GitError):
    """Raised when not inside a git working tree."""

    kind = ErrorKind.PRECONDITION


class NoChangesError(GitError):
    """Raised when there are no staged or unstaged changes."""

    pass


class SideEffectError(GitError):
    """Raised when a command that changes the repository fails."""

    kind = ErrorKind.SIDE_EFFECT

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


class StageError(SideEffectError):
    """Raised when staging changes fails."""

    pass


class CommitError(SideEffectError):
    """Raised when creating the commit fails."""

    pass


class PushError(SideEffectError):
    """Raised when pushing fails after a successful commit.

    The local commit is kept; ``result`` describes what did succeed.
    """

    def __init__(self, message: str, output: str = "", result=None):
        super().__init__(message, output)
        self.result = result
