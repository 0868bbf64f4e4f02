"""Git collaborator module for tt.

This package wraps the git command line:
- exceptions: GitError and its subclasses
- runner: _run_git_command, ensure_git_available, ensure_repository
- diff: DiffScope, DiffPayload, get_diff, get_changed_files
- context: ProjectContext, probe_project_context, PROJECT_MARKERS
- operations: stage_all, commit, has_upstream, push
"""

# Exceptions
from tt.git.exceptions import (
    GitError,
    ToolUnavailableError,
    NoRepositoryError,
    NoChangesError,
    SideEffectError,
    StageError,
    CommitError,
    PushError,
)

# Runner utilities
from tt.git.runner import (
    _run_git_command,
    ensure_git_available,
    ensure_repository,
)

# Diff collection
from tt.git.diff import (
    DiffScope,
    DiffPayload,
    get_diff,
    get_changed_files,
)

# Project context
from tt.git.context import (
    PROJECT_MARKERS,
    ProjectContext,
    probe_project_context,
)

# Repository-changing commands
from tt.git.operations import (
    stage_all,
    commit,
    has_upstream,
    push,
)


__all__ = [
    # Exceptions
    "GitError",
    "ToolUnavailableError",
    "NoRepositoryError",
    "NoChangesError",
    "SideEffectError",
    "StageError",
    "CommitError",
    "PushError",
    # Runner
    "_run_git_command",
    "ensure_git_available",
    "ensure_repository",
    # Diff
    "DiffScope",
    "DiffPayload",
    "get_diff",
    "get_changed_files",
    # Context
    "PROJECT_MARKERS",
    "ProjectContext",
    "probe_project_context",
    # Operations
    "stage_all",
    "commit",
    "has_upstream",
    "push",
]
