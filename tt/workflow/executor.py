"""Commit executor: stage, commit, then push.

Contains:
- CommitResult: What the executor did
- CommitExecutor: Runs the steps in order, stopping at the first failure
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tt.config import CommitOptions
from tt.git import operations
from tt.git.exceptions import PushError

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    """Outcome of a commit run."""

    committed: bool = False
    staged: bool = False
    pushed: bool = False
    upstream_set: bool = False
    output: str = ""


class CommitExecutor:
    """Apply a final commit message to the repository.

    Steps run strictly in order: stage (if add_first), commit, push (if
    push_after). A failed step stops the rest. A failed push leaves the
    new local commit in place.
    """

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    def execute(self, message: str, options: CommitOptions) -> CommitResult:
        """Run the commit steps.

        Args:
            message: The commit message.
            options: Which optional steps to run.

        Returns:
            The CommitResult.

        Raises:
            StageError: If staging fails; nothing is committed.
            CommitError: If the commit fails; nothing is pushed.
            PushError: If the push fails; ``error.result`` shows the commit.
        """
        result = CommitResult()

        if options.add_first:
            logger.debug("Staging all changes")
            operations.stage_all(cwd=self.cwd)
            result.staged = True

        logger.debug("Creating commit")
        result.output = operations.commit(message, cwd=self.cwd)
        result.committed = True

        if options.push_after:
            try:
                push_output, upstream_set = operations.push(cwd=self.cwd)
            except PushError as e:
                e.result = result
                raise
            result.pushed = True
            result.upstream_set = upstream_set
            if push_output:
                result.output = f"{result.output}\n{push_output}" if result.output else push_output

        return result
