"""Shared error taxonomy for tt.

Every failure the commit workflow can surface derives from TTError and
carries an ErrorKind, so callers branch on the kind instead of matching
message text.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a workflow failure."""

    PRECONDITION = "precondition"
    COLLECTION = "collection"
    GENERATION = "generation"
    SIDE_EFFECT = "side-effect"

    @property
    def label(self) -> str:
        """Human-readable prefix used when reporting the error."""
        return {
            ErrorKind.PRECONDITION: "Setup",
            ErrorKind.COLLECTION: "Git",
            ErrorKind.GENERATION: "LLM",
            ErrorKind.SIDE_EFFECT: "Commit",
        }[self]


class TTError(Exception):
    """Base exception for tt errors."""

    kind: ErrorKind = ErrorKind.PRECONDITION

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
