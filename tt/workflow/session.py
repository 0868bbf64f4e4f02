"""Refinement session data."""

from dataclasses import dataclass, field

from tt.git.context import ProjectContext
from tt.git.diff import DiffPayload
from tt.llm.generator import GeneratedMessage
from tt.workflow.state import LoopState


@dataclass
class RefinementSession:
    """State of one interactive refinement run.

    Created after the first successful generation. ``history`` is
    append-only and its last entry is always ``current``.
    """

    diff: DiffPayload
    context: ProjectContext
    current: GeneratedMessage
    changed_files: list[str] = field(default_factory=list)
    history: list[GeneratedMessage] = field(default_factory=list)
    state: LoopState = LoopState.AWAITING_DECISION

    def __post_init__(self):
        if not self.history:
            self.history.append(self.current)

    @property
    def next_index(self) -> int:
        return self.current.index + 1

    def record(self, message: GeneratedMessage) -> None:
        """Make ``message`` current and append it to history."""
        if message.index <= self.current.index:
            raise ValueError(
                f"Generation index must increase (got {message.index} after {self.current.index})"
            )
        self.history.append(message)
        self.current = message
