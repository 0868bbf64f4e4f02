"""Refinement loop states and the pure transition function.

Contains:
- LoopState: Lifecycle states of a refinement session
- Action: Options offered to the user after each generation
- Events: Selected, Regenerated, GenerationFailed, CommitDone, CommitFailed
- Effects: Regenerate, ExecuteCommit, Discard
- Transition: The result of applying an event
- next_state: Pure (state, event) -> Transition function

next_state performs no I/O. The driver in tt.workflow.loop collects events
and carries out the returned effects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from tt.llm.prompts import PromptVariant


class LoopState(Enum):
    """Lifecycle state of a refinement session."""

    AWAITING_DECISION = "awaiting_decision"
    REGENERATING = "regenerating"
    FINALIZING = "finalizing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (LoopState.COMMITTED, LoopState.CANCELLED)


class Action(Enum):
    """User choices in the refinement menu."""

    COMMIT = "commit"
    CANCEL = "cancel"
    DETAILED = "detailed"
    RETRY = "retry"
    SUMMARIZE = "summarize"
    FEEDBACK = "feedback"


# Actions that regenerate, and the prompt variant each one uses
REGENERATING_ACTIONS = {
    Action.DETAILED: PromptVariant.DETAILED,
    Action.RETRY: PromptVariant.STANDARD,
    Action.SUMMARIZE: PromptVariant.SUMMARIZE,
    Action.FEEDBACK: PromptVariant.FEEDBACK,
}


# Events


@dataclass(frozen=True)
class Selected:
    """The user picked a menu action."""

    action: Action
    feedback: Optional[str] = None


@dataclass(frozen=True)
class Regenerated:
    """A regeneration finished and the session holds the new message."""


@dataclass(frozen=True)
class GenerationFailed:
    """A regeneration raised an error."""


@dataclass(frozen=True)
class CommitDone:
    """The commit was created."""


@dataclass(frozen=True)
class CommitFailed:
    """Staging or committing raised an error; nothing was committed."""


Event = Union[Selected, Regenerated, GenerationFailed, CommitDone, CommitFailed]


# Effects


@dataclass(frozen=True)
class Regenerate:
    """Generate a new message with the given variant."""

    variant: PromptVariant
    feedback: Optional[str] = None


@dataclass(frozen=True)
class ExecuteCommit:
    """Hand the current message to the commit executor."""


@dataclass(frozen=True)
class Discard:
    """Drop the session without side effects."""


Effect = Union[Regenerate, ExecuteCommit, Discard]


@dataclass(frozen=True)
class Transition:
    """New state plus the effects the driver must perform."""

    state: LoopState
    effects: tuple = ()


class InvalidTransitionError(ValueError):
    """Raised when an event is not valid in the current state."""

    def __init__(self, state: LoopState, event: Event):
        super().__init__(f"Event {event!r} is not valid in state {state.value}")
        self.state = state
        self.event = event


def _on_selected(event: Selected) -> Transition:
    if event.action == Action.COMMIT:
        return Transition(LoopState.FINALIZING, (ExecuteCommit(),))

    if event.action == Action.CANCEL:
        return Transition(LoopState.CANCELLED, (Discard(),))

    variant = REGENERATING_ACTIONS[event.action]
    feedback = None
    if event.action == Action.FEEDBACK:
        feedback = (event.feedback or "").strip()
        if not feedback:
            raise ValueError("Feedback action requires non-empty feedback text")
    return Transition(LoopState.REGENERATING, (Regenerate(variant, feedback),))


def next_state(state: LoopState, event: Event) -> Transition:
    """Compute the transition for an event.

    Args:
        state: Current session state.
        event: The event to apply.

    Returns:
        The resulting Transition.

    Raises:
        InvalidTransitionError: If the event is not allowed in this state.
        ValueError: If a feedback selection carries no text.
    """
    if state == LoopState.AWAITING_DECISION and isinstance(event, Selected):
        return _on_selected(event)

    if state == LoopState.REGENERATING:
        if isinstance(event, Regenerated):
            return Transition(LoopState.AWAITING_DECISION)
        if isinstance(event, GenerationFailed):
            return Transition(LoopState.CANCELLED)

    if state == LoopState.FINALIZING:
        if isinstance(event, CommitDone):
            return Transition(LoopState.COMMITTED)
        if isinstance(event, CommitFailed):
            return Transition(LoopState.CANCELLED)

    raise InvalidTransitionError(state, event)
