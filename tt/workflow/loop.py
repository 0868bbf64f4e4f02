"""Refinement loop driver.

Contains:
- Terminal: Interface for presenting messages and collecting choices
- LoopOutcome: Final state, message and commit result of a session
- RefinementLoop: Collects events, applies next_state, performs effects
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from tt.config import CommitOptions
from tt.git.exceptions import PushError, SideEffectError
from tt.llm.exceptions import LLMError
from tt.llm.generator import CommitMessageGenerator, GeneratedMessage
from tt.llm.prompts import PromptVariant, build_prompt
from tt.workflow.executor import CommitExecutor, CommitResult
from tt.workflow.session import RefinementSession
from tt.workflow.state import (
    Action,
    CommitDone,
    CommitFailed,
    Discard,
    Effect,
    Event,
    ExecuteCommit,
    GenerationFailed,
    LoopState,
    Regenerate,
    Regenerated,
    Selected,
    next_state,
)

logger = logging.getLogger(__name__)

# Progress titles shown while regenerating
REGENERATE_TITLES = {
    PromptVariant.STANDARD: "Retrying with a new generation...",
    PromptVariant.DETAILED: "Generating a more detailed commit message...",
    PromptVariant.SUMMARIZE: "Summarizing the commit message...",
    PromptVariant.FEEDBACK: "Generating commit message based on your feedback...",
}


def run_directly(title: str, action: Callable[[], Any]) -> Any:
    """Progress hook that shows nothing and just runs the action."""
    return action()


class Terminal(ABC):
    """Interactive collaborator used by the refinement loop."""

    @abstractmethod
    def show_message(self, message: GeneratedMessage) -> None:
        """Present a generated message."""
        pass

    @abstractmethod
    def choose_action(self) -> Action:
        """Block until the user picks a menu action."""
        pass

    @abstractmethod
    def ask_feedback(self) -> Optional[str]:
        """Ask for steering feedback.

        Returns:
            Non-empty feedback text, or None if the user backed out.
        """
        pass


@dataclass
class LoopOutcome:
    """How a refinement session ended."""

    state: LoopState
    message: GeneratedMessage
    commit_result: Optional[CommitResult] = None

    @property
    def committed(self) -> bool:
        return self.state == LoopState.COMMITTED


class RefinementLoop:
    """Drive a RefinementSession until it commits or is cancelled."""

    def __init__(
        self,
        session: RefinementSession,
        generator: CommitMessageGenerator,
        terminal: Terminal,
        executor: CommitExecutor,
        options: CommitOptions,
        progress: Callable[[str, Callable[[], Any]], Any] = run_directly,
    ):
        self.session = session
        self.generator = generator
        self.terminal = terminal
        self.executor = executor
        self.options = options
        self.progress = progress
        self.commit_result: Optional[CommitResult] = None

    def run(self) -> LoopOutcome:
        """Prompt for actions until the session reaches a terminal state.

        Raises:
            LLMError: If a regeneration fails; the session is cancelled.
            SideEffectError: If staging, committing or pushing fails.
        """
        while not self.session.state.is_terminal:
            event = self._collect_event()
            if event is not None:
                self.dispatch(event)
        return self._outcome()

    def finalize(self) -> LoopOutcome:
        """Commit the current message without asking."""
        self.dispatch(Selected(Action.COMMIT))
        return self._outcome()

    def dispatch(self, event: Event) -> None:
        """Apply an event and carry out the resulting effects."""
        transition = next_state(self.session.state, event)
        logger.debug("%s + %r -> %s", self.session.state.value, event, transition.state.value)
        self.session.state = transition.state

        for effect in transition.effects:
            follow_up = self._perform(effect)
            if follow_up is not None:
                self.dispatch(follow_up)

    def _collect_event(self) -> Optional[Event]:
        action = self.terminal.choose_action()
        if action != Action.FEEDBACK:
            return Selected(action)

        feedback = self.terminal.ask_feedback()
        if not feedback or not feedback.strip():
            # Back to the menu without a transition
            return None
        return Selected(Action.FEEDBACK, feedback.strip())

    def _perform(self, effect: Effect) -> Optional[Event]:
        if isinstance(effect, Regenerate):
            return self._regenerate(effect)
        if isinstance(effect, ExecuteCommit):
            return self._commit()
        if isinstance(effect, Discard):
            logger.debug("Session discarded after %d generation(s)", len(self.session.history))
            return None
        raise TypeError(f"Unknown effect: {effect!r}")

    def _regenerate(self, effect: Regenerate) -> Event:
        session = self.session
        if effect.variant == PromptVariant.SUMMARIZE:
            payload = session.current.text
        else:
            payload = session.diff.text

        prompt = build_prompt(
            effect.variant,
            payload,
            context=session.context,
            changed_files=session.changed_files,
            extra=effect.feedback,
        )
        index = session.next_index

        try:
            message = self.progress(
                REGENERATE_TITLES[effect.variant],
                lambda: self.generator.invoke(prompt, variant=effect.variant, index=index),
            )
        except LLMError:
            self.dispatch(GenerationFailed())
            raise

        session.record(message)
        self.terminal.show_message(message)
        return Regenerated()

    def _commit(self) -> Event:
        message = self.session.current.text
        try:
            self.commit_result = self.progress(
                "Creating commit...",
                lambda: self.executor.execute(message, self.options),
            )
        except PushError as e:
            # The commit exists even though the push failed
            self.commit_result = e.result
            self.dispatch(CommitDone())
            raise
        except SideEffectError:
            self.dispatch(CommitFailed())
            raise
        return CommitDone()

    def _outcome(self) -> LoopOutcome:
        return LoopOutcome(
            state=self.session.state,
            message=self.session.current,
            commit_result=self.commit_result,
        )
