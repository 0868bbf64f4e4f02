"""Interactive terminal used by the refinement loop."""

from typing import Optional

import questionary

from tt.cli.utils import echo_framed
from tt.llm.generator import GeneratedMessage
from tt.llm.prompts import PromptVariant
from tt.workflow.loop import Terminal
from tt.workflow.state import Action

# Menu entries in display order
MENU_OPTIONS = [
    (Action.COMMIT, "Commit - create the commit with this message"),
    (Action.CANCEL, "Cancel - exit without committing"),
    (Action.DETAILED, "Detailed - generate a more detailed message"),
    (Action.RETRY, "Retry - generate a new message"),
    (Action.SUMMARIZE, "Summarize - shorten this message"),
    (Action.FEEDBACK, "Feedback - regenerate following your instructions"),
]

MESSAGE_HEADERS = {
    PromptVariant.STANDARD: "Generated Commit Message:",
    PromptVariant.DETAILED: "Generated Detailed Commit Message:",
    PromptVariant.SUMMARIZE: "Summarized Commit Message:",
    PromptVariant.FEEDBACK: "Feedback-Based Commit Message:",
}


def _require_text(text: str):
    return bool(text and text.strip()) or "Feedback cannot be empty"


class QuestionaryTerminal(Terminal):
    """Terminal built on questionary prompts."""

    def show_message(self, message: GeneratedMessage) -> None:
        header = MESSAGE_HEADERS[message.variant]
        if message.variant == PromptVariant.STANDARD and message.index > 1:
            header = "Regenerated Commit Message:"
        echo_framed(message.text, header=header)

    def choose_action(self) -> Action:
        labels = {label: action for action, label in MENU_OPTIONS}
        choice = questionary.select(
            "What would you like to do?",
            choices=list(labels),
            default=MENU_OPTIONS[0][1],
            use_arrow_keys=True,
        ).ask()

        # Ctrl-C returns None
        if choice is None:
            return Action.CANCEL
        return labels[choice]

    def ask_feedback(self) -> Optional[str]:
        feedback = questionary.text(
            "Enter your feedback for the commit message:",
            validate=_require_text,
        ).ask()
        if feedback is None:
            return None
        return feedback.strip() or None
