"""Prompt templates for commit message generation.

This package contains one template per refinement variant:
- standard: Short conventional-commit message from the diff
- detailed: The standard prompt plus a request for more detail
- summarize: Compress the previous message
- feedback: Regenerate from the diff steered by user feedback

build_prompt is pure: identical inputs always give identical text.
"""

from enum import Enum
from typing import Optional, Sequence, Union

from tt.git.context import ProjectContext
from tt.llm.prompts.standard import STANDARD_INSTRUCTION, STANDARD_PAYLOAD_TEMPLATE
from tt.llm.prompts.detailed import DETAILED_SUFFIX
from tt.llm.prompts.summarize import (
    SUMMARIZE_INSTRUCTION,
    SUMMARIZE_PAYLOAD_TEMPLATE,
    SUMMARY_MAX_CHARS,
)
from tt.llm.prompts.feedback import FEEDBACK_PAYLOAD_TEMPLATE


class PromptVariant(Enum):
    """Prompt variants used by the refinement loop."""

    STANDARD = "standard"
    DETAILED = "detailed"
    SUMMARIZE = "summarize"
    FEEDBACK = "feedback"


def _context_block(context: Union[ProjectContext, str, None], changed_files: Sequence[str]) -> str:
    """Build the optional project and file lines placed before the payload."""
    block = ""
    description = str(context) if context else ""
    if description:
        block += f"Project information: {description}\n\n"
    if changed_files:
        block += f"Changed files: {', '.join(changed_files)}\n\n"
    return block


def build_prompt(
    variant: PromptVariant,
    payload: str,
    context: Union[ProjectContext, str, None] = None,
    changed_files: Sequence[str] = (),
    extra: Optional[str] = None,
) -> str:
    """Build the prompt text for a variant.

    Args:
        variant: Which template to use.
        payload: The diff, or the previous message for SUMMARIZE.
        context: Detected project context (omitted when empty).
        changed_files: Changed file paths (omitted when empty).
        extra: The user's feedback, required for FEEDBACK.

    Returns:
        The prompt string.

    Raises:
        ValueError: If FEEDBACK is requested without feedback text.
    """
    block = _context_block(context, changed_files)

    if variant == PromptVariant.STANDARD:
        return f"{STANDARD_INSTRUCTION}\n\n{block}{STANDARD_PAYLOAD_TEMPLATE.format(diff=payload)}"

    if variant == PromptVariant.DETAILED:
        body = STANDARD_PAYLOAD_TEMPLATE.format(diff=payload)
        return f"{STANDARD_INSTRUCTION}\n\n{block}{body}\n\n{DETAILED_SUFFIX}"

    if variant == PromptVariant.SUMMARIZE:
        return f"{SUMMARIZE_INSTRUCTION}\n\n{block}{SUMMARIZE_PAYLOAD_TEMPLATE.format(message=payload)}"

    if variant == PromptVariant.FEEDBACK:
        feedback = (extra or "").strip()
        if not feedback:
            raise ValueError("Feedback prompt requires non-empty feedback text")
        body = FEEDBACK_PAYLOAD_TEMPLATE.format(diff=payload, feedback=feedback)
        return f"{STANDARD_INSTRUCTION}\n\n{block}{body}"

    raise ValueError(f"Unsupported prompt variant: {variant}")


__all__ = [
    "PromptVariant",
    "build_prompt",
    "STANDARD_INSTRUCTION",
    "DETAILED_SUFFIX",
    "SUMMARIZE_INSTRUCTION",
    "SUMMARY_MAX_CHARS",
    "FEEDBACK_PAYLOAD_TEMPLATE",
]
