"""LLM module for tt.

Prompt construction and commit message generation against an
OpenAI-compatible chat completions endpoint.
"""

from tt.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
    NetworkError,
    NoChoicesError,
)
from tt.llm.generator import CommitMessageGenerator, GeneratedMessage, extract_message
from tt.llm.prompts import PromptVariant, build_prompt


# Export commonly used items
__all__ = [
    "LLMError",
    "MissingAPIKeyError",
    "NetworkError",
    "NoChoicesError",
    "EmptyResponseError",
    "CommitMessageGenerator",
    "GeneratedMessage",
    "extract_message",
    "PromptVariant",
    "build_prompt",
]
