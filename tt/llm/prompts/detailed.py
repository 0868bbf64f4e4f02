"""Detailed prompt template: the standard prompt plus a request to elaborate."""

DETAILED_SUFFIX = (
    "Please provide a more detailed commit message with additional context and explanations."
)
