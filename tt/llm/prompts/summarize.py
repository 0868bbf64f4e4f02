"""Summarize prompt template.

Works on the previously generated message rather than the diff.
"""

SUMMARY_MAX_CHARS = 50

SUMMARIZE_INSTRUCTION = (
    f"Please summarize this commit message in {SUMMARY_MAX_CHARS} characters or less. "
    "Keep the conventional commit prefix if it has one. "
    "Only respond with the commit message, nothing else."
)

SUMMARIZE_PAYLOAD_TEMPLATE = """Commit message:
{message}"""
