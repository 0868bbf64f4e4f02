"""Standard prompt template for commit message generation.

Asks for a short conventional-commit message over the diff.
"""

STANDARD_INSTRUCTION = (
    "Generate a short, concise git commit message based on the following changes. "
    "Follow the conventional commit format (e.g., feat:, fix:, docs:, style:, refactor:, test:, chore:). "
    "Keep it under 50 characters if possible. "
    "Only respond with the commit message, nothing else."
)

STANDARD_PAYLOAD_TEMPLATE = """Changes:
{diff}"""
