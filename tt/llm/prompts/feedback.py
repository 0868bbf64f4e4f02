"""Feedback-guided prompt template.

Embeds the diff together with the user's steering instruction.
"""

FEEDBACK_PAYLOAD_TEMPLATE = """Based on this diff:

{diff}

And considering this feedback: {feedback}

Generate an appropriate commit message."""
