"""LLM-related exception classes.

Contains all exception classes for language-model calls:
- LLMError: Base exception for generation errors
- MissingAPIKeyError: Raised when no API key is configured
- NetworkError: Raised when the request itself fails
- NoChoicesError: Raised when the response has no candidate outputs
- EmptyResponseError: Raised when the first candidate has no usable text
"""

from tt.errors import ErrorKind, TTError


class LLMError(TTError):
    """Base exception for LLM-related errors."""

    kind = ErrorKind.GENERATION


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    kind = ErrorKind.PRECONDITION


class NetworkError(LLMError):
    """Raised when the chat completion request fails."""

    pass


class NoChoicesError(LLMError):
    """Raised when the response contains no choices."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the model returned no usable text."""

    pass
