"""Commit message generation over an OpenAI-compatible endpoint.

The default endpoint is OpenRouter, which exposes many models through the
OpenAI chat completions API.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from openai import OpenAI, OpenAIError

from tt.config import APP_HEADERS, DEFAULT_BASE_URL, DEFAULT_MODEL
from tt.llm.exceptions import (
    EmptyResponseError,
    MissingAPIKeyError,
    NetworkError,
    NoChoicesError,
)
from tt.llm.prompts import PromptVariant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedMessage:
    """A commit message produced by one generation call."""

    text: str
    variant: PromptVariant
    index: int


def extract_message(response: Any) -> str:
    """Extract the trimmed message text from a chat completion response.

    Args:
        response: The chat completion returned by the client.

    Returns:
        The first choice's content with surrounding whitespace removed.

    Raises:
        NoChoicesError: If the response has no choices.
        EmptyResponseError: If the first choice has no usable text.
    """
    choices = getattr(response, "choices", None)
    if not choices:
        raise NoChoicesError("No response from AI model.")

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) if message is not None else None
    text = (content or "").strip()
    if not text:
        raise EmptyResponseError("AI model returned an empty commit message.")
    return text


class CommitMessageGenerator:
    """Generate commit messages from prompts.

    There is no automatic retry here; regenerating is a user decision made
    in the refinement loop.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        client_factory: Callable[..., Any] = OpenAI,
    ):
        """Initialize the generator.

        Args:
            api_key: Key for the endpoint.
            base_url: Endpoint base URL. Defaults to OpenRouter.
            model: Model name. Defaults to DEFAULT_MODEL.
            client_factory: Callable building the OpenAI-compatible client.
        """
        self.api_key = api_key
        self.base_url = base_url or DEFAULT_BASE_URL
        self.model = model or DEFAULT_MODEL
        self._client_factory = client_factory
        self._client = None

    def _get_client(self):
        if not self.api_key:
            raise MissingAPIKeyError("API key not set. Run 'tt key-set' to configure it.")
        if self._client is None:
            self._client = self._client_factory(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
            )
        return self._client

    def invoke(
        self,
        prompt: str,
        variant: PromptVariant = PromptVariant.STANDARD,
        index: int = 1,
    ) -> GeneratedMessage:
        """Generate one commit message.

        Args:
            prompt: The full prompt text, sent as a single user message.
            variant: The variant that produced the prompt.
            index: Position of this generation within the session.

        Returns:
            The GeneratedMessage.

        Raises:
            MissingAPIKeyError: If no API key is set.
            NetworkError: If the request fails.
            NoChoicesError: If the response has no choices.
            EmptyResponseError: If the model returned no text.
        """
        client = self._get_client()
        logger.debug("Requesting %s generation #%d from %s", variant.value, index, self.model)

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                extra_headers=APP_HEADERS,
            )
        except OpenAIError as e:
            raise NetworkError(f"Failed to generate commit message: {e}")

        text = extract_message(response)
        return GeneratedMessage(text=text, variant=variant, index=index)
