"""Tests for the commit message generator."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from openai import OpenAIError

from tt.config import APP_HEADERS, DEFAULT_BASE_URL, DEFAULT_MODEL
from tt.errors import ErrorKind
from tt.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
    NetworkError,
    NoChoicesError,
)
from tt.llm.generator import CommitMessageGenerator, GeneratedMessage, extract_message
from tt.llm.prompts import PromptVariant


@pytest.fixture
def client_factory():
    """A client factory returning a MagicMock client."""
    client = MagicMock()
    factory = MagicMock(return_value=client)
    factory.client = client
    return factory


class TestExtractMessage:
    """Tests for extract_message function."""

    def test_strips_whitespace(self, completion):
        """Test surrounding whitespace is removed."""
        assert extract_message(completion(" fix: bug \n")) == "fix: bug"

    def test_keeps_inner_newlines(self, completion):
        """Test multi-line messages keep their body."""
        text = extract_message(completion("feat: add x\n\nLonger body.\n"))

        assert text == "feat: add x\n\nLonger body."

    def test_no_choices(self):
        """Test an empty choice list raises NoChoicesError."""
        with pytest.raises(NoChoicesError) as exc_info:
            extract_message(SimpleNamespace(choices=[]))

        assert "No response from AI model" in str(exc_info.value)

    @pytest.mark.parametrize("content", [None, "", "  \n "])
    def test_empty_content(self, completion, content):
        """Test blank content raises EmptyResponseError."""
        with pytest.raises(EmptyResponseError):
            extract_message(completion(content))


class TestCommitMessageGenerator:
    """Tests for CommitMessageGenerator class."""

    def test_defaults(self):
        """Test default endpoint and model."""
        generator = CommitMessageGenerator(api_key="sk-test-key")

        assert generator.base_url == DEFAULT_BASE_URL
        assert generator.model == DEFAULT_MODEL

    def test_invoke_success(self, client_factory, completion):
        """Test a successful generation."""
        client_factory.client.chat.completions.create.return_value = completion(" fix: bug \n")
        generator = CommitMessageGenerator(
            api_key="sk-test-key", model="some/model", client_factory=client_factory
        )

        result = generator.invoke("PROMPT", variant=PromptVariant.DETAILED, index=3)

        assert result == GeneratedMessage(text="fix: bug", variant=PromptVariant.DETAILED, index=3)

    def test_request_shape(self, client_factory, completion):
        """Test a single user message with the app headers is sent."""
        client_factory.client.chat.completions.create.return_value = completion("fix: bug")
        generator = CommitMessageGenerator(
            api_key="sk-test-key", model="some/model", client_factory=client_factory
        )

        generator.invoke("PROMPT")

        kwargs = client_factory.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "some/model"
        assert kwargs["messages"] == [{"role": "user", "content": "PROMPT"}]
        assert kwargs["extra_headers"] == APP_HEADERS

    def test_client_built_once_without_retries(self, client_factory, completion):
        """Test the client is created lazily, once, with retries disabled."""
        client_factory.client.chat.completions.create.return_value = completion("fix: bug")
        generator = CommitMessageGenerator(
            api_key="sk-test-key",
            base_url="https://example.test/v1",
            client_factory=client_factory,
        )

        client_factory.assert_not_called()
        generator.invoke("A")
        generator.invoke("B", index=2)

        client_factory.assert_called_once_with(
            api_key="sk-test-key",
            base_url="https://example.test/v1",
            max_retries=0,
        )

    def test_missing_api_key(self, client_factory):
        """Test MissingAPIKeyError before any request."""
        generator = CommitMessageGenerator(api_key="", client_factory=client_factory)

        with pytest.raises(MissingAPIKeyError) as exc_info:
            generator.invoke("PROMPT")

        assert exc_info.value.kind == ErrorKind.PRECONDITION
        client_factory.assert_not_called()

    def test_request_failure(self, client_factory):
        """Test client errors become NetworkError."""
        client_factory.client.chat.completions.create.side_effect = OpenAIError("boom")
        generator = CommitMessageGenerator(api_key="sk-test-key", client_factory=client_factory)

        with pytest.raises(NetworkError) as exc_info:
            generator.invoke("PROMPT")

        assert "Failed to generate commit message" in str(exc_info.value)
        assert "boom" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.GENERATION

    def test_no_choices(self, client_factory):
        """Test an empty response surfaces NoChoicesError."""
        client_factory.client.chat.completions.create.return_value = SimpleNamespace(choices=[])
        generator = CommitMessageGenerator(api_key="sk-test-key", client_factory=client_factory)

        with pytest.raises(NoChoicesError):
            generator.invoke("PROMPT")

    def test_errors_share_base(self):
        """Test all generation errors derive from LLMError."""
        for error in (MissingAPIKeyError, NetworkError, NoChoicesError, EmptyResponseError):
            assert issubclass(error, LLMError)
