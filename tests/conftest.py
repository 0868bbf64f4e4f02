"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

from tt.git.context import ProjectContext
from tt.git.diff import DiffPayload, DiffScope
from tt.llm.generator import GeneratedMessage
from tt.llm.prompts import PromptVariant
from tt.workflow.executor import CommitResult
from tt.workflow.loop import Terminal
from tt.workflow.session import RefinementSession


SAMPLE_DIFF = """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


class FakeGenerator:
    """Generator returning scripted replies and recording prompts."""

    def __init__(self, replies=None, error=None):
        self.replies = list(replies or [])
        self.error = error
        self.calls = []

    def invoke(self, prompt, variant=PromptVariant.STANDARD, index=1):
        self.calls.append({"prompt": prompt, "variant": variant, "index": index})
        if self.error is not None:
            raise self.error
        text = self.replies.pop(0) if self.replies else f"chore: message {index}"
        return GeneratedMessage(text=text.strip(), variant=variant, index=index)


class FakeTerminal(Terminal):
    """Terminal that replays scripted actions and feedback."""

    def __init__(self, actions=None, feedback=None):
        self.actions = list(actions or [])
        self.feedback = list(feedback or [])
        self.shown = []

    def show_message(self, message):
        self.shown.append(message)

    def choose_action(self):
        return self.actions.pop(0)

    def ask_feedback(self):
        return self.feedback.pop(0) if self.feedback else None


class FakeExecutor:
    """Executor that records what it was asked to commit."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def execute(self, message, options):
        self.calls.append((message, options))
        if self.error is not None:
            raise self.error
        return CommitResult(committed=True, staged=options.add_first, output="[main abc123] " + message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Sample unified diff text."""
    return SAMPLE_DIFF


@pytest.fixture
def diff_payload():
    """A staged DiffPayload over the sample diff."""
    return DiffPayload(text=SAMPLE_DIFF, scope=DiffScope.STAGED, files=["app.py"])


@pytest.fixture
def project_context():
    """A single-ecosystem project context."""
    return ProjectContext(labels=("Python project",))


@pytest.fixture
def first_message():
    """The first generated message of a session."""
    return GeneratedMessage(text="feat: add helper", variant=PromptVariant.STANDARD, index=1)


@pytest.fixture
def session(diff_payload, project_context, first_message):
    """A fresh refinement session."""
    return RefinementSession(
        diff=diff_payload,
        context=project_context,
        current=first_message,
        changed_files=["app.py"],
    )


@pytest.fixture
def make_generator():
    """Factory for FakeGenerator instances."""
    return FakeGenerator


@pytest.fixture
def make_terminal():
    """Factory for FakeTerminal instances."""
    return FakeTerminal


@pytest.fixture
def make_executor():
    """Factory for FakeExecutor instances."""
    return FakeExecutor


@pytest.fixture
def completion():
    """Factory for fake chat completion responses."""
    return make_completion
