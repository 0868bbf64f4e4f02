"""AI commit workflow.

Runs the full sequence: precondition check, diff collection, context
probing, first generation, refinement, and commit.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from tt.config import CommitOptions, Settings
from tt.git.context import probe_project_context
from tt.git.diff import get_changed_files, get_diff
from tt.git.exceptions import GitError
from tt.llm.exceptions import MissingAPIKeyError
from tt.llm.generator import CommitMessageGenerator
from tt.llm.prompts import PromptVariant, build_prompt
from tt.workflow.executor import CommitExecutor
from tt.workflow.loop import LoopOutcome, RefinementLoop, Terminal, run_directly
from tt.workflow.session import RefinementSession

logger = logging.getLogger(__name__)


def _collect_changed_files(cwd: Optional[Path]) -> list[str]:
    """Get changed file names; failures only lose this bit of context."""
    try:
        return get_changed_files(cwd=cwd)
    except GitError as e:
        logger.warning("Couldn't get changed files: %s", e)
        return []


def run_ai_commit(
    settings: Settings,
    options: CommitOptions,
    terminal: Terminal,
    *,
    cwd: Optional[Path] = None,
    generator_factory: Callable[..., CommitMessageGenerator] = CommitMessageGenerator,
    executor: Optional[CommitExecutor] = None,
    progress: Callable[[str, Callable[[], Any]], Any] = run_directly,
    on_model: Optional[Callable[[str], None]] = None,
) -> LoopOutcome:
    """Generate a commit message, let the user refine it, and commit.

    Args:
        settings: Loaded settings (api_key, base_url, default_model).
        options: Per-run options built from CLI flags.
        terminal: Interactive collaborator for menus and messages.
        cwd: Repository directory (defaults to the current directory).
        generator_factory: Builds the CommitMessageGenerator.
        executor: CommitExecutor to use (defaults to one bound to cwd).
        progress: Hook wrapping each blocking step, e.g. a spinner.
        on_model: Called with the model name before generating.

    Returns:
        The LoopOutcome of the session.

    Raises:
        MissingAPIKeyError: If no API key is configured.
        ToolUnavailableError, NoRepositoryError, NoChangesError: From diff collection.
        LLMError: If a generation fails.
        SideEffectError: If staging, committing or pushing fails.
    """
    if not settings.api_key:
        raise MissingAPIKeyError("API key not set. Run 'tt key-set' to configure it.")

    diff = progress("Analyzing changes...", lambda: get_diff(cwd=cwd))
    logger.debug("Using %s diff (%d chars, %d files)", diff.scope.value, len(diff.text), len(diff.files))

    changed_files = _collect_changed_files(cwd)
    context = probe_project_context(cwd)

    model = options.resolve_model(settings)
    if on_model is not None:
        on_model(model)

    generator = generator_factory(api_key=settings.api_key, base_url=settings.base_url, model=model)
    prompt = build_prompt(PromptVariant.STANDARD, diff.text, context=context, changed_files=changed_files)
    first = progress(
        "Generating commit message...",
        lambda: generator.invoke(prompt, variant=PromptVariant.STANDARD, index=1),
    )

    session = RefinementSession(
        diff=diff,
        context=context,
        current=first,
        changed_files=changed_files,
    )
    terminal.show_message(first)

    loop = RefinementLoop(
        session=session,
        generator=generator,
        terminal=terminal,
        executor=executor or CommitExecutor(cwd=cwd),
        options=options,
        progress=progress,
    )

    if options.auto_commit:
        return loop.finalize()
    return loop.run()
