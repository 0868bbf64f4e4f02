"""Commit workflow module for tt.

This package contains the refinement workflow:
- state: LoopState, Action, events, effects, next_state
- session: RefinementSession
- loop: Terminal, RefinementLoop, LoopOutcome
- executor: CommitExecutor, CommitResult
- aic: run_ai_commit
"""

from tt.workflow.state import (
    Action,
    CommitDone,
    CommitFailed,
    Discard,
    ExecuteCommit,
    GenerationFailed,
    InvalidTransitionError,
    LoopState,
    Regenerate,
    Regenerated,
    Selected,
    Transition,
    next_state,
)
from tt.workflow.session import RefinementSession
from tt.workflow.executor import CommitExecutor, CommitResult
from tt.workflow.loop import LoopOutcome, RefinementLoop, Terminal, run_directly
from tt.workflow.aic import run_ai_commit


__all__ = [
    # State machine
    "Action",
    "CommitDone",
    "CommitFailed",
    "Discard",
    "ExecuteCommit",
    "GenerationFailed",
    "InvalidTransitionError",
    "LoopState",
    "Regenerate",
    "Regenerated",
    "Selected",
    "Transition",
    "next_state",
    # Session and driver
    "RefinementSession",
    "RefinementLoop",
    "LoopOutcome",
    "Terminal",
    "run_directly",
    # Side effects
    "CommitExecutor",
    "CommitResult",
    # Entry point
    "run_ai_commit",
]
