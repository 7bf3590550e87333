# src/logging/context.py - v1
"""Contextual logging support: attach run_id, pass index and phase to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per louvain() run, updated at every pass and phase.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_pass_index: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "pass_index", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    pass_index: int | None = None
    phase: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        pass_index=_pass_index.get(),
        phase=_phase.get(),
    )


def set_run_context(run_id: str) -> None:
    """Set run-level context (called once per louvain run)."""
    _run_id.set(run_id)
    _pass_index.set(None)
    _phase.set(None)


def set_pass_context(pass_index: int, phase: str | None = None) -> None:
    """Set pass-level context (called per pass and phase)."""
    _pass_index.set(pass_index)
    _phase.set(phase)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _pass_index.set(None)
    _phase.set(None)
