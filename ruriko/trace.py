"""Trace ID generation and propagation for request correlation."""

from __future__ import annotations

import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_trace_id: ContextVar[str] = ContextVar("trace_id", default="")


def generate_id() -> str:
    """Return a fresh random trace ID of the form "t_" followed by 32 hex digits."""
    return "t_" + secrets.token_hex(16)


@contextmanager
def trace_context(trace_id: str) -> Iterator[str]:
    """Make trace_id the current trace ID for the duration of the block."""
    token = _trace_id.set(trace_id)
    try:
        yield trace_id
    finally:
        _trace_id.reset(token)


def current_trace_id() -> str:
    """Return the current trace ID, or an empty string when none is set."""
    return _trace_id.get()