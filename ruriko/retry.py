"""Exponential-backoff retry for transient failures."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_MAX_ATTEMPTS = 3
_DEFAULT_INITIAL_DELAY = 0.5
_DEFAULT_MAX_DELAY = 10.0


@dataclass
class RetryConfig:
    """Retry behaviour; delays are in seconds.

    A non-positive max_attempts means a single attempt; non-positive delays fall
    back to the defaults. When should_retry is None every failure is retried.
    """

    max_attempts: int = _DEFAULT_MAX_ATTEMPTS
    initial_delay: float = _DEFAULT_INITIAL_DELAY
    max_delay: float = _DEFAULT_MAX_DELAY
    should_retry: Callable[[Exception], bool] | None = None


class RetryCancelledError(Exception):
    """Retrying stopped because cancellation was requested."""

    def __init__(self, last_error: Exception | None) -> None:
        super().__init__("retry cancelled" + (f": {last_error}" if last_error else ""))
        self.last_error = last_error


def call_with_retry(
    fn: Callable[[], T],
    config: RetryConfig | None = None,
    cancel: threading.Event | None = None,
) -> T:
    """Call fn until it returns, backing off exponentially between failures.

    The last failure is re-raised once attempts run out or should_retry declines it.
    Setting cancel stops the loop with RetryCancelledError.
    """
    config = config or RetryConfig()
    max_attempts = max(config.max_attempts, 1)
    delay = config.initial_delay if config.initial_delay > 0 else _DEFAULT_INITIAL_DELAY
    max_delay = config.max_delay if config.max_delay > 0 else _DEFAULT_MAX_DELAY
    should_retry = config.should_retry or (lambda _exc: True)

    last_error: Exception | None = None
    for attempt in range(1, max_attempts + 1):
        if cancel is not None and cancel.is_set():
            raise RetryCancelledError(last_error) from last_error
        try:
            return fn()
        except Exception as exc:
            last_error = exc
            if not should_retry(exc) or attempt == max_attempts:
                raise

        log.debug(
            "retry: attempt %d/%d failed, retrying in %.3fs: %s",
            attempt, max_attempts, delay, last_error,
        )
        if cancel is None:
            time.sleep(delay)
        elif cancel.wait(delay):
            raise RetryCancelledError(last_error) from last_error
        delay = min(delay * 2, max_delay)

    raise AssertionError("unreachable")