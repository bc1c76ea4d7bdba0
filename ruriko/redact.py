"""Strip sensitive values from strings and mappings before they leave the process."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PLACEHOLDER = "[REDACTED]"

_SENSITIVE_WORDS = (
    "password",
    "passwd",
    "token",
    "secret",
    "key",
    "credential",
    "auth",
    "apikey",
)


def redact_string(text: str, *args: str) -> str:
    """Replace each sensitive value given in args with the placeholder.

    Values shorter than four bytes are skipped to avoid redacting common substrings.
    """
    for value in args:
        if len(value.encode("utf-8")) < 4:
            continue
        text = text.replace(value, PLACEHOLDER)
    return text


def is_sensitive_key(key: str) -> bool:
    """Whether the key name suggests that its value is a secret."""
    lower = key.lower()
    return any(word in lower for word in _SENSITIVE_WORDS)


def redact_map(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a shallow copy with non-empty string values of sensitive keys redacted."""
    return {
        key: PLACEHOLDER
        if is_sensitive_key(key) and isinstance(value, str) and value
        else value
        for key, value in mapping.items()
    }