"""Helpers for reading configuration from environment variables."""

from __future__ import annotations

import os
import re
from datetime import timedelta

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(1 << 63), (1 << 63) - 1

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]+)")


class MissingVariableError(LookupError):
    """A required environment variable is unset or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f'required environment variable "{name}" is not set')
        self.name = name


def lookup(name: str) -> str | None:
    """Return the variable's value (possibly empty), or None when it is unset."""
    return os.environ.get(name)


def string_or(name: str, default: str) -> str:
    """Return the variable's value, or default when it is unset or empty."""
    return os.environ.get(name) or default


def required_string(name: str) -> str:
    """Return the variable's value, raising MissingVariableError when unset or empty."""
    value = os.environ.get(name, "")
    if not value:
        raise MissingVariableError(name)
    return value


def parse_bool(text: str) -> bool:
    """Parse 1/t/true/0/f/false in their accepted spellings."""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def bool_or(name: str, default: bool) -> bool:
    """Parse the variable as a boolean, falling back to default."""
    value = os.environ.get(name, "")
    if not value:
        return default
    try:
        return parse_bool(value)
    except ValueError:
        return default


def int_or(name: str, default: int) -> int:
    """Parse the variable as a signed decimal 64-bit integer, falling back to default."""
    value = os.environ.get(name, "")
    if not _INT_RE.fullmatch(value):
        return default
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        return default
    return number


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "30s", "1h30m" or "-1.5ms"."""
    body = text
    negative = False
    if body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration: {text!r}")

    total_ns = 0
    pos = 0
    while pos < len(body):
        match = _COMPONENT_RE.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        whole, fraction, unit = match.groups()
        fraction = fraction or ""
        if not whole and not fraction:
            raise ValueError(f"invalid duration: {text!r}")
        if unit not in _UNIT_NS:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")
        scale = _UNIT_NS[unit]
        total_ns += int(whole or "0") * scale
        if fraction:
            total_ns += int(fraction) * scale // 10 ** len(fraction)
        pos = match.end()

    limit = (1 << 63) if negative else (1 << 63) - 1
    if total_ns > limit:
        raise ValueError(f"invalid duration: {text!r}")
    micros = total_ns // 1000
    return timedelta(microseconds=-micros if negative else micros)


def duration_or(name: str, default: timedelta) -> timedelta:
    """Parse the variable as a duration, falling back to default."""
    value = os.environ.get(name, "")
    if not value:
        return default
    try:
        return parse_duration(value)
    except ValueError:
        return default


def string_list_or(name: str, default: list[str] | None) -> list[str] | None:
    """Split the variable on commas, trimming items and dropping empty ones."""
    value = os.environ.get(name, "")
    items = [part.strip() for part in value.split(",") if part.strip()]
    return items or default