"""
Shared utility functions for the Conditions package.

These are pure-Python helpers with no infrastructure dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

# ---------------------------------------------------------------------------
# Strict numeric parsing
# ---------------------------------------------------------------------------

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def parse_strict_int(text: str) -> int | None:
    """
    Parse *text* as an integer, consuming the whole string.

    Returns ``None`` instead of truncating a numeric prefix, so
    ``"12abc"`` and ``" 12"`` are both rejected, as is a digit string
    longer than the interpreter's integer conversion limit.
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_strict_float(text: str) -> float | None:
    """
    Parse *text* as a finite decimal number, consuming the whole string.

    ``"nan"``, ``"inf"``, ``"1_000"`` and ``".5"`` are rejected.
    """
    if _DECIMAL_RE.fullmatch(text) is None:
        return None
    result = float(text)
    if result in (float("inf"), float("-inf")):
        return None
    return result


# ---------------------------------------------------------------------------
# LIKE patterns
# ---------------------------------------------------------------------------

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so *text* matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: Any) -> str:
    """Wrap *value* as a ``%...%`` substring pattern."""
    return f"%{escape_like(str(value))}%"


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


def to_strings(keys: str | Iterable[Any]) -> tuple[str, ...]:
    """
    Normalise one key or an iterable of keys to a tuple of strings.

    Order is preserved and duplicates are dropped.
    """
    if isinstance(keys, str):
        return (keys,)
    return tuple(dict.fromkeys(str(k) for k in keys))
