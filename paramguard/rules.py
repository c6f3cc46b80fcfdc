"""Built-in rule factories.

Each factory returns a ``Rule`` whose predicate runs against the already
coerced value, so numeric rules see numbers and length rules see strings or
lists.

Usage:
    FieldSpec("age", FieldType.INTEGER, rules=(min_value(0), max_value(130)))
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from .types import Rule

# Intentionally loose: one "@", no whitespace, a dot in the domain part
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def rule(name: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    """Build an ad-hoc rule from a predicate."""
    return Rule(name=name, predicate=predicate, message=message)


def min_value(minimum: float, message: str | None = None) -> Rule:
    return Rule(
        name="min_value",
        predicate=lambda v: v >= minimum,
        message=message or f"must be at least {minimum}",
    )


def max_value(maximum: float, message: str | None = None) -> Rule:
    return Rule(
        name="max_value",
        predicate=lambda v: v <= maximum,
        message=message or f"must be at most {maximum}",
    )


def between(minimum: float, maximum: float, message: str | None = None) -> Rule:
    """Inclusive range check."""
    return Rule(
        name="between",
        predicate=lambda v: minimum <= v <= maximum,
        message=message or f"must be between {minimum} and {maximum}",
    )


def min_length(length: int, message: str | None = None) -> Rule:
    return Rule(
        name="min_length",
        predicate=lambda v: len(v) >= length,
        message=message or f"must have at least {length} characters",
    )


def max_length(length: int, message: str | None = None) -> Rule:
    return Rule(
        name="max_length",
        predicate=lambda v: len(v) <= length,
        message=message or f"must have at most {length} characters",
    )


def one_of(allowed: Iterable[Any], message: str | None = None) -> Rule:
    """Restrict the value to a fixed set of choices."""
    choices = tuple(allowed)
    return Rule(
        name="one_of",
        predicate=lambda v: v in choices,
        message=message or f"must be one of: {', '.join(str(c) for c in choices)}",
    )


def matches(pattern: str | re.Pattern[str], message: str | None = None) -> Rule:
    """Require the whole string to match a regular expression."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Rule(
        name="matches",
        predicate=lambda v: compiled.fullmatch(v) is not None,
        message=message or "has an invalid format",
    )


def email(message: str | None = None) -> Rule:
    return Rule(
        name="email",
        predicate=lambda v: _EMAIL_RE.match(v) is not None,
        message=message or "must be a valid email address",
    )
