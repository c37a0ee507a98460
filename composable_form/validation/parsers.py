"""Stock parsers and emptiness predicates for field configs.

A parser takes a field's raw input and returns ``Ok(output)`` or
``Err(message)``::

    def parser(value: str) -> Ok | Err:
        ...

Parameterized parsers are factories returning such a function. Any
callable with this shape works as ``FieldConfig.parser``.
"""

import re
from collections.abc import Callable
from typing import Any

from composable_form.core.result import Err, Ok, Result

# Type alias for a parser function
Parser = Callable[[Any], Result]


# ---------------------------------------------------------------------------
# Emptiness
# ---------------------------------------------------------------------------


def is_blank(value: str | None) -> bool:
    """Text input is empty or whitespace only."""
    return not value or not value.strip()


def is_none(value: Any) -> bool:
    """Input is missing altogether (e.g. no option selected)."""
    return value is None


# ---------------------------------------------------------------------------
# Identity and conversion
# ---------------------------------------------------------------------------


def accept(value: Any) -> Result:
    """Accept the input unchanged."""
    return Ok(value)


def to_int(value: str) -> Result:
    """Input must be a whole number."""
    try:
        return Ok(int(value))
    except (ValueError, TypeError):
        return Err("Must be a whole number")


def to_float(value: str) -> Result:
    """Input must be a number (int or float)."""
    try:
        return Ok(float(value))
    except (ValueError, TypeError):
        return Err("Must be a number")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int) -> Parser:
    """String must be at least *n* characters."""

    def check(value: str) -> Result:
        if len(value) < n:
            return Err(f"Must be at least {n} characters")
        return Ok(value)

    return check


def max_length(n: int) -> Parser:
    """String must be at most *n* characters."""

    def check(value: str) -> Result:
        if len(value) > n:
            return Err(f"Must be at most {n} characters")
        return Ok(value)

    return check


# ---------------------------------------------------------------------------
# Format and choice
# ---------------------------------------------------------------------------

# Basic email pattern, checks structure only
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def email(value: str) -> Result:
    """Input must look like an email address."""
    if not _EMAIL_RE.match(value):
        return Err("Must be a valid email address")
    return Ok(value)


def matches(pattern: str, message: str | None = None) -> Parser:
    """Input must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: str) -> Result:
        if not compiled.match(value):
            return Err(message or f"Must match pattern: {pattern}")
        return Ok(value)

    return check


def one_of(*choices: str) -> Parser:
    """Input must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: str) -> Result:
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return Err(f"Must be one of: {options}")
        return Ok(value)

    return check


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def chain(*parsers: Parser) -> Parser:
    """Run parsers in order, feeding each the previous output.

    The first failure is returned as is.
    """

    def run(value: Any) -> Result:
        result: Result = Ok(value)
        for parser in parsers:
            result = parser(result.value)
            if isinstance(result, Err):
                return result
        return result

    return run
