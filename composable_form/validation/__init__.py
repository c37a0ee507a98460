"""Reusable parsers and emptiness predicates.

Usage::

    from composable_form import FieldConfig
    from composable_form.validation import chain, is_blank, min_length, to_int

    age = FieldConfig(
        parser=chain(min_length(1), to_int),
        value=lambda values: values["age"],
        update=lambda new, values: {**values, "age": new},
    )
"""

from composable_form.validation.parsers import (
    Parser,
    accept,
    chain,
    email,
    is_blank,
    is_none,
    matches,
    max_length,
    min_length,
    one_of,
    to_float,
    to_int,
)

__all__ = [
    "Parser",
    "accept",
    "chain",
    "email",
    "is_blank",
    "is_none",
    "matches",
    "max_length",
    "min_length",
    "one_of",
    "to_float",
    "to_int",
]
