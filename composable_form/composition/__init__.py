"""Form composition operators."""

from composable_form.composition.operators import (
    and_then,
    append,
    combine,
    meta,
    optional,
)

__all__ = [
    "and_then",
    "append",
    "combine",
    "meta",
    "optional",
]
