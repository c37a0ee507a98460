"""The Form type and its evaluator.

A form is nothing more than a function from a values record to a
``FilledForm``. Every constructor and operator in this package builds a
new ``Form`` around such a function; nothing is evaluated until ``fill``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from composable_form.core.models import FilledForm
from composable_form.core.result import Ok


class Form:
    """Immutable, composable description of a form over a values record.

    Build forms with the constructors and operators of this package and
    evaluate them with ``fill``.
    """

    __slots__ = ("_fill",)

    def __init__(self, fill: Callable[[Any], FilledForm]) -> None:
        object.__setattr__(self, "_fill", fill)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Form is immutable")

    def fill(self, values: Any) -> FilledForm:
        """Evaluate the form against a values record."""
        return self._fill(values)


def fill(form: Form, values: Any) -> FilledForm:
    """Evaluate a form against a values record.

    Args:
        form: The form to evaluate.
        values: The complete, current values record.

    Returns:
        The ``FilledForm`` with fields in composition order, the overall
        result and whether every contributing field is empty.
    """
    return form.fill(values)


def succeed(output: Any) -> Form:
    """Build a form with no fields that always produces output."""
    return Form(lambda values: FilledForm(fields=[], result=Ok(output), is_empty=True))
