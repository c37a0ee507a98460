"""Operators that adapt a form's output, values or field type."""

from collections.abc import Callable
from typing import Any

from composable_form.core.form import Form
from composable_form.core.models import FilledForm


def map_output(fn: Callable[[Any], Any], form: Form) -> Form:
    """Transform a form's successful output.

    Fields, errors and emptiness are left untouched.
    """

    def fill(values: Any) -> FilledForm:
        filled = form.fill(values)
        return filled.model_copy(update={"result": filled.result.map(fn)})

    return Form(fill)


def map_values(fn: Callable[[Any], Any], form: Form) -> Form:
    """Adapt a form over one values type to another.

    Args:
        fn: Projects the new values type onto the one form expects.
        form: The form to adapt.
    """
    return Form(lambda values: form.fill(fn(values)))


def map_field(fn: Callable[[Any], Any], form: Form) -> Form:
    """Transform every field representation of a form.

    Used to bring forms built from different field catalogs to one
    field type before composing them.
    """

    def fill(values: Any) -> FilledForm:
        filled = form.fill(values)
        return filled.model_copy(
            update={"fields": [(fn(field), error) for field, error in filled.fields]}
        )

    return Form(fill)
