"""Constructors for single-field forms."""

from collections.abc import Callable
from typing import Any

from composable_form.core.errors import RequiredFieldIsEmpty, ValidationFailed
from composable_form.core.form import Form
from composable_form.core.models import (
    BoundUpdate,
    FieldConfig,
    FieldState,
    FilledField,
    FilledForm,
    failure,
    first_error,
)
from composable_form.core.result import Err


def field(
    is_empty: Callable[[Any], bool],
    build: Callable[[FieldState], Any],
    config: FieldConfig,
) -> Form:
    """Build a one-field form.

    Empty input fails with ``RequiredFieldIsEmpty`` without running the
    parser. Otherwise the parser's ``Err(message)`` becomes
    ``ValidationFailed(message)``.

    Args:
        is_empty: Emptiness predicate over the field's raw input.
        build: Wraps the generic ``FieldState`` into the caller's field
            representation (typically one variant of a field-kind union).
        config: Parser, accessor, updater and attributes of the field.

    Returns:
        A form whose filled result has exactly one field.
    """

    def fill_field(values: Any) -> FilledForm:
        raw = config.value(values)
        empty = is_empty(raw)

        if empty:
            result = failure(RequiredFieldIsEmpty())
        else:
            parsed = config.parser(raw)
            if isinstance(parsed, Err):
                result = failure(ValidationFailed(parsed.error))
            else:
                result = parsed

        state = FieldState(
            value=raw,
            update=BoundUpdate(config.update, values),
            attributes=config.attributes,
        )
        return FilledForm(
            fields=[(build(state), first_error(result))],
            result=result,
            is_empty=empty,
        )

    return Form(fill_field)


def custom(fill_field: Callable[[Any], FilledField]) -> Form:
    """Build a one-field form from a caller-supplied filling function.

    The returned ``FilledField`` is trusted as is: no emptiness check is
    applied and its ``result`` and ``is_empty`` pass through unchanged.
    """

    def fill(values: Any) -> FilledForm:
        filled = fill_field(values)
        return FilledForm(
            fields=[(filled.field, first_error(filled.result))],
            result=filled.result,
            is_empty=filled.is_empty,
        )

    return Form(fill)
