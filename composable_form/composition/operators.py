"""Operators that combine forms.

``append`` and ``combine`` evaluate every side and accumulate errors so
that all invalid fields are reported at once. ``and_then`` short-circuits:
the dependent form is not even built until its antecedent is valid.
"""

from collections.abc import Callable
from typing import Any

from composable_form.core.errors import ErrorList
from composable_form.core.form import Form
from composable_form.core.models import FilledForm
from composable_form.core.result import Err, Ok, Result


def _apply(fn_result: Result, arg_result: Result) -> Result:
    """Combine two results, accumulating errors left to right."""
    if isinstance(fn_result, Ok) and isinstance(arg_result, Ok):
        return Ok(fn_result.value(arg_result.value))
    if isinstance(fn_result, Err) and isinstance(arg_result, Err):
        return Err(fn_result.error.concat(arg_result.error))
    if isinstance(fn_result, Err):
        return fn_result
    return arg_result


def append(form: Form, accumulator: Form) -> Form:
    """Append form to an accumulator producing a one-argument function.

    Both forms are always filled against the same values. The
    accumulator's fields come first, and so do its errors.

    Args:
        form: The form whose output feeds the function.
        accumulator: A form producing a function of form's output.

    Returns:
        A form producing the function's return value.
    """

    def fill(values: Any) -> FilledForm:
        filled_acc = accumulator.fill(values)
        filled_new = form.fill(values)
        return FilledForm(
            fields=filled_acc.fields + filled_new.fields,
            result=_apply(filled_acc.result, filled_new.result),
            is_empty=filled_acc.is_empty and filled_new.is_empty,
        )

    return Form(fill)


def combine(fn: Callable[..., Any], *forms: Form) -> Form:
    """Accumulate any number of forms and pass their outputs to fn.

    Same outcome as appending each form in turn to ``succeed`` of a curried
    fn: fields and errors keep the left-to-right order of forms. The forms
    are filled in a flat loop, so any number of them can be combined.

    Example::

        signup = combine(SignUp, email_field, password_field)
    """
    forms = tuple(forms)

    def fill(values: Any) -> FilledForm:
        fields: list = []
        outputs: list = []
        errors: ErrorList | None = None
        is_empty = True

        for form in forms:
            filled = form.fill(values)
            fields.extend(filled.fields)
            is_empty = is_empty and filled.is_empty
            if isinstance(filled.result, Err):
                errors = filled.result.error if errors is None else errors.concat(filled.result.error)
            else:
                outputs.append(filled.result.value)

        if errors is not None:
            return FilledForm(fields=fields, result=Err(errors), is_empty=is_empty)
        return FilledForm(fields=fields, result=Ok(fn(*outputs)), is_empty=is_empty)

    return Form(fill)


def and_then(fn: Callable[[Any], Form], antecedent: Form) -> Form:
    """Use the antecedent's output to choose the next form.

    While the antecedent is invalid, fn is never called and the dependent
    form contributes no fields: dependent inputs stay hidden until the
    inputs they depend on are valid.
    """

    def fill(values: Any) -> FilledForm:
        filled = antecedent.fill(values)
        if isinstance(filled.result, Err):
            return filled

        dependent = fn(filled.result.value).fill(values)
        return FilledForm(
            fields=filled.fields + dependent.fields,
            result=dependent.result,
            is_empty=filled.is_empty and dependent.is_empty,
        )

    return Form(fill)


def optional(form: Form) -> Form:
    """Make a form optional.

    A valid form produces its output unchanged. An invalid but completely
    empty form succeeds with ``None`` and all its field errors are
    cleared. An invalid form with some input keeps its errors.
    """

    def fill(values: Any) -> FilledForm:
        filled = form.fill(values)
        if isinstance(filled.result, Ok) or not filled.is_empty:
            return filled
        return FilledForm(
            fields=[(field, None) for field, _ in filled.fields],
            result=Ok(None),
            is_empty=True,
        )

    return Form(fill)


def meta(fn: Callable[[Any], Form]) -> Form:
    """Build a form chosen from the current values.

    fn is called once per fill and the form it returns is filled with the
    same values.
    """
    return Form(lambda values: fn(values).fill(values))
