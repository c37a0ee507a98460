"""Records produced and consumed by forms.

``FieldState`` and ``FieldConfig`` describe a single field's inputs,
``FilledField`` is what custom fields return, and ``FilledForm`` is the
outcome of filling any form against a values record.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from composable_form.core.errors import Error, ErrorList, describe_error
from composable_form.core.result import Err, Ok, Result


class BoundUpdate:
    """An updater bound to the values record it was filled with.

    Two bound updaters are equal when they wrap the same update function
    and equal values, so filling a form twice with equal values yields
    equal filled forms.
    """

    __slots__ = ("update", "values")

    def __init__(self, update: Callable[[Any, Any], Any], values: Any) -> None:
        self.update = update
        self.values = values

    def __call__(self, new_input: Any) -> Any:
        return self.update(new_input, self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundUpdate):
            return NotImplemented
        return self.update is other.update and self.values == other.values

    def __hash__(self) -> int:
        # values may be an unhashable record; equal updaters share update
        return hash(id(self.update))

    def __repr__(self) -> str:
        return f"BoundUpdate({self.update!r})"


class FieldState(BaseModel):
    """Current state of one field, handed to the field-kind constructor.

    Attributes:
        value: The raw input read from the values record.
        update: Takes a new raw input and returns the updated values record.
        attributes: Static, render-relevant attributes of the field.
    """

    value: Any
    update: Callable[[Any], Any]
    attributes: Any = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class FieldConfig(BaseModel):
    """Configuration of a single field.

    Attributes:
        parser: Turns raw input into ``Ok(output)`` or ``Err(message)``.
        value: Reads the raw input out of a values record.
        update: Called as ``update(new_input, values)``; returns new values.
        attributes: Static attributes, opaque to the form engine.
    """

    parser: Callable[[Any], Result]
    value: Callable[[Any], Any]
    update: Callable[[Any, Any], Any]
    attributes: Any = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class FilledField(BaseModel):
    """A single field evaluated by a custom filling function."""

    field: Any
    result: Result
    is_empty: bool

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class FilledForm(BaseModel):
    """A form evaluated against a values record.

    ``fields`` lists every rendered field with the error it should
    display, in composition order. ``result`` is ``Ok(output)`` when the
    whole form is valid, otherwise ``Err(ErrorList)``.
    """

    fields: list[tuple[Any, Optional[Error]]]
    result: Result
    is_empty: bool

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_valid(self) -> bool:
        """Whether a final output is available."""
        return self.result.is_ok()

    def errors(self) -> list[Error]:
        """All accumulated errors, empty when the form is valid."""
        if isinstance(self.result, Err):
            return self.result.error.to_list()
        return []

    def to_dict(self, field_formatter: Callable[[Any], Any] = repr) -> dict:
        """Convert to a JSON-ready dictionary.

        Args:
            field_formatter: Turns each field representation into something
                serializable. Defaults to ``repr``.
        """
        fields = [
            {
                "field": field_formatter(field),
                "error": error.model_dump() if error is not None else None,
            }
            for field, error in self.fields
        ]
        result: dict = {"ok": isinstance(self.result, Ok)}
        if isinstance(self.result, Ok):
            result["value"] = self.result.value
        else:
            result["errors"] = [describe_error(e) for e in self.result.error.to_list()]
        return {"fields": fields, "result": result, "is_empty": self.is_empty}


def first_error(result: Result) -> Optional[Error]:
    """Return the error a field should display for a result."""
    if isinstance(result, Err):
        return result.error.first
    return None


def failure(error: Error) -> Err:
    """Wrap a single error as a form failure."""
    return Err(ErrorList.of(error))
