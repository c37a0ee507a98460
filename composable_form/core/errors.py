"""Error kinds reported by forms and the non-empty error list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class RequiredFieldIsEmpty(BaseModel):
    """A required field has no input; its parser was never run."""

    kind: Literal["required_field_is_empty"] = "required_field_is_empty"

    model_config = ConfigDict(frozen=True)


class ValidationFailed(BaseModel):
    """A parser rejected non-empty input."""

    kind: Literal["validation_failed"] = "validation_failed"
    message: str

    model_config = ConfigDict(frozen=True)

    def __init__(self, message: str, **data) -> None:
        super().__init__(message=message, **data)


Error = Annotated[
    Union[RequiredFieldIsEmpty, ValidationFailed],
    Field(discriminator="kind"),
]


class ErrorList(BaseModel):
    """Non-empty, ordered list of errors.

    ``first`` is always present and has display priority; ``rest`` holds
    the remaining errors in composition order.
    """

    first: Error
    rest: tuple[Error, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, error: RequiredFieldIsEmpty | ValidationFailed) -> ErrorList:
        """Build a single-error list."""
        return cls(first=error)

    @classmethod
    def from_list(
        cls, errors: Iterable[RequiredFieldIsEmpty | ValidationFailed]
    ) -> ErrorList:
        """Build an error list from a sequence.

        Raises:
            ValueError: If the sequence is empty.
        """
        errors = list(errors)
        if not errors:
            raise ValueError("An ErrorList needs at least one error")
        return cls(first=errors[0], rest=tuple(errors[1:]))

    def concat(self, other: ErrorList) -> ErrorList:
        """Append other's errors after this list's errors."""
        return ErrorList(
            first=self.first,
            rest=self.rest + (other.first,) + other.rest,
        )

    def to_list(self) -> list[RequiredFieldIsEmpty | ValidationFailed]:
        return [self.first, *self.rest]

    def __len__(self) -> int:
        return 1 + len(self.rest)


def describe_error(error: RequiredFieldIsEmpty | ValidationFailed) -> str:
    """Return a kind-level label for an error.

    The label is not meant for end users; turning error kinds into
    localized text belongs to the rendering layer.
    """
    if isinstance(error, ValidationFailed):
        return f"ValidationFailed: {error.message}"
    return "RequiredFieldIsEmpty"
