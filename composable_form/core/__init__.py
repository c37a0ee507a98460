"""Core types: results, errors, records and the Form itself."""

from composable_form.core.errors import (
    Error,
    ErrorList,
    RequiredFieldIsEmpty,
    ValidationFailed,
    describe_error,
)
from composable_form.core.form import Form, fill, succeed
from composable_form.core.models import FieldConfig, FieldState, FilledField, FilledForm
from composable_form.core.result import Err, Ok, Result

__all__ = [
    # Results
    "Ok",
    "Err",
    "Result",
    # Errors
    "Error",
    "ErrorList",
    "RequiredFieldIsEmpty",
    "ValidationFailed",
    "describe_error",
    # Records
    "FieldConfig",
    "FieldState",
    "FilledField",
    "FilledForm",
    # Form
    "Form",
    "fill",
    "succeed",
]
