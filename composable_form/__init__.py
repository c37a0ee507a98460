"""composable-form: Composable, typed form values with field-level validation."""

__version__ = "0.1.0"

# These imports must come after __version__ so the CLI can import it
from composable_form.builders import custom, field
from composable_form.composition import and_then, append, combine, meta, optional
from composable_form.core import (
    Err,
    Error,
    ErrorList,
    FieldConfig,
    FieldState,
    FilledField,
    FilledForm,
    Form,
    Ok,
    RequiredFieldIsEmpty,
    Result,
    ValidationFailed,
    describe_error,
    fill,
    succeed,
)
from composable_form.mapping import map_field, map_output, map_values

__all__ = [
    "__version__",
    # Form and evaluation
    "Form",
    "fill",
    "succeed",
    # Constructors
    "custom",
    "field",
    # Composition
    "and_then",
    "append",
    "combine",
    "meta",
    "optional",
    # Mapping
    "map_field",
    "map_output",
    "map_values",
    # Records
    "FieldConfig",
    "FieldState",
    "FilledField",
    "FilledForm",
    # Results and errors
    "Ok",
    "Err",
    "Result",
    "Error",
    "ErrorList",
    "RequiredFieldIsEmpty",
    "ValidationFailed",
    "describe_error",
]
