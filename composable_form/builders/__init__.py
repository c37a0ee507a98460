"""Single-field form constructors."""

from composable_form.builders.field import custom, field

__all__ = ["custom", "field"]
