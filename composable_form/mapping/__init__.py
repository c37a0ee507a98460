"""Mapping operators for forms."""

from composable_form.mapping.mapper import map_field, map_output, map_values

__all__ = ["map_field", "map_output", "map_values"]
