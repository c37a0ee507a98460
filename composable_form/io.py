"""Input utilities for tooling: values records and form targets."""

import importlib
import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from composable_form.core.form import Form


class FormLoadError(Exception):
    """Raised when a form target cannot be resolved to a Form."""

    pass


def read_jsonl(path: Path | str) -> Iterator[dict[str, Any]]:
    """Yield the values records stored one per line in a JSONL file.

    Blank lines are skipped. Every other line must hold a JSON object,
    since forms read their inputs out of a mapping.

    Raises:
        ValueError: If a line is not valid JSON or not a JSON object.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
            if not isinstance(record, dict):
                raise ValueError(
                    f"Line {line_num} is a JSON {type(record).__name__}, not a values object"
                )
            yield record


def load_form(target: str) -> Form:
    """Resolve a ``"package.module:attribute"`` target to a Form.

    The attribute may be a Form or a zero-argument callable returning one.

    Raises:
        FormLoadError: If the target is malformed, cannot be imported or
            does not produce a Form.
    """
    module_name, sep, attr_name = target.partition(":")
    if not sep or not module_name or not attr_name:
        raise FormLoadError(f"Expected 'module:attribute', got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise FormLoadError(f"Cannot import module {module_name!r}: {e}") from e

    try:
        obj = getattr(module, attr_name)
    except AttributeError as e:
        raise FormLoadError(f"Module {module_name!r} has no attribute {attr_name!r}") from e

    if callable(obj) and not isinstance(obj, Form):
        obj = obj()

    if not isinstance(obj, Form):
        raise FormLoadError(f"{target!r} is a {type(obj).__name__}, not a Form")
    return obj
