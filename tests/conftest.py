"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from composable_form import Form, append, succeed
from composable_form.validation import min_length

from sample_forms import text_field


@pytest.fixture
def name_form() -> Form:
    """A required text field for values["name"], at least 3 characters."""
    return text_field("name", min_length(3))


@pytest.fixture
def pair_form() -> Form:
    """Two required text fields accumulated into a tuple."""
    accumulator = succeed(lambda first: lambda last: (first, last))
    accumulator = append(text_field("first", min_length(3)), accumulator)
    return append(text_field("last", min_length(3)), accumulator)


@pytest.fixture
def write_jsonl(tmp_path: Path):
    """Write records to a JSONL file under tmp_path and return its path."""

    def write(records: list, name: str = "values.jsonl") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            for record in records:
                f.write(json.dumps(record) + "\n")
        return path

    return write
