"""Tests for the mapping operators."""

from composable_form import (
    Err,
    ErrorList,
    Ok,
    RequiredFieldIsEmpty,
    append,
    fill,
    map_field,
    map_output,
    map_values,
    succeed,
)

from sample_forms import CheckboxField, TextField, checkbox_field, labels, text_field


class TestMapOutput:
    """Tests for map_output()."""

    def test_transforms_success(self) -> None:
        form = map_output(str.upper, text_field("name"))

        assert fill(form, {"name": "ada"}).result == Ok("ADA")

    def test_leaves_errors_fields_and_emptiness(self) -> None:
        """Test that only the result is affected."""
        base = text_field("name")
        mapped = map_output(str.upper, base)

        filled = fill(mapped, {})
        original = fill(base, {})

        assert filled.result == Err(ErrorList.of(RequiredFieldIsEmpty()))
        assert filled.fields == original.fields
        assert filled.is_empty is original.is_empty

    def test_function_not_called_on_error(self) -> None:
        calls = []
        form = map_output(calls.append, text_field("name"))

        fill(form, {"name": ""})

        assert calls == []


class TestMapValues:
    """Tests for map_values()."""

    def test_adapts_values_type(self) -> None:
        """Test that a form over a nested record reads from the outer one."""
        address = text_field("city")
        form = map_values(lambda values: values["address"], address)

        filled = fill(form, {"address": {"city": "London"}})

        assert filled.result == Ok("London")
        assert labels(filled) == ["city"]

    def test_missing_inner_input(self) -> None:
        form = map_values(lambda values: values["address"], text_field("city"))

        assert fill(form, {"address": {}}).result == Err(ErrorList.of(RequiredFieldIsEmpty()))

    def test_update_still_targets_inner_values(self) -> None:
        """Test that the adapter does not rewrite the field's updater."""
        form = map_values(lambda values: values["address"], text_field("city"))

        filled = fill(form, {"address": {"city": "London"}})

        assert filled.fields[0][0].state.update("Paris") == {"city": "Paris"}


class TestMapField:
    """Tests for map_field()."""

    def test_transforms_every_field(self) -> None:
        form = append(
            checkbox_field("agree"),
            append(text_field("name"), succeed(lambda a: lambda b: (a, b))),
        )

        filled = fill(map_field(lambda f: f.kind, form), {"name": "Ada"})

        assert filled.fields == [("text", None), ("checkbox", None)]

    def test_keeps_errors_and_result(self) -> None:
        form = map_field(lambda f: f.state.attributes["label"], text_field("name"))

        filled = fill(form, {})

        assert filled.fields == [("name", RequiredFieldIsEmpty())]
        assert filled.result == Err(ErrorList.of(RequiredFieldIsEmpty()))
        assert filled.is_empty is True

    def test_unifies_field_catalogs(self) -> None:
        """Test wrapping two catalogs into one representation before composing."""
        text = map_field(lambda f: ("primary", f), text_field("name"))
        other = map_field(lambda f: ("secondary", f), checkbox_field("agree"))
        form = append(other, append(text, succeed(lambda a: lambda b: (a, b))))

        filled = fill(form, {"name": "Ada"})

        assert [tag for (tag, _), _ in filled.fields] == ["primary", "secondary"]
        assert isinstance(filled.fields[0][0][1], TextField)
        assert isinstance(filled.fields[1][0][1], CheckboxField)
