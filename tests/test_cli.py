"""Tests for the composable-form CLI."""

import json
from pathlib import Path

from typer.testing import CliRunner

from composable_form import __version__
from composable_form.cli import app

runner = CliRunner()


class TestCli:
    """Tests for the CLI commands."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_fill_reports_summary(self, write_jsonl) -> None:
        path = write_jsonl(
            [
                {"email": "ada@example.com", "password": "difference-engine"},
                {"email": "nope", "password": ""},
            ]
        )

        result = runner.invoke(app, ["fill", "--form", "sample_forms:signup_form", "--in", str(path)])

        assert result.exit_code == 0
        assert "Valid:" in result.output
        assert "RequiredFieldIsEmpty" in result.output
        assert "Summary" in result.output

    def test_fill_json_output(self, write_jsonl) -> None:
        """Test one JSON line per values record."""
        path = write_jsonl([{"email": "ada@example.com", "password": "short"}])

        result = runner.invoke(
            app, ["fill", "--form", "sample_forms:signup_form", "--in", str(path), "--json"]
        )

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.strip()]
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["result"] == {
            "ok": False,
            "errors": ["ValidationFailed: Must be at least 8 characters"],
        }
        assert [f["error"] for f in record["fields"]] == [
            None,
            {"kind": "validation_failed", "message": "Must be at least 8 characters"},
        ]

    def test_form_from_environment(self, write_jsonl) -> None:
        path = write_jsonl([{"email": "ada@example.com", "password": "difference-engine"}])

        result = runner.invoke(
            app,
            ["fill", "--in", str(path), "--json"],
            env={"COMPOSABLE_FORM_TARGET": "sample_forms:signup_form"},
        )

        assert result.exit_code == 0
        assert json.loads(result.output.strip())["result"]["ok"] is True

    def test_schema_skips_nonconforming_records(self, write_jsonl, tmp_path: Path) -> None:
        schema_path = tmp_path / "schema.json"
        schema_path.write_text(json.dumps({"type": "object", "required": ["email"]}))
        path = write_jsonl([{"password": "x"}, {"email": "ada@example.com", "password": "difference-engine"}])

        result = runner.invoke(
            app,
            ["fill", "--form", "sample_forms:signup_form", "--in", str(path), "--schema", str(schema_path)],
        )

        assert result.exit_code == 0
        assert "Record 1 skipped" in result.output
        assert "Skipped:" in result.output

    def test_missing_input_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["fill", "--form", "sample_forms:signup_form", "--in", str(tmp_path / "none.jsonl")]
        )

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_bad_form_target(self, write_jsonl) -> None:
        path = write_jsonl([{}])

        result = runner.invoke(app, ["fill", "--form", "sample_forms:not_a_form", "--in", str(path)])

        assert result.exit_code == 1
        assert "not a Form" in result.output

    def test_invalid_json_input(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.jsonl"
        path.write_text("{oops\n")

        result = runner.invoke(app, ["fill", "--form", "sample_forms:signup_form", "--in", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON on line 1" in result.output

    def test_non_object_record(self, write_jsonl) -> None:
        path = write_jsonl([{"email": "ada@example.com"}, ["ada@example.com"]])

        result = runner.invoke(
            app, ["fill", "--form", "sample_forms:signup_form", "--in", str(path), "--json"]
        )

        assert result.exit_code == 1
        assert "Line 2 is a JSON list" in result.output
