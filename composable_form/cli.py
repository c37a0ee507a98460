"""CLI for inspecting composable forms against values records."""

import json
from pathlib import Path
from typing import Annotated

import jsonschema
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from composable_form import __version__
from composable_form.core.errors import describe_error
from composable_form.core.models import FilledForm
from composable_form.core.result import Ok
from composable_form.io import FormLoadError, load_form, read_jsonl

app = typer.Typer(
    name="composable-form",
    help="Inspect composable forms filled against values records.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"composable-form version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """composable-form: Inspect composable forms."""
    pass


def _render(filled: FilledForm, record_num: int) -> None:
    table = Table(title=f"Record {record_num}")
    table.add_column("#", justify="right")
    table.add_column("Field")
    table.add_column("Error")

    for position, (field, error) in enumerate(filled.fields, 1):
        table.add_row(
            str(position),
            escape(repr(field)),
            describe_error(error) if error is not None else "",
        )
    console.print(table)

    if isinstance(filled.result, Ok):
        console.print(f"  [green]Valid:[/green] {escape(repr(filled.result.value))}")
    else:
        errors = filled.result.error.to_list()
        console.print(f"  [red]Invalid:[/red] {len(errors)} error(s)")
        for error in errors:
            console.print(f"    - {describe_error(error)}")
    if filled.is_empty:
        console.print("  [yellow]Empty[/yellow]")


@app.command()
def fill(
    form_target: Annotated[
        str,
        typer.Option(
            "--form",
            "-f",
            envvar="COMPOSABLE_FORM_TARGET",
            help="Form to fill, as 'package.module:attribute'",
        ),
    ],
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of values records"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="JSON Schema each values record must satisfy"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print one JSON line per filled form"),
    ] = False,
) -> None:
    """Fill a form once per values record and report fields and errors."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    schema = None
    if schema_path is not None:
        if not schema_path.exists():
            console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
            raise typer.Exit(1)
        with open(schema_path) as f:
            schema = json.load(f)

    try:
        form = load_form(form_target)
    except FormLoadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    valid_count = 0
    invalid_count = 0
    skipped_count = 0

    try:
        for record_num, values in enumerate(read_jsonl(input_path), 1):
            if schema is not None:
                try:
                    jsonschema.validate(values, schema)
                except jsonschema.ValidationError as e:
                    console.print(
                        f"[yellow]Warning:[/yellow] Record {record_num} skipped: {escape(e.message)}"
                    )
                    skipped_count += 1
                    continue

            filled = form.fill(values)
            if filled.is_valid:
                valid_count += 1
            else:
                invalid_count += 1

            if as_json:
                typer.echo(json.dumps(filled.to_dict(), default=str))
            else:
                _render(filled, record_num)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not as_json:
        console.print("\n[bold]Summary:[/bold]")
        console.print(f"  [green]Valid:[/green] {valid_count}")
        console.print(f"  [red]Invalid:[/red] {invalid_count}")
        if skipped_count:
            console.print(f"  [yellow]Skipped:[/yellow] {skipped_count}")


if __name__ == "__main__":
    app()
