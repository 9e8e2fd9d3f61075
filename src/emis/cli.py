"""
CLI for EMIS schema validation.

Lists the registered schemas, validates JSON files against them and runs the
business rules on a parsed record.
"""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from emis.core.config import settings
from emis.exceptions import BusinessRuleError, SchemaNotFoundError
from emis.rules import run_rules
from emis.validation import ValidationResult, Violation, get_schema, list_schemas, validate_many

POLICIES = ("ignore", "warn", "error")


class EMISCLI:
    """CLI interface for EMIS schemas."""

    def __init__(self) -> None:
        self.console = Console()
        self.stderr_console = Console(stderr=True)

    def create_app(self) -> typer.Typer:
        app = typer.Typer(
            name="emis",
            help="EMIS data-model validation tools",
            no_args_is_help=True,
        )

        app.command("schemas")(self.schemas)
        app.command("validate")(self.validate)
        app.command("rules")(self.rules)

        return app

    # ------------------------------------------------------------------
    # commands
    # ------------------------------------------------------------------

    def schemas(
        self,
        contains: Optional[str] = typer.Option(
            None, "--contains", "-c", help="Only list schema names containing this text"
        ),
    ) -> None:
        """List registered schemas."""
        names = list_schemas()
        if contains:
            names = [n for n in names if contains.lower() in n.lower()]

        table = Table(title=f"Registered schemas ({len(names)})")
        table.add_column("Schema", style="bold")
        table.add_column("Module")
        for name in names:
            table.add_row(name, get_schema(name).__module__)
        self.console.print(table)

    def validate(
        self,
        schema: str = typer.Argument(..., help="Schema name, e.g. ComprehensiveStaffProfile"),
        file: Path = typer.Argument(..., help="JSON file holding one object or an array of objects"),
        show_record: bool = typer.Option(
            False, "--show-record", help="Print the normalized wire JSON of valid records"
        ),
        json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    ) -> None:
        """Validate a JSON file against a schema. Exit code 1 if any record is invalid."""
        model = self._schema_or_exit(schema)
        records = self._load(file)
        results = validate_many(model, records)

        if json_output:
            # plain print so rich markup never touches the JSON
            print(json.dumps([r.to_dict() for r in results], indent=settings.JSON_INDENT))
        else:
            for index, result in enumerate(results):
                self._print_result(index, result, show_record)

        invalid = sum(1 for r in results if not r.valid)
        if not json_output:
            color = "red" if invalid else "green"
            self.console.print(
                f"[{color}]{len(results) - invalid}/{len(results)} record(s) valid[/{color}]"
            )
        if invalid:
            raise typer.Exit(1)

    def rules(
        self,
        file: Path = typer.Argument(..., help="JSON file holding one record"),
        schema: str = typer.Option(
            "ComprehensiveStaffProfile", "--schema", "-s", help="Schema the record follows"
        ),
        policy: Optional[str] = typer.Option(
            None, "--policy", "-p", help="Primary-role policy: ignore, warn or error"
        ),
    ) -> None:
        """Run business rules on a record. Exit code 1 on any violation."""
        if policy is not None and policy not in POLICIES:
            self.stderr_console.print(f"[red]Error: unknown policy '{policy}'[/red]")
            raise typer.Exit(2)

        model = self._schema_or_exit(schema)
        data = self._load(file)
        if len(data) != 1:
            self.stderr_console.print("[red]Error: rules run on a single record[/red]")
            raise typer.Exit(2)

        result = validate_many(model, data)[0]
        if not result.valid:
            self._print_result(0, result, show_record=False)
            raise typer.Exit(1)

        try:
            violations = run_rules(result.record, policy)  # type: ignore[arg-type]
        except BusinessRuleError as e:
            self._print_violations(f"Rule '{e.rule}' failed", e.violations)
            raise typer.Exit(1)

        if violations:
            self._print_violations(f"{schema}: rule violations", violations)
            if any(v.is_error() for v in violations):
                raise typer.Exit(1)
        else:
            self.console.print(f"[green]{schema}: all rules passed[/green]")

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _schema_or_exit(self, name: str):
        try:
            return get_schema(name)
        except SchemaNotFoundError as e:
            self.stderr_console.print(f"[red]Error: {e.message}[/red]")
            self.stderr_console.print("Run 'emis schemas' to list available schemas.")
            raise typer.Exit(2)

    def _load(self, file: Path) -> List[Any]:
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            self.stderr_console.print(f"[red]Error: file not found: {file}[/red]")
            raise typer.Exit(2)
        except json.JSONDecodeError as e:
            self.stderr_console.print(f"[red]Error: {file} is not valid JSON: {e}[/red]")
            raise typer.Exit(2)
        return data if isinstance(data, list) else [data]

    def _print_result(self, index: int, result: ValidationResult, show_record: bool) -> None:
        if result.valid:
            self.console.print(f"[green]Record {index}: valid {result.schema_name}[/green]")
            if show_record and result.record is not None:
                print(result.record.to_json(indent=settings.JSON_INDENT))
            return
        self._print_violations(f"Record {index}: invalid {result.schema_name}", result.violations)

    def _print_violations(self, title: str, violations: List[Violation]) -> None:
        table = Table(title=title)
        table.add_column("Path", style="bold")
        table.add_column("Kind")
        table.add_column("Severity")
        table.add_column("Message")
        for v in violations:
            color = "red" if v.is_error() else "yellow"
            table.add_row(
                v.location or "(root)",
                v.kind.value,
                f"[{color}]{v.severity.value}[/{color}]",
                v.message,
            )
        self.console.print(table)


def create_app() -> typer.Typer:
    return EMISCLI().create_app()


app = create_app()

if __name__ == "__main__":
    app()
