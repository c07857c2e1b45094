"""
dynparam CLI: load parameter forms, list computed choices, and check submissions.

The commands stand in for the host's form-processing layer:
- validate: load every form and report what was found
- choices: evaluate a choice parameter's script and show the result
- default: show the value used when nothing is submitted
- submit: run a query-style or JSON submission through a parameter
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from dynparam.cli.formatters import build_choices_table, build_form_table, format_parameter_value
from dynparam.cli.load_helpers import load_forms_or_exit
from dynparam.cli.paths import forms_path
from dynparam.core.parameters.base import ParameterDefinitionBase
from dynparam.core.parameters.choice import ChoiceParameterDefinition
from dynparam.core.parameters.errors import ParameterValueError
from dynparam.core.registries import RegistryManager
from dynparam.core.request import ParameterRequest
from dynparam.utils.logging import configure_logging

app = typer.Typer(help="dynparam CLI: inspect and exercise script-generated build parameters.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log script evaluation at DEBUG level"),
) -> None:
    configure_logging(verbose)


def _load_registries(path: str | None, *, verbose_load: bool = False) -> RegistryManager:
    rm = RegistryManager()
    rm.register_defaults()
    return load_forms_or_exit(forms_path(path), rm, console=console, verbose_errors=verbose_load)


def _resolve_parameter(rm: RegistryManager, form_name: str, parameter_name: str) -> ParameterDefinitionBase:
    try:
        return rm.get_parameter(form_name, parameter_name)
    except KeyError as exc:
        console.print(f"[red]Not found[/red]: {escape(str(exc.args[0]))}")
        raise typer.Exit(code=2)


@app.command()
def validate(
    path: str | None = typer.Argument(None, help="Path to the parameter forms folder"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Load all parameter forms."""
    rm = _load_registries(path, verbose_load=verbose)

    forms = list(rm.forms.all())
    parameter_count = sum(len(form) for form in forms)
    console.print(f"[green]OK[/green] Loaded {len(forms)} form(s)")
    console.print(f"[green]OK[/green] Loaded {parameter_count} parameter(s)")
    for form in forms:
        console.print(build_form_table(form))


@app.command()
def choices(
    form_name: str = typer.Argument(..., help="Form name"),
    parameter_name: str = typer.Argument(..., help="Parameter name"),
    path: str | None = typer.Option(None, help="Path to the parameter forms folder"),
) -> None:
    """Evaluate a choice parameter's script and list its choices."""
    rm = _load_registries(path)
    definition = _resolve_parameter(rm, form_name, parameter_name)
    if not isinstance(definition, ChoiceParameterDefinition):
        console.print(f"[red]Not a choice parameter[/red]: {parameter_name}")
        raise typer.Exit(code=2)

    values = definition.get_choices()
    if not values:
        console.print(f"[yellow]No choices available[/yellow] for {parameter_name}")
        return
    console.print(build_choices_table(definition, values))


@app.command()
def default(
    form_name: str = typer.Argument(..., help="Form name"),
    parameter_name: str = typer.Argument(..., help="Parameter name"),
    path: str | None = typer.Option(None, help="Path to the parameter forms folder"),
) -> None:
    """Show the value used when nothing is submitted."""
    rm = _load_registries(path)
    definition = _resolve_parameter(rm, form_name, parameter_name)
    console.print(format_parameter_value(definition.get_default_parameter_value()))


@app.command()
def submit(
    form_name: str = typer.Argument(..., help="Form name"),
    parameter_name: str = typer.Argument(..., help="Parameter name"),
    values: list[str] = typer.Option([], "--value", "-v", help="Submitted value (repeatable)"),
    payload: Optional[str] = typer.Option(None, "--json", help="Submit a JSON object instead of query values"),
    path: str | None = typer.Option(None, help="Path to the parameter forms folder"),
) -> None:
    """Submit a value for a parameter and show whether it is accepted."""
    rm = _load_registries(path)
    definition = _resolve_parameter(rm, form_name, parameter_name)

    request = ParameterRequest(parameters={parameter_name: values} if values else {})
    try:
        if payload is not None:
            try:
                data = json.loads(payload)
            except json.JSONDecodeError as exc:
                console.print(f"[red]Bad --json[/red]: {escape(str(exc))}")
                raise typer.Exit(code=2)
            result = definition.create_value_from_json(request, data)
        else:
            result = definition.create_value(request)
    except ParameterValueError as exc:
        console.print(f"[red]Rejected[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"[green]Accepted[/green] {format_parameter_value(result)}")


if __name__ == "__main__":  # pragma: no cover
    app()
