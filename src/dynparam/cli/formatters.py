"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Any, List, Optional

from rich.markup import escape
from rich.table import Table

from dynparam.core.evaluation.evaluator import string_form
from dynparam.core.parameters.base import ParameterDefinitionBase
from dynparam.core.parameters.form import ParameterForm
from dynparam.core.parameters.values import StringParameterValue


def format_value(value: Optional[str]) -> str:
    return "[dim]<null>[/dim]" if value is None else escape(value)


def build_form_table(form: ParameterForm) -> Table:
    table = Table(title=f"Form {form.name}", show_header=True, header_style="bold blue")
    table.add_column("Parameter", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Target", style="dim")
    table.add_column("Description")

    for definition in form.definitions.values():
        table.add_row(
            definition.name,
            definition.DESCRIPTOR.display_name,
            definition.execution_target.value,
            escape(definition.description),
        )
    return table


def build_choices_table(definition: ParameterDefinitionBase, choices: List[Any]) -> Table:
    table = Table(title=f"Choices for {definition.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Value", style="green")
    table.add_column("Type", style="dim")
    for idx, choice in enumerate(choices, start=1):
        table.add_row(str(idx), format_value(string_form(choice)), type(choice).__name__)
    return table


def format_parameter_value(value: Optional[StringParameterValue]) -> str:
    if value is None:
        return "[dim]no value[/dim]"
    return f"[bold]{value.name}[/bold] = {format_value(value.value)}"


__all__ = ["build_form_table", "build_choices_table", "format_parameter_value", "format_value"]
