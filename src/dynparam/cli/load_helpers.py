"""Load parameter forms for a CLI command, exiting with a message on failure."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dynparam.core.registries import RegistryManager
from dynparam.io.loaders import LoaderError, load_forms


def load_forms_or_exit(
    path: str,
    registries: RegistryManager,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> RegistryManager:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        load_forms(path, registries)
    except LoaderError as err:
        console.print(f"[red]Failed to load forms:[/red] {escape(str(err))}")
        if verbose_errors and err.cause is not None:
            console.print(f"[dim]{escape(type(err.cause).__name__)}: {escape(str(err.cause))}[/dim]")
        raise typer.Exit(code=1)
    return registries


__all__ = ["load_forms_or_exit"]
