"""Config command - show active settings."""

import typer
from rich import box
from rich.table import Table

from jsontext.backends import get_backend_class
from jsontext.cli.console import console, print_error
from jsontext.config import get_settings
from jsontext.exceptions import JSONTextError


def config():
    """Show current configuration and the active operators."""
    try:
        settings = get_settings()
        backend_class = get_backend_class(settings.backend)
    except JSONTextError as e:
        print_error("Invalid configuration", str(e))
        raise typer.Exit(code=1)

    table = Table(title="JSONText Config", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("backend", settings.backend.value)
    table.add_row("return_type", settings.return_type.value)
    table.add_row("ensure_ascii", str(settings.ensure_ascii))
    table.add_row("log_level", settings.log_level)
    console.print(table)

    operators = Table(title=f"{backend_class.__name__} operators", box=box.ROUNDED)
    operators.add_column("Routine", style="cyan")
    operators.add_column("Operator")
    for routine, token in backend_class.allowed_operators.items():
        operators.add_row(routine, token)
    console.print(operators)
