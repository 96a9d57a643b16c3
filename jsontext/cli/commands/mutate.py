"""Set command - JSONPath updates."""

import typer

from jsontext.cli.app import parse_value, read_source, write_source
from jsontext.cli.console import console, print_error, print_success
from jsontext.config import get_settings
from jsontext.exceptions import JSONTextError
from jsontext.mutation import set_value_at


def set_(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
    expr: str = typer.Argument(..., help="JSONPath expression selecting the node(s) to replace"),
    value: str = typer.Argument(..., help="New value (read as JSON when possible)"),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Write the result back to SOURCE"),
):
    """Replace every node matched by EXPR with VALUE."""
    try:
        updated = set_value_at(read_source(source), parse_value(value), expr, settings=get_settings())
    except JSONTextError as e:
        print_error(type(e).__name__, str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error("Cannot read source", str(e))
        raise typer.Exit(code=1)

    if in_place and source != "-":
        write_source(source, updated)
        print_success(f"Updated {source}")
    else:
        console.print(updated, markup=False, highlight=False, soft_wrap=True)
