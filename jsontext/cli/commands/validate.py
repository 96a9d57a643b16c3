"""Inspection commands - validation and classification."""

import typer

from jsontext.backends import get_backend_class
from jsontext.cli.app import BackendOption, read_source
from jsontext.cli.console import console, print_error, print_success
from jsontext.classifier import classify
from jsontext.exceptions import JSONTextError
from jsontext.field import is_valid_json
from jsontext.models import QueryKind


def validate(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
):
    """Check that SOURCE holds a storable JSON document."""
    try:
        text = read_source(source)
    except OSError as e:
        print_error("Cannot read source", str(e))
        raise typer.Exit(code=1)

    if is_valid_json(text):
        print_success("Valid JSON document")
        return
    print_error("Not a valid JSON document", "Expected an object or array")
    raise typer.Exit(code=1)


def classify_(
    candidate: str = typer.Argument(..., help="Operator or expression to classify"),
    backend: str = BackendOption,
):
    """Show whether CANDIDATE is an operator, a JSONPath expression, or invalid."""
    try:
        tokens = get_backend_class(backend).operator_tokens()
    except JSONTextError as e:
        print_error(type(e).__name__, str(e))
        raise typer.Exit(code=1)

    result = classify(candidate, tokens)
    console.print(result.kind.value)
    if result.kind == QueryKind.INVALID:
        raise typer.Exit(code=1)
