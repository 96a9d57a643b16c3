"""Query commands - operators, JSONPath and positional access."""

import logging

import typer

from jsontext.backends import get_backend_class
from jsontext.cli.app import BackendOption, ReturnTypeOption, parse_value, read_source
from jsontext.cli.console import print_error, print_result
from jsontext.config import get_settings
from jsontext.exceptions import JSONTextError
from jsontext.field import JSONText
from jsontext.models import OperatorVocabulary

logger = logging.getLogger(__name__)


def load_field(source: str, return_type: str | None = None, backend: str | None = None) -> JSONText:
    """Build a field from SOURCE with command-line overrides applied."""
    settings = get_settings()
    if backend:
        get_backend_class(backend)
        settings = settings.model_copy(update={"backend": OperatorVocabulary(backend)})

    field = JSONText(read_source(source), settings=settings, name=source)
    if return_type:
        field.set_return_type(return_type)
    logger.debug(f"Loaded {source} with backend {settings.backend.value}")
    return field


def _run(source: str, return_type: str | None, backend: str | None, action):
    try:
        field = load_field(source, return_type, backend)
        result = action(field)
    except JSONTextError as e:
        print_error(type(e).__name__, str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error("Cannot read source", str(e))
        raise typer.Exit(code=1)
    print_result(result, field.return_type.value)


def query(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
    operator: str = typer.Argument(..., help="Operator (->, ->>, #>) or JSONPath expression"),
    operand: str = typer.Argument(None, help="Operand for operators (read as JSON when possible)"),
    return_type: str = ReturnTypeOption,
    backend: str = BackendOption,
):
    """Query a document with an operator or a JSONPath expression."""
    value = parse_value(operand)
    _run(source, return_type, backend, lambda field: field.query(operator, value))


def first(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
    return_type: str = ReturnTypeOption,
):
    """Show the first top-level entry."""
    _run(source, return_type, None, lambda field: field.first())


def last(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
    return_type: str = ReturnTypeOption,
):
    """Show the last top-level entry."""
    _run(source, return_type, None, lambda field: field.last())


def nth(
    source: str = typer.Argument(..., help="JSON file, or '-' for stdin"),
    n: int = typer.Argument(..., help="Zero-based position"),
    return_type: str = ReturnTypeOption,
):
    """Show the top-level entry at position N."""
    _run(source, return_type, None, lambda field: field.nth(n))
