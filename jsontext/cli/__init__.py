"""JSONText CLI.

Usage:
    jsontext query data.json '$..author'       # JSONPath query
    jsontext query data.json '->>' store       # Operator query
    jsontext nth data.json 2 -r array          # Positional access
    jsontext set data.json '$.a' 1 --in-place  # Update a document
"""

import typer

from jsontext.cli.app import app, configure_logging, version_callback
from jsontext.cli.console import console
from jsontext.cli.commands import query, first, last, nth, set_, validate, classify_, config


@app.callback()
def main_callback(
    version: bool = typer.Option(
        None, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """JSONText - query and update JSON documents."""
    from jsontext.config import get_settings
    from jsontext.exceptions import ConfigurationError

    # Bad settings are reported by the command that needs them
    try:
        level = get_settings().log_level
    except ConfigurationError:
        level = "WARNING"
    configure_logging(level, verbose)


# Register commands
app.command()(query)
app.command()(first)
app.command()(last)
app.command()(nth)
app.command(name="set")(set_)
app.command()(validate)
app.command(name="classify")(classify_)
app.command()(config)


def main():
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main", "console"]
