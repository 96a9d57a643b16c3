"""Commands package - modular command modules."""

from jsontext.cli.commands.query import query, first, last, nth
from jsontext.cli.commands.mutate import set_
from jsontext.cli.commands.validate import validate, classify_
from jsontext.cli.commands.config import config

__all__ = ["query", "first", "last", "nth", "set_", "validate", "classify_", "config"]
