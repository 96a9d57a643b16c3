"""JSONText - structured queries and updates over JSON text.

Three ways to address a stored JSON document:

1. Simple:            first(), last() and nth()
2. Postgres style:    ->, ->> and #>
3. JSONPath style:    $.., $.store.book[*].author, $..book[?(@.price<10)]

Matching is done with plain key / value comparisons in Python, not with
the native JSON features of any database.
"""

from jsontext.version import __version__
from jsontext.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidExpressionError,
    InvalidOperatorOrExpressionError,
    JSONTextError,
    MalformedJsonError,
    MutationError,
    NoMatchError,
)
from jsontext.models import ReturnType
from jsontext.field import JSONText, is_valid_json
from jsontext.classifier import is_valid_expression, is_valid_operator
from jsontext.mutation import set_value_at

__all__ = [
    "__version__",
    "JSONText",
    "ReturnType",
    "set_value_at",
    "is_valid_json",
    "is_valid_expression",
    "is_valid_operator",
    "JSONTextError",
    "MalformedJsonError",
    "InvalidArgumentError",
    "InvalidExpressionError",
    "InvalidOperatorOrExpressionError",
    "MutationError",
    "NoMatchError",
    "ConfigurationError",
]
