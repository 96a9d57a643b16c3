"""A text field holding a JSON document, with query and update helpers.

Example:

    field = JSONText('{"store": {"book": [{"a": 1}, {"a": 2}]}}')
    field.set_return_type("array").query("$..a")        # [1, 2]
    field.query("->>", "store")                          # {"store": {"book": [...]}}
    field.set_value({"a": 99}, expr="$.store.book[1]")

The field only carries the raw text. Every call parses a fresh JsonStore,
so the text and the tree can never drift apart.
"""

import logging
from typing import Any

from jsontext.backends import JSONBackend, get_backend, get_backend_class
from jsontext.classifier import classify, is_valid_expression
from jsontext.config import Settings, get_settings
from jsontext.exceptions import (
    InvalidArgumentError,
    InvalidExpressionError,
    InvalidOperatorOrExpressionError,
    MalformedJsonError,
)
from jsontext.models import MatchResult, QueryKind, ReturnType
from jsontext.mutation import set_value_at
from jsontext.normalizer import shape, to_json
from jsontext.store import JsonStore, parse

logger = logging.getLogger(__name__)


def is_valid_json(value: Any) -> bool:
    """Is value JSON text holding a document (object or array)?

    ``true``, ``false`` and ``""`` parse as JSON but are not documents.
    """
    if not isinstance(value, str):
        return False
    try:
        parse(value)
    except MalformedJsonError:
        return False
    return True


class JSONText:
    """A JSON document stored as text."""

    def __init__(self, value: Any = None, settings: Settings | None = None, name: str | None = None):
        self.settings = settings or get_settings()
        self.name = name
        self._value: str | None = None
        self._return_type = ReturnType.from_name(self.settings.return_type)
        if value is not None:
            self.set_value(value)

    def __repr__(self) -> str:
        return f"JSONText(name={self.name!r}, value={self._value!r})"

    def __str__(self) -> str:
        return self._value or ""

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def return_type(self) -> ReturnType:
        return self._return_type

    @property
    def backend_class(self) -> type[JSONBackend]:
        return get_backend_class(self.settings.backend)

    def set_return_type(self, mode: ReturnType | str) -> "JSONText":
        """Return all query results as JSON, a plain structure, or typed values.

        Raises:
            InvalidArgumentError: mode is not json, array or silverstripe/typed
        """
        self._return_type = ReturnType.from_name(mode)
        return self

    def get_json_store(self) -> JsonStore:
        """Parse the current value; an empty field reads as ``[]``."""
        if not self._value:
            return JsonStore("[]")
        if not is_valid_json(self._value):
            raise MalformedJsonError(f"Stored data is munged: {self.name or 'value'}")
        return JsonStore(self._value)

    def get_store_as_array(self) -> dict | list:
        return self.get_json_store().to_array()

    def to_json(self, data: Any) -> str:
        return to_json(data, ensure_ascii=self.settings.ensure_ascii)

    def to_array(self, value: str | None = None) -> dict | list:
        """Parse value (or the field's own value) into a plain structure."""
        value = value or self._value
        if not value:
            return []
        return parse(value)

    def first(self) -> Any:
        """The first top-level key and value."""
        items = self.get_json_store().items()
        if not items:
            return self._return_as_type(MatchResult.empty())
        return self._return_as_type(MatchResult.single(*items[0]))

    def last(self) -> Any:
        """The last top-level key and value."""
        items = self.get_json_store().items()
        if not items:
            return self._return_as_type(MatchResult.empty())
        return self._return_as_type(MatchResult.single(*items[-1]))

    def nth(self, n: int) -> Any:
        """The top-level key and value at position n.

        Raises:
            InvalidArgumentError: n is not an integer
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"Argument passed to nth() must be an integer, got: {n!r}")

        items = self.get_json_store().items()
        if 0 <= n < len(items):
            return self._return_as_type(MatchResult.single(*items[n]))
        return self._return_as_type(MatchResult.empty())

    def query(self, operator: str, operand: Any = None) -> Any:
        """
        Return the key(s) and value(s) selected by an operator or JSONPath expression.

        With the path operator ``#>`` and duplicate keys, every match is
        returned as a list.

        Args:
            operator: A backend operator (``->``, ``->>``, ``#>``) or a JSONPath expression
            operand: Right-hand side for operators; must be omitted for expressions

        Raises:
            InvalidArgumentError: operand given with an expression, or wrong operand kind
            InvalidOperatorOrExpressionError: operator is neither operator nor expression
        """
        backend_class = self.backend_class
        classification = classify(operator, backend_class.operator_tokens())

        if classification.is_expression and operand is not None:
            raise InvalidArgumentError("Cannot pass an operand when in JSONPath context in query()")

        if classification.kind == QueryKind.INVALID:
            raise InvalidOperatorOrExpressionError(
                f'Cannot use: "{operator}" as operator or expression in query()'
            )

        backend = get_backend(self.get_json_store(), self.settings.backend)
        if classification.is_operator:
            result = backend.dispatch(classification.token, operand)
        else:
            result = backend.match_on_expr(operator)

        logger.debug(f"query({operator!r}) produced {len(result)} match(es)")
        return self._return_as_type(result)

    def set_value(self, value: Any, expr: str = "") -> "JSONText":
        """
        Set the field's value, or update part of it with a JSONPath expression.

        Without expr, value replaces the whole document (a dict or list is
        serialized first; None clears the field). With expr, value is written
        to every node expr matches and the whole document is re-serialized.

        Raises:
            InvalidArgumentError: value is not acceptable stored JSON
            InvalidExpressionError: expr is not a JSONPath expression
            NoMatchError: expr matches nothing
        """
        if not expr:
            if value is None:
                self._value = None
                return self
            if isinstance(value, (dict, list)):
                value = self.to_json(value)
            if not self.is_valid_db_value(value):
                raise InvalidArgumentError(f"Invalid data passed to set_value(): {value!r}")
            self._value = value
            return self

        if not is_valid_expression(expr):
            raise InvalidExpressionError(f"Invalid JSONPath expression: {expr} passed to set_value()")

        self._value = set_value_at(self._value, value, expr, settings=self.settings)
        return self

    def is_valid_json(self, value: Any) -> bool:
        return is_valid_json(value)

    def is_valid_db_value(self, value: Any) -> bool:
        """Can value be stored as-is? Empty text is allowed and means no document."""
        if not isinstance(value, str):
            return False
        if value in ("true", "false"):
            return False
        if value == "":
            return True
        return is_valid_json(value)

    def is_valid_operator(self, operator: str) -> bool:
        return isinstance(operator, str) and operator in self.backend_class.operator_tokens()

    def is_valid_expression(self, expression: str) -> bool:
        return is_valid_expression(expression)

    def _return_as_type(self, result: MatchResult) -> Any:
        return shape(result, self._return_type, ensure_ascii=self.settings.ensure_ascii)
