"""In-memory JSON document with JSONPath get/set.

A store is built from text at the start of one query or update and thrown
away after it. It is not safe to share one store between callers: set()
changes the tree in place before it is serialized.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from jsonpath_ng import Fields, Index
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as jsonpath_parse

from jsontext.classifier import classify
from jsontext.exceptions import (
    InvalidArgumentError,
    InvalidExpressionError,
    MalformedJsonError,
    NoMatchError,
)
from jsontext.models import KeyRef, MatchResult

logger = logging.getLogger(__name__)


class KeyPairs(list):
    """A JSON object kept as its raw (key, value) pairs, duplicate keys included."""

    pass


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON literal: {name}")


def parse(text: str) -> dict | list:
    """Parse stored text into a tree.

    Only objects and arrays are documents. Bare scalars such as ``true``,
    ``false`` or ``""`` are valid JSON but are rejected here.
    """
    if not isinstance(text, str):
        raise MalformedJsonError(f"Expected JSON text, got {type(text).__name__}")
    if not text.strip():
        raise MalformedJsonError("Empty string is not a JSON document")

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedJsonError(f"Unable to parse JSON: {e}") from e

    if not isinstance(data, (dict, list)):
        raise MalformedJsonError(
            f"JSON document must be an object or array, got {type(data).__name__}"
        )
    return data


def to_plain(value: Any) -> Any:
    """Collapse KeyPairs back into dicts (last duplicate wins)."""
    if isinstance(value, KeyPairs):
        return {key: to_plain(val) for key, val in value}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def compile_expression(expr: str):
    """Compile a JSONPath expression, mapping parser errors to InvalidExpressionError."""
    try:
        return jsonpath_parse(expr)
    except JSONPathError as e:
        raise InvalidExpressionError(f"Invalid JSONPath expression '{expr}': {e}") from e
    except Exception as e:
        # The ply-based parser raises plain exceptions for some inputs
        raise InvalidExpressionError(f"Error parsing JSONPath '{expr}': {e}") from e


def _key_of(match) -> KeyRef | None:
    path = match.path
    if isinstance(path, Fields):
        return path.fields[0] if path.fields else None
    if isinstance(path, Index):
        indices = getattr(path, "indices", None)
        if indices:
            return indices[0]
        return getattr(path, "index", None)
    return None


class JsonStore:
    """A parsed JSON document addressable by JSONPath."""

    def __init__(self, text: str):
        self._data = parse(text)
        self._source: str | None = text

    @property
    def data(self) -> dict | list:
        return self._data

    def items(self) -> list[tuple[KeyRef, Any]]:
        """Top-level (key, value) entries in document order."""
        if isinstance(self._data, dict):
            return list(self._data.items())
        return list(enumerate(self._data))

    def pairs(self) -> list[tuple[KeyRef, Any]]:
        """Top-level entries with duplicate object keys preserved.

        Nested objects come back as KeyPairs so callers can see every
        occurrence of a repeated key.
        """
        source = self._source if self._source is not None else self.to_string()
        raw = json.loads(source, object_pairs_hook=KeyPairs)
        if isinstance(raw, KeyPairs):
            return list(raw)
        return list(enumerate(raw))

    def to_array(self) -> dict | list:
        return self._data

    def get(self, expr: str = "") -> MatchResult:
        """Resolve a JSONPath expression; an empty string returns the whole tree."""
        if not expr:
            return MatchResult.single(None, self._data)

        compiled = compile_expression(expr)
        matches = compiled.find(self._data)
        logger.debug(f"JSONPath {expr!r} matched {len(matches)} node(s)")
        return MatchResult.multiple([(_key_of(m), m.value) for m in matches])

    def set(self, expr: str, value: Any, operators: Iterable[str] = ()) -> int:
        """Assign value to every node matched by expr.

        Returns the number of nodes updated.

        Raises:
            InvalidExpressionError: expr is an operator or not JSONPath.
            NoMatchError: expr matches nothing.
        """
        classification = classify(expr, operators)
        if not classification.is_expression:
            raise InvalidExpressionError(
                f"Only JSONPath expressions can be used to set data, got: {expr!r}"
            )

        compiled = compile_expression(expr)
        matches = compiled.find(self._data)
        if not matches:
            raise NoMatchError(f"No matches found for JSONPath: {expr}")

        self._data = compiled.update(self._data, value)
        self._source = None
        logger.debug(f"Updated {len(matches)} node(s) at {expr!r}")
        return len(matches)

    def to_string(self, ensure_ascii: bool = True) -> str:
        """Compact JSON text; slashes are left unescaped.

        Raises:
            InvalidArgumentError: the tree holds NaN, Infinity or a value JSON cannot encode
        """
        try:
            return json.dumps(
                self._data, ensure_ascii=ensure_ascii, separators=(",", ":"), allow_nan=False
            )
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"Value cannot be stored as JSON: {e}") from e

    def __str__(self) -> str:
        return self.to_string()
