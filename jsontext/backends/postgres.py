"""Postgres-style operators: ``->``, ``->>`` and ``#>``.

Only the top level of the document is compared, plus one level of
nesting for the path operator. No native database features are used.
"""

import logging
from typing import Any

from jsontext.backends.base import JSONBackend
from jsontext.exceptions import InvalidArgumentError
from jsontext.models import (
    IntOperand,
    KeyRef,
    MatchResult,
    PathOperand,
    TextOperand,
    to_operand,
)
from jsontext.store import KeyPairs, to_plain

logger = logging.getLogger(__name__)


def _same_key(key: KeyRef, wanted: KeyRef) -> bool:
    # Object keys are strings, array keys are ints; "0" and 0 address the same entry
    return str(key) == str(wanted)


def _entries(value: Any) -> list[tuple[KeyRef, Any]]:
    if isinstance(value, KeyPairs):
        return list(value)
    if isinstance(value, list):
        return list(enumerate(value))
    return []


class PostgresJSONBackend(JSONBackend):
    """Backend mimicking Postgres JSON operators."""

    allowed_operators = {
        "match_on_int": "->",
        "match_on_str": "->>",
        "match_on_path": "#>",
    }

    def match_on_int(self, operand: Any) -> MatchResult:
        operand = to_operand(operand)
        if not isinstance(operand, IntOperand):
            raise InvalidArgumentError("Non-integer passed to: match_on_int()")

        for key, value in self.store.items():
            if _same_key(key, operand.value):
                return MatchResult.single(key, value)
        return MatchResult.empty()

    def match_on_str(self, operand: Any) -> MatchResult:
        operand = to_operand(operand)
        if not isinstance(operand, TextOperand):
            raise InvalidArgumentError("Non-string passed to: match_on_str()")

        for key, value in self.store.items():
            if key == operand.value:
                return MatchResult.single(key, value)
        return MatchResult.empty()

    def match_on_path(self, operand: Any) -> MatchResult:
        operand = to_operand(operand)
        if isinstance(operand, TextOperand):
            operand = PathOperand.from_raw(operand.value)
        if not isinstance(operand, PathOperand):
            raise InvalidArgumentError("Invalid path operand passed to: match_on_path()")

        found = []
        for key, value in self.store.pairs():
            if not _same_key(key, operand.outer):
                continue
            for inner_key, inner_value in _entries(value):
                if _same_key(inner_key, operand.inner):
                    found.append((inner_key, to_plain(inner_value)))

        logger.debug(
            f"Path {operand.outer!r} -> {operand.inner!r} matched {len(found)} node(s)"
        )
        if not found:
            return MatchResult.empty()
        if len(found) == 1:
            return MatchResult.single(*found[0])
        return MatchResult.multiple(found)
