"""Base class for operator backends.

A backend maps a dialect's operator tokens onto matching routines that run
against a JsonStore. Routine names are the keys of ``allowed_operators``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from jsontext.exceptions import InvalidArgumentError, InvalidOperatorOrExpressionError
from jsontext.models import MatchResult
from jsontext.store import JsonStore

logger = logging.getLogger(__name__)


class JSONBackend(ABC):
    """Matching routines for one operator dialect."""

    allowed_operators: ClassVar[dict[str, str]] = {}

    def __init__(self, store: JsonStore):
        self.store = store

    @classmethod
    def operator_tokens(cls) -> frozenset[str]:
        return frozenset(cls.allowed_operators.values())

    def routine_for(self, token: str) -> Callable[[Any], MatchResult]:
        """Get the matching routine registered for an operator token."""
        for routine, operator in self.allowed_operators.items():
            if operator == token:
                return getattr(self, routine)
        available = ", ".join(self.allowed_operators.values())
        raise InvalidOperatorOrExpressionError(
            f"Operator '{token}' not supported by {type(self).__name__}. Available: {available}"
        )

    def dispatch(self, token: str, operand: Any) -> MatchResult:
        """Run the routine for token against operand."""
        routine = self.routine_for(token)
        logger.debug(f"Dispatching {token!r} to {routine.__name__}()")
        return routine(operand)

    @abstractmethod
    def match_on_int(self, operand: Any) -> MatchResult:
        """Match top-level entries by integer position.

        Raises:
            InvalidArgumentError: operand is not an integer.
        """

    @abstractmethod
    def match_on_str(self, operand: Any) -> MatchResult:
        """Match top-level entries by key name.

        Raises:
            InvalidArgumentError: operand is not a string.
        """

    @abstractmethod
    def match_on_path(self, operand: Any) -> MatchResult:
        """Match on the dialect's path operator.

        When duplicate keys yield more than one match, all of them are
        returned in document order.
        """

    def match_on_expr(self, expression: Any) -> MatchResult:
        """Match on a JSONPath expression.

        A valid expression that matches nothing gives an empty result.
        """
        if not isinstance(expression, str):
            raise InvalidArgumentError(
                f"Non-string operand passed to: match_on_expr(): {expression!r}"
            )
        return self.store.get(expression)
