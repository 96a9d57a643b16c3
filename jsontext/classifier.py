"""Decide whether a query string is an operator, a JSONPath expression, or neither."""

import logging
import re
from collections.abc import Iterable

from jsontext.models import Classification, QueryKind

logger = logging.getLogger(__name__)

# Historical acceptance pattern
EXPRESSION_PATTERN = re.compile(r"^(\*|\[\d:\d:\d\]|\$\.+[^\d]+)")


def classify(candidate: str, operators: Iterable[str]) -> Classification:
    """
    Classify a candidate query string.

    Operator membership is checked first (exact match, not prefix); only
    then is the JSONPath pattern tried.

    Args:
        candidate: The string passed as operator or expression
        operators: Operator tokens of the active backend

    Returns:
        Classification with kind OPERATOR (and its token), EXPRESSION or INVALID
    """
    if not isinstance(candidate, str) or not candidate:
        return Classification(kind=QueryKind.INVALID)

    if candidate in set(operators):
        logger.debug(f"Classified {candidate!r} as operator")
        return Classification(kind=QueryKind.OPERATOR, token=candidate)

    if EXPRESSION_PATTERN.match(candidate):
        logger.debug(f"Classified {candidate!r} as JSONPath expression")
        return Classification(kind=QueryKind.EXPRESSION)

    return Classification(kind=QueryKind.INVALID)


def is_valid_expression(expression: str) -> bool:
    """Is the passed string an acceptable JSONPath expression?"""
    return isinstance(expression, str) and bool(EXPRESSION_PATTERN.match(expression))


def is_valid_operator(operator: str, backend=None) -> bool:
    """Is the passed string an operator of the given backend?

    ``backend`` may be an OperatorVocabulary, its name, or None for the
    configured default.
    """
    from jsontext.backends import get_backend_class

    if not isinstance(operator, str) or not operator:
        return False
    return operator in get_backend_class(backend).operator_tokens()
