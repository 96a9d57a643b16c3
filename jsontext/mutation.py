"""Apply a JSONPath update to a document and re-serialize it."""

import logging
from collections.abc import Iterable
from typing import Any

from jsontext.backends import get_backend_class
from jsontext.config import Settings, get_settings
from jsontext.store import JsonStore

logger = logging.getLogger(__name__)


def apply_mutation(
    store: JsonStore,
    expr: str,
    value: Any,
    operators: Iterable[str] = (),
    ensure_ascii: bool = True,
) -> str:
    """
    Set value on every node of store matched by expr and return the new text.

    The whole document is re-serialized; there is no partial patching.

    Raises:
        InvalidExpressionError: expr is an operator or not JSONPath
        NoMatchError: expr matches nothing
        InvalidArgumentError: value cannot be serialized as JSON
    """
    count = store.set(expr, value, operators=operators)
    logger.debug(f"Mutation at {expr!r} touched {count} node(s)")
    return store.to_string(ensure_ascii=ensure_ascii)


def set_value_at(
    json_text: str | None,
    new_value: Any,
    expr: str,
    settings: Settings | None = None,
) -> str:
    """
    Return json_text with new_value written at every node matched by expr.

    An empty json_text is treated as the document ``[]``.

    Args:
        json_text: Current stored JSON text
        new_value: Replacement value (any JSON-serializable object)
        expr: JSONPath expression; operator tokens are rejected
        settings: Optional settings (defaults to environment)
    """
    settings = settings or get_settings()
    operators = get_backend_class(settings.backend).operator_tokens()
    store = JsonStore(json_text or "[]")
    return apply_mutation(
        store, expr, new_value, operators=operators, ensure_ascii=settings.ensure_ascii
    )
