"""Shape match results into JSON text, plain structures or typed trees."""

import json
import logging
from typing import Any

from jsontext.exceptions import InvalidArgumentError
from jsontext.models import MatchResult, ReturnType
from jsontext.types import cast_scalar

logger = logging.getLogger(__name__)


def to_json(data: Any, ensure_ascii: bool = True) -> str:
    """Compact JSON text with unescaped slashes.

    Raises:
        InvalidArgumentError: data holds NaN, Infinity or a value JSON cannot encode
    """
    try:
        return json.dumps(data, ensure_ascii=ensure_ascii, separators=(",", ":"), allow_nan=False)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"Value cannot be stored as JSON: {e}") from e


def to_typed(data: Any) -> Any:
    """Rebuild containers with the same shape, wrapping every scalar leaf."""
    if isinstance(data, dict):
        return {key: to_typed(val) for key, val in data.items()}
    if isinstance(data, list):
        return [to_typed(val) for val in data]
    return cast_scalar(data)


def shape(result: MatchResult, mode: ReturnType | str, ensure_ascii: bool = True) -> Any:
    """
    Convert a match result into the requested output shape.

    Empty results give ``"[]"`` for JSON, ``[]`` for array and None for
    typed output.

    Raises:
        InvalidArgumentError: mode is not a known return type
    """
    mode = ReturnType.from_name(mode)
    data = result.to_data()

    if mode == ReturnType.ARRAY:
        return data

    if mode == ReturnType.JSON:
        if result.is_empty:
            return "[]"
        return to_json(data, ensure_ascii=ensure_ascii)

    if mode == ReturnType.TYPED:
        if result.is_empty:
            return None
        return to_typed(data)

    raise InvalidArgumentError(f"Bad return type passed to shape(): {mode!r}")
