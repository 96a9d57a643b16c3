import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from jsontext.exceptions import InvalidArgumentError

KeyRef = Union[StrictStr, StrictInt]


class ReturnType(str, Enum):
    """Output shapes for query results."""

    JSON = "json"
    ARRAY = "array"
    TYPED = "typed"

    @classmethod
    def _missing_(cls, value: object):
        # Historical name for typed output
        if value == "silverstripe":
            return cls.TYPED
        return None

    @classmethod
    def from_name(cls, name: "str | ReturnType") -> "ReturnType":
        """Resolve a mode name, raising InvalidArgumentError for unknown names."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidArgumentError(f"Bad return type: {name!r}") from None


class OperatorVocabulary(str, Enum):
    """Supported operator dialects, one per backend."""

    POSTGRES = "postgres"


class QueryKind(str, Enum):
    """How a query string was classified."""

    OPERATOR = "operator"
    EXPRESSION = "expression"
    INVALID = "invalid"


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: QueryKind
    token: str | None = None  # set for OPERATOR only

    @property
    def is_operator(self) -> bool:
        return self.kind == QueryKind.OPERATOR

    @property
    def is_expression(self) -> bool:
        return self.kind == QueryKind.EXPRESSION


class MatchKind(str, Enum):
    EMPTY = "empty"
    SINGLE = "single"
    MULTIPLE = "multiple"


class MatchResult(BaseModel):
    """Matches found by a query, each paired with the key it was found under.

    Keys only re-associate a value with its origin when the result is shaped
    for output.
    """

    model_config = ConfigDict(frozen=True)

    kind: MatchKind = MatchKind.EMPTY
    entries: list[tuple[KeyRef | None, Any]] = []

    @classmethod
    def empty(cls) -> "MatchResult":
        return cls()

    @classmethod
    def single(cls, key: KeyRef | None, value: Any) -> "MatchResult":
        return cls(kind=MatchKind.SINGLE, entries=[(key, value)])

    @classmethod
    def multiple(cls, pairs: list[tuple[KeyRef | None, Any]]) -> "MatchResult":
        if not pairs:
            return cls()
        return cls(kind=MatchKind.MULTIPLE, entries=list(pairs))

    @property
    def is_empty(self) -> bool:
        return self.kind == MatchKind.EMPTY

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[KeyRef | None]:
        return [key for key, _ in self.entries]

    def values(self) -> list[Any]:
        return [value for _, value in self.entries]

    def to_data(self) -> Any:
        """Plain nested structure for this result.

        Empty gives ``[]``, a keyed single match gives ``{key: value}``,
        several matches give the list of their values.
        """
        if self.kind == MatchKind.EMPTY:
            return []
        if self.kind == MatchKind.SINGLE:
            key, value = self.entries[0]
            if key is None:
                return value if isinstance(value, (dict, list)) else [value]
            return {key: value}
        return self.values()


class IntOperand(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: StrictInt


class TextOperand(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: StrictStr


class PathOperand(BaseModel):
    """A one-level path: the outer key, then the key to read inside it."""

    model_config = ConfigDict(frozen=True)

    outer: KeyRef
    inner: KeyRef

    @classmethod
    def from_raw(cls, raw: Any) -> "PathOperand":
        """Build from ``{"outer": "inner"}``, ``["outer", "inner"]`` or JSON text of either."""
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                raise InvalidArgumentError(
                    f"Path operand is not valid JSON: {raw!r}"
                ) from None

        if isinstance(raw, Mapping) and len(raw) == 1:
            outer, inner = next(iter(raw.items()))
        elif isinstance(raw, (list, tuple)) and len(raw) == 2:
            outer, inner = raw
        else:
            raise InvalidArgumentError(
                f"Path operand must be a single key/key pair, got: {raw!r}"
            )

        for part in (outer, inner):
            if isinstance(part, bool) or not isinstance(part, (str, int)):
                raise InvalidArgumentError(f"Invalid path component: {part!r}")
        return cls(outer=outer, inner=inner)


Operand = Union[IntOperand, TextOperand, PathOperand]


def to_operand(raw: Any) -> Operand:
    """Wrap a raw query operand in its tagged variant."""
    if isinstance(raw, (IntOperand, TextOperand, PathOperand)):
        return raw
    # bool is an int subclass; never treat True as index 1
    if isinstance(raw, bool):
        raise InvalidArgumentError(f"Boolean operand not allowed: {raw!r}")
    if isinstance(raw, int):
        return IntOperand(value=raw)
    if isinstance(raw, str):
        return TextOperand(value=raw)
    if isinstance(raw, (Mapping, list, tuple)):
        return PathOperand.from_raw(raw)
    raise InvalidArgumentError(f"Unsupported operand type: {type(raw).__name__}")
