"""Typed scalar wrappers used by the typed return mode."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr


class TypedValue(BaseModel):
    """A scalar tagged with its database field kind."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = ""
    value: Any

    def __str__(self) -> str:
        return str(self.value)


class Int(TypedValue):
    kind = "Int"
    value: StrictInt


class Float(TypedValue):
    kind = "Float"
    value: StrictFloat


class Boolean(TypedValue):
    """Booleans are stored as 1 / 0."""

    kind = "Boolean"
    value: StrictInt

    @classmethod
    def from_bool(cls, flag: StrictBool) -> "Boolean":
        return cls(value=1 if flag else 0)


class Varchar(TypedValue):
    kind = "Varchar"
    value: StrictStr


def cast_scalar(val: Any) -> Any:
    """Wrap a scalar in its typed counterpart; anything else (null) is returned as-is."""
    # bool before int: bool is an int subclass
    if isinstance(val, bool):
        return Boolean.from_bool(val)
    if isinstance(val, float):
        return Float(value=val)
    if isinstance(val, int):
        return Int(value=val)
    if isinstance(val, str):
        return Varchar(value=val)
    return val
