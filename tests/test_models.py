"""Unit tests for models module."""

import pytest

from jsontext.exceptions import InvalidArgumentError
from jsontext.models import (
    IntOperand,
    MatchKind,
    MatchResult,
    PathOperand,
    ReturnType,
    TextOperand,
    to_operand,
)


class TestReturnType:
    """Tests for ReturnType."""

    def test_silverstripe_alias(self):
        assert ReturnType("silverstripe") is ReturnType.TYPED

    def test_from_name_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError):
            ReturnType.from_name("xml")


class TestMatchResult:
    """Tests for MatchResult."""

    def test_multiple_of_nothing_is_empty(self):
        assert MatchResult.multiple([]).kind == MatchKind.EMPTY

    def test_to_data(self):
        assert MatchResult.empty().to_data() == []
        assert MatchResult.single("a", 1).to_data() == {"a": 1}
        assert MatchResult.single(None, 5).to_data() == [5]
        assert MatchResult.multiple([("x", 1), ("y", 2)]).to_data() == [1, 2]

    def test_len(self):
        assert len(MatchResult.multiple([("x", 1), ("y", 2)])) == 2


class TestOperands:
    """Tests for operand tagging."""

    def test_int(self):
        assert to_operand(3) == IntOperand(value=3)

    def test_text(self):
        assert to_operand("a") == TextOperand(value="a")

    def test_mapping_path(self):
        assert to_operand({"a": "b"}) == PathOperand(outer="a", inner="b")

    def test_sequence_path(self):
        assert to_operand(("a", 0)) == PathOperand(outer="a", inner=0)

    def test_passthrough(self):
        operand = IntOperand(value=1)

        assert to_operand(operand) is operand

    @pytest.mark.parametrize("raw", [True, 1.5, None, object(), {"a": 1, "b": 2}, ["a", True]])
    def test_rejects(self, raw):
        with pytest.raises(InvalidArgumentError):
            to_operand(raw)
