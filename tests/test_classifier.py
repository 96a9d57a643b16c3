"""Unit tests for the classifier module."""

import pytest

from jsontext.classifier import classify, is_valid_expression, is_valid_operator
from jsontext.exceptions import ConfigurationError
from jsontext.models import QueryKind

OPERATORS = {"->", "->>", "#>"}


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize("token", ["->", "->>", "#>"])
    def test_operators(self, token):
        """Exact operator tokens classify as operators."""
        result = classify(token, OPERATORS)

        assert result.kind == QueryKind.OPERATOR
        assert result.token == token

    @pytest.mark.parametrize(
        "expr",
        ["$..c", "$.store.book[1]", "$.store.book[*].author", "*", "[1:2:1]", "$..book[?(@.price<10)]"],
    )
    def test_expressions(self, expr):
        """Root-anchored paths, '*' and slices classify as JSONPath."""
        result = classify(expr, OPERATORS)

        assert result.kind == QueryKind.EXPRESSION
        assert result.token is None

    @pytest.mark.parametrize("candidate", ["", "$", "$.1", "foo", "-", "->>>", "=>", "[1:2]"])
    def test_invalid(self, candidate):
        """Anything else is invalid."""
        assert classify(candidate, OPERATORS).kind == QueryKind.INVALID

    def test_operator_is_exact_membership(self):
        """A prefix of an operator is not an operator."""
        assert classify("-", OPERATORS).kind == QueryKind.INVALID

    def test_operator_needs_backend_vocabulary(self):
        """Without a vocabulary, operator tokens are invalid."""
        assert classify("->", set()).kind == QueryKind.INVALID

    def test_non_string(self):
        """Non-strings are invalid, never an error."""
        assert classify(5, OPERATORS).kind == QueryKind.INVALID

    def test_total(self):
        """Each input maps to exactly one kind."""
        for candidate in ["->", "$..a", "nope"]:
            result = classify(candidate, OPERATORS)
            assert [result.is_operator, result.is_expression].count(True) <= 1


class TestPredicates:
    """Tests for the pure validity predicates."""

    def test_is_valid_expression(self):
        assert is_valid_expression("$..a") is True
        assert is_valid_expression("->") is False
        assert is_valid_expression(None) is False

    def test_is_valid_operator(self):
        assert is_valid_operator("#>", "postgres") is True
        assert is_valid_operator("$..a", "postgres") is False
        assert is_valid_operator("", "postgres") is False

    def test_is_valid_operator_unknown_backend(self):
        """An unresolvable backend is a configuration error."""
        with pytest.raises(ConfigurationError):
            is_valid_operator("->", "oracle")
