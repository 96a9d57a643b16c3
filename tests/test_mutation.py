"""Tests for set_value_at() and the mutation applier."""

import json

import pytest

from jsontext.exceptions import (
    InvalidArgumentError,
    InvalidExpressionError,
    MalformedJsonError,
    NoMatchError,
)
from jsontext.field import is_valid_json
from jsontext.mutation import apply_mutation, set_value_at
from jsontext.store import JsonStore


class TestSetValueAt:
    """Tests for set_value_at()."""

    def test_replaces_one_index(self, test_settings):
        """Should replace only the indexed array element."""
        doc = '{"store":{"book":[{"a":1},{"a":2}]}}'

        updated = set_value_at(doc, {"a": 99}, "$.store.book[1]", settings=test_settings)

        assert updated == '{"store":{"book":[{"a":1},{"a":99}]}}'

    def test_bulk_update(self, test_settings, store_doc):
        """Should write the value to every matched node."""
        updated = set_value_at(store_doc, "anon", "$..author", settings=test_settings)

        authors = [book["author"] for book in json.loads(updated)["store"]["book"]]
        assert authors == ["anon", "anon"]

    def test_idempotent(self, test_settings, store_doc):
        """Should give the same text for the same call, and again when reapplied."""
        expr = "$.store.bicycle.price"

        first = set_value_at(store_doc, 1, expr, settings=test_settings)
        second = set_value_at(store_doc, 1, expr, settings=test_settings)
        reapplied = set_value_at(first, 1, expr, settings=test_settings)

        assert first == second
        assert reapplied == first

    def test_output_is_valid_document(self, test_settings, store_doc):
        """Should produce text that parses back as a document."""
        updated = set_value_at(store_doc, [1, "two"], "$.store.bicycle", settings=test_settings)

        assert is_valid_json(updated)

    def test_operator_rejected(self, test_settings):
        """Should refuse operator tokens as update targets."""
        with pytest.raises(InvalidExpressionError):
            set_value_at('{"a": 1}', 2, "->>", settings=test_settings)

    def test_no_match(self, test_settings):
        """Should raise NoMatchError when nothing matches."""
        with pytest.raises(NoMatchError):
            set_value_at('{"a": 1}', 2, "$.b", settings=test_settings)

    def test_empty_document(self, test_settings):
        """An empty stored value reads as [] and so matches nothing."""
        with pytest.raises(NoMatchError):
            set_value_at("", 2, "$.a", settings=test_settings)

    def test_malformed_document(self, test_settings):
        """Should reject stored text that is not a document."""
        with pytest.raises(MalformedJsonError):
            set_value_at("true", 2, "$.a", settings=test_settings)

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), {1, 2}, object(), {"a": float("nan")}],
    )
    def test_unstorable_value(self, test_settings, value):
        """Should raise InvalidArgumentError instead of writing non-JSON text."""
        with pytest.raises(InvalidArgumentError):
            set_value_at('{"a":1}', value, "$.a", settings=test_settings)


class TestApplyMutation:
    """Tests for apply_mutation()."""

    def test_reserializes(self):
        """Should return the whole document re-serialized compactly."""
        store = JsonStore('{"a": {"b": 1}, "c": [1, 2]}')

        assert apply_mutation(store, "$.a.b", None) == '{"a":{"b":null},"c":[1,2]}'

    def test_nan_rejected(self):
        """Should not serialize NaN as a bare literal."""
        store = JsonStore('{"a": 1}')

        with pytest.raises(InvalidArgumentError):
            apply_mutation(store, "$.a", float("nan"))
