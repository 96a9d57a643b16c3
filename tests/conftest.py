"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def store_doc():
    """The classic bookstore document."""
    return (
        '{"store":{"book":['
        '{"category":"reference","author":"Nigel Rees","title":"Sayings of the Century","price":8.95},'
        '{"category":"fiction","author":"Evelyn Waugh","title":"Sword of Honour","price":12.99}'
        '],"bicycle":{"color":"red","price":19.95}}}'
    )


@pytest.fixture
def duplicate_key_doc():
    """Object with the key 'a' repeated at the top level."""
    return '{"a":{"b":1},"a":{"b":2}}'


@pytest.fixture
def sample_files(tmp_path):
    """Create sample JSON files for CLI tests."""
    (tmp_path / "nested.json").write_text('{"a": {"b": {"c": "foo"}}}')
    (tmp_path / "list.json").write_text('["x", "y", "z"]')
    (tmp_path / "books.json").write_text('{"store": {"book": [{"a": 1}, {"a": 2}]}}')
    (tmp_path / "scalar.json").write_text("true")
    return tmp_path


@pytest.fixture
def test_settings():
    """Create test settings with safe defaults, ignoring any .env file."""
    from jsontext.config import Settings

    return Settings(_env_file=None, backend="postgres", return_type="json")


@pytest.fixture
def make_field(test_settings):
    """Factory for JSONText fields bound to test settings."""
    from jsontext.field import JSONText

    def _make(value=None, return_type="json"):
        return JSONText(value, settings=test_settings).set_return_type(return_type)

    return _make
