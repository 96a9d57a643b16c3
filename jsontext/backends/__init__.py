"""Operator backends, one per supported dialect."""

from jsontext.backends.base import JSONBackend
from jsontext.backends.postgres import PostgresJSONBackend
from jsontext.exceptions import ConfigurationError
from jsontext.models import OperatorVocabulary
from jsontext.store import JsonStore

BACKENDS: dict[OperatorVocabulary, type[JSONBackend]] = {
    OperatorVocabulary.POSTGRES: PostgresJSONBackend,
}

__all__ = [
    "BACKENDS",
    "JSONBackend",
    "PostgresJSONBackend",
    "get_backend",
    "get_backend_class",
]


def get_backend_class(backend: OperatorVocabulary | str | None = None) -> type[JSONBackend]:
    """Resolve a vocabulary (or its name) to its backend class.

    None selects the configured default.
    """
    if backend is None:
        from jsontext.config import get_settings

        backend = get_settings().backend

    try:
        vocabulary = OperatorVocabulary(backend)
    except ValueError:
        raise ConfigurationError(f"Unknown JSON backend: {backend!r}") from None

    if vocabulary not in BACKENDS:
        raise ConfigurationError(f"No backend registered for: {vocabulary.value}")
    return BACKENDS[vocabulary]


def get_backend(store: JsonStore, backend: OperatorVocabulary | str | None = None) -> JSONBackend:
    """Create a backend instance bound to store."""
    return get_backend_class(backend)(store)
