"""Error types raised by the query and mutation engine.

Every failure reaches the caller as one of these; nothing is logged and
swallowed. A valid request that matches nothing is not an error.
"""


class JSONTextError(Exception):
    """Base exception for all JSONText errors."""

    pass


class MalformedJsonError(JSONTextError):
    """Stored text is not valid JSON, or is a bare scalar rather than a document."""

    pass


class InvalidArgumentError(JSONTextError):
    """Exception raised for a wrong operand kind, mode name or argument combination."""

    pass


class InvalidExpressionError(JSONTextError):
    """Exception raised when a string is not an acceptable JSONPath expression."""

    pass


class InvalidOperatorOrExpressionError(InvalidArgumentError, InvalidExpressionError):
    """A query string that is neither a backend operator nor a JSONPath expression."""

    pass


class MutationError(JSONTextError):
    """Exception raised when an update cannot be applied to the document."""

    pass


class NoMatchError(MutationError):
    """The update expression matched no node in the document."""

    pass


class ConfigurationError(JSONTextError):
    """The configured operator backend cannot be resolved."""

    pass
