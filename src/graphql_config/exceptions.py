"""graphql-config exceptions."""

from typing import Any


class GraphQLConfigError(Exception):
    """Base exception for graphql-config errors."""


class ConfigParseError(GraphQLConfigError):
    """Base exception for documents that cannot be parsed into the model."""


class ConfigSyntaxError(ConfigParseError):
    """Raised when raw configuration text is not valid JSON."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.line: int | None = line
        self.column: int | None = column


class NotAnObjectError(ConfigParseError):
    """Raised when an object is required but another JSON value was found.

    Attributes:
        context: Where the object was expected: ``document``, ``projects``
            or ``projects.<name>``.
        value: The offending value.
    """

    def __init__(
        self,
        message: str,
        *,
        context: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
    ) -> None:
        """Initialize with error message and structural context."""
        super().__init__(message)
        self.context: str = context
        self.value: Any = value  # pyright: ignore[reportExplicitAny]


class FieldTypeMismatchError(ConfigParseError):
    """Raised when a recognized project field holds a value of the wrong shape.

    Attributes:
        field: Wire name of the field (e.g. ``schemaPath``).
        context: ``root`` or ``projects.<name>``.
        expected_kind: Human-readable description of the accepted shape.
        value: The offending value.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        context: str,
        expected_kind: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
    ) -> None:
        """Initialize with error message and field context."""
        super().__init__(message)
        self.field: str = field
        self.context: str = context
        self.expected_kind: str = expected_kind
        self.value: Any = value  # pyright: ignore[reportExplicitAny]


class ConfigValidationError(GraphQLConfigError):
    """Raised when a batch of validation issues contains an error."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        context: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.context: str | None = context


class ConfigSerializationError(GraphQLConfigError):
    """Raised when a configuration cannot be encoded as JSON text.

    Attributes:
        cause: The encoder error that stopped serialization.
    """

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        """Initialize with error message and the underlying encoder error."""
        super().__init__(message)
        self.cause: Exception | None = cause
