"""graphql-config document model.

This package deserializes and validates configuration documents following
version 2.0.1 of the graphql-config specification. A document holds a
top-level project configuration and, optionally, named project
configurations of the same shape.

Experimental configuration options are not supported and are ignored.

Example:
    >>> from graphql_config import parse_document
    >>> config = parse_document({
    ...     "schemaPath": "./schema.graphql",
    ...     "projects": {"app": {"schemaPath": "./app.graphql"}},
    ... })
    >>> config.root.schema_path
    './schema.graphql'
    >>> config.projects["app"].schema_path
    './app.graphql'
"""

from graphql_config._models import (
    GraphQLConfiguration,
    GraphQLProjectConfiguration,
)
from graphql_config._parse import parse_document, parse_json, parse_project_fields
from graphql_config._serialize import dumps_json, serialize_document
from graphql_config._validation import (
    ValidationIssue,
    get_config_schema,
    raise_if_validation_errors,
    validate_document,
)
from graphql_config.exceptions import (
    ConfigParseError,
    ConfigSerializationError,
    ConfigSyntaxError,
    ConfigValidationError,
    FieldTypeMismatchError,
    GraphQLConfigError,
    NotAnObjectError,
)
from graphql_config.utils import create_logger

__all__ = [
    "ConfigParseError",
    "ConfigSerializationError",
    "ConfigSyntaxError",
    "ConfigValidationError",
    "FieldTypeMismatchError",
    "GraphQLConfigError",
    "GraphQLConfiguration",
    "GraphQLProjectConfiguration",
    "NotAnObjectError",
    "ValidationIssue",
    "create_logger",
    "dumps_json",
    "get_config_schema",
    "parse_document",
    "parse_json",
    "parse_project_fields",
    "raise_if_validation_errors",
    "serialize_document",
    "validate_document",
]
