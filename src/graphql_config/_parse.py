# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Deserialization of graphql-config documents.

The wire format flattens the top-level project configuration into the document
itself, next to the reserved ``projects`` key. Parsing is done in two passes:
the ``projects`` key is split off, then the remaining top-level fields and each
project entry go through the same per-project routine.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from graphql_config._models import (
    DOCUMENT_CONTEXT,
    EXPECTED_KINDS,
    PROJECTS_KEY,
    ROOT_CONTEXT,
    GraphQLConfiguration,
    GraphQLProjectConfiguration,
    project_context,
)
from graphql_config.exceptions import FieldTypeMismatchError, NotAnObjectError
from graphql_config.utils import create_logger, load_json

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails
    from structlog.typing import FilteringBoundLogger


def describe_kind(value: Any) -> str:
    """Return the JSON kind of a value (object, array, string, ...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list | tuple):
        return "array"
    return type(value).__name__


def _field_type_mismatch(
    error: "ErrorDetails",
    fields: Mapping[str, Any],
    context: str,
) -> FieldTypeMismatchError:
    """Convert the first Pydantic error of a project into a typed error.

    Args:
        error: A single error dict from ValidationError.errors().
        fields: The recognized wire fields that were validated.
        context: ``root`` or ``projects.<name>``.

    Returns:
        A FieldTypeMismatchError naming the offending wire field.
    """
    loc = error.get("loc", ())
    field = str(loc[0]) if loc else ""
    expected_kind = EXPECTED_KINDS.get(field, "valid value")
    value = fields.get(field, error.get("input"))

    msg = (
        f"Invalid value for '{field}' in {context}: "
        f"expected {expected_kind}, got {describe_kind(value)}"
    )
    return FieldTypeMismatchError(
        msg,
        field=field,
        context=context,
        expected_kind=expected_kind,
        value=value,
    )


def parse_project_fields(
    fields: Mapping[str, Any],
    *,
    context: str = ROOT_CONTEXT,
    logger: "FilteringBoundLogger | None" = None,
) -> GraphQLProjectConfiguration:
    """Parse the wire fields of one project configuration.

    Only the recognized wire keys are read. Unknown keys are dropped and never
    end up in ``extensions``. A ``null`` value is treated as an absent field.

    Args:
        fields: Wire fields of the project, without the reserved ``projects`` key.
        context: ``root`` or ``projects.<name>``, used in error reports.
        logger: Optional logger for diagnostics.

    Returns:
        The parsed project configuration.

    Raises:
        FieldTypeMismatchError: If a recognized field has the wrong shape.
    """
    if logger is None:
        logger = create_logger()

    recognized = {key: value for key, value in fields.items() if key in EXPECTED_KINDS}
    ignored = sorted(key for key in fields if key not in EXPECTED_KINDS)
    if ignored:
        logger.debug("ignored_unknown_fields", context=context, fields=ignored)

    try:
        return GraphQLProjectConfiguration.model_validate(recognized)
    except ValidationError as e:
        raise _field_type_mismatch(e.errors()[0], recognized, context) from e


def _parse_projects(
    value: Any,
    logger: "FilteringBoundLogger",
) -> dict[str, GraphQLProjectConfiguration] | None:
    """Parse the value of the reserved ``projects`` key.

    Raises:
        NotAnObjectError: If ``projects`` is not an object with string keys,
            or one of its entries is not an object.
        FieldTypeMismatchError: If a project field has the wrong shape.
    """
    if value is None:
        return None

    if not isinstance(value, Mapping):
        msg = f"Expected '{PROJECTS_KEY}' to be an object, got {describe_kind(value)}"
        raise NotAnObjectError(msg, context=PROJECTS_KEY, value=value)

    for name in value:
        if not isinstance(name, str):
            msg = f"Expected project names in '{PROJECTS_KEY}' to be strings, got {name!r}"
            raise NotAnObjectError(msg, context=PROJECTS_KEY, value=value)

    projects: dict[str, GraphQLProjectConfiguration] = {}
    for name, entry in sorted(value.items()):
        context = project_context(name)
        if not isinstance(entry, Mapping):
            msg = f"Expected project '{name}' to be an object, got {describe_kind(entry)}"
            raise NotAnObjectError(msg, context=context, value=entry)
        projects[name] = parse_project_fields(entry, context=context, logger=logger)

    return projects


def parse_document(
    document: object,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> GraphQLConfiguration:
    """Parse a JSON-like document into a GraphQLConfiguration.

    Every top-level field except ``projects`` belongs to the root
    configuration. Project entries are parsed independently: a field a
    project omits stays absent even when the root configuration sets it.

    Args:
        document: The decoded JSON document.
        logger: Optional logger for diagnostics.

    Returns:
        The parsed configuration.

    Raises:
        NotAnObjectError: If the document, ``projects`` or a project entry is
            not an object.
        FieldTypeMismatchError: If a recognized field has the wrong shape.

    Examples:
        >>> config = parse_document({"schemaPath": "./schema.graphql"})
        >>> config.root.schema_path
        './schema.graphql'
        >>> config.projects is None
        True
    """
    if logger is None:
        logger = create_logger()

    if not isinstance(document, Mapping):
        msg = f"Expected the configuration document to be an object, got {describe_kind(document)}"  # noqa: E501
        raise NotAnObjectError(msg, context=DOCUMENT_CONTEXT, value=document)

    root_fields = {key: value for key, value in document.items() if key != PROJECTS_KEY}
    root = parse_project_fields(root_fields, context=ROOT_CONTEXT, logger=logger)
    projects = _parse_projects(document.get(PROJECTS_KEY), logger)

    logger.debug(
        "parsed_document",
        projects=list(projects) if projects is not None else None,
    )
    return GraphQLConfiguration(root=root, projects=projects)


def parse_json(
    text: str | bytes,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> GraphQLConfiguration:
    """Parse raw JSON text into a GraphQLConfiguration.

    Args:
        text: The JSON text.
        logger: Optional logger for diagnostics.

    Returns:
        The parsed configuration.

    Raises:
        ConfigSyntaxError: If the text is not valid JSON.
        NotAnObjectError: If an object is required but missing.
        FieldTypeMismatchError: If a recognized field has the wrong shape.
    """
    return parse_document(load_json(text), logger=logger)
