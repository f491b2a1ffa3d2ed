# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownParameterType=false, reportUnknownVariableType=false
"""Document validation using Pydantic schemas.

Parsing stops at the first problem; this module reports every problem in a
document at once. It uses wire-shaped schemas built on the frozen models from
_models/ and provides strict variants that reject unknown keys.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from pydantic import ConfigDict, ValidationError

from graphql_config._models import (
    DOCUMENT_CONTEXT,
    EXPECTED_KINDS,
    PROJECTS_KEY,
    ROOT_CONTEXT,
    GraphQLProjectConfiguration,
    project_context,
)
from graphql_config.exceptions import ConfigValidationError
from graphql_config.utils import create_logger

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails
    from structlog.typing import FilteringBoundLogger


# -----------------------------------------------------------------------------
# Validation Issue
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the offending value (e.g., "projects.app.schemaPath").
            Empty for the document itself.
        message: Human-readable description of the issue.
        expected: Description of the expected shape, if available.
        actual: The actual value that caused the issue.
        context: Where the issue was found: "document", "root", "projects"
            or "projects.<name>".
        severity: Whether this is an error or warning.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    context: str
    severity: Literal["error", "warning"]


# -----------------------------------------------------------------------------
# Pydantic Schemas (Lenient Mode - ignores unknown keys)
# The wire document is the root project's fields plus "projects". Validation
# by field name is disabled so that only wire keys are recognized.
# -----------------------------------------------------------------------------


class ProjectSchema(GraphQLProjectConfiguration):
    """Pydantic schema for a project configuration (lenient mode)."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=False,
    )


class DocumentSchema(ProjectSchema):
    """Pydantic schema for a graphql-config document (lenient mode)."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=False,
        title="GraphQLConfiguration",
    )

    projects: dict[str, ProjectSchema] | None = None


# -----------------------------------------------------------------------------
# Pydantic Schemas (Strict Mode - rejects unknown keys)
# -----------------------------------------------------------------------------


class ProjectSchemaStrict(GraphQLProjectConfiguration):
    """Pydantic schema for a project configuration (strict mode)."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=False,
    )


class DocumentSchemaStrict(ProjectSchemaStrict):
    """Pydantic schema for a graphql-config document (strict mode)."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=False,
        title="GraphQLConfiguration",
    )

    projects: dict[str, ProjectSchemaStrict] | None = None


# -----------------------------------------------------------------------------
# Validation Functions
# -----------------------------------------------------------------------------


def _context_for(loc: tuple[int | str, ...]) -> str:
    """Return the context an error location belongs to."""
    if not loc:
        return DOCUMENT_CONTEXT
    if loc[0] == PROJECTS_KEY:
        if len(loc) == 1:
            return PROJECTS_KEY
        return project_context(str(loc[1]))
    return ROOT_CONTEXT


def _expected_for(loc: tuple[int | str, ...], error_type: str) -> str | None:
    """Return the expected shape for an error location, if known."""
    if error_type == "extra_forbidden":
        return None

    # Field name sits after "projects.<name>" inside a project entry
    field_index = 2 if loc and loc[0] == PROJECTS_KEY else 0
    if len(loc) <= field_index:
        return "object"
    return EXPECTED_KINDS.get(str(loc[field_index]))


def _pydantic_error_to_issue(error: "ErrorDetails") -> ValidationIssue:
    """Convert a Pydantic error dict to a ValidationIssue.

    Args:
        error: A single error dict from ValidationError.errors().

    Returns:
        A ValidationIssue representing the validation error.
    """
    loc = tuple(error.get("loc", ()))
    error_type = str(error.get("type", ""))

    return ValidationIssue(
        key=".".join(str(part) for part in loc),
        message=str(error.get("msg", "Validation error")),
        expected=_expected_for(loc, error_type),
        actual=error.get("input"),
        context=_context_for(loc),
        severity="error",
    )


def validate_document(
    document: object,
    *,
    strict: bool = False,
    logger: "FilteringBoundLogger | None" = None,
) -> list[ValidationIssue]:
    """Validate a graphql-config document and report every issue.

    Args:
        document: The decoded JSON document to validate.
        strict: If True, unknown keys are errors. If False, they are ignored.
        logger: Optional logger for diagnostics.

    Returns:
        List of ValidationIssue objects. Empty list indicates a valid document.
    """
    if logger is None:
        logger = create_logger()

    schema_class = DocumentSchemaStrict if strict else DocumentSchema

    try:
        _ = schema_class.model_validate(document)
    except ValidationError as e:
        issues = [_pydantic_error_to_issue(err) for err in e.errors()]
        logger.debug("validated_document", strict=strict, issues=len(issues))
        return issues
    else:
        logger.debug("validated_document", strict=strict, issues=0)
        return []


def raise_if_validation_errors(issues: list[ValidationIssue]) -> None:
    """Raise ConfigValidationError if any validation errors exist.

    Args:
        issues: List of ValidationIssue objects to check.

    Raises:
        ConfigValidationError: For the first issue with severity="error".
    """
    errors = [i for i in issues if i.severity == "error"]
    if errors:
        issue = errors[0]
        location = issue.key or issue.context
        msg = f"Invalid configuration value for '{location}'"
        raise ConfigValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
            context=issue.context,
        )


def get_config_schema(*, strict: bool = False) -> dict[str, Any]:
    """Get the JSON Schema for graphql-config documents.

    Properties use wire names (``schemaPath``), and ``projects`` maps project
    names to the shared project shape.

    Args:
        strict: If True, returns schema that rejects unknown keys.
            If False (default), returns schema that ignores unknown keys.

    Returns:
        JSON Schema dictionary for graphql-config documents.

    Examples:
        >>> schema = get_config_schema()
        >>> schema["title"]
        'GraphQLConfiguration'
        >>> "schemaPath" in schema["properties"]
        True
    """
    schema_class = DocumentSchemaStrict if strict else DocumentSchema
    return schema_class.model_json_schema()
