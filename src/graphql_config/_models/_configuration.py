"""Document configuration model.

This module provides the GraphQLConfiguration Pydantic model for a whole
graphql-config document.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from graphql_config._models._project import GraphQLProjectConfiguration


class GraphQLConfiguration(BaseModel):
    """A whole graphql-config document.

    On the wire the top-level configuration is flattened into the document
    itself; here it lives in ``root``. Named projects are kept sorted by name.

    Attributes:
        root: Top-level configuration.
        projects: Project configurations keyed by project name, or None when
            the document declares no projects.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    root: GraphQLProjectConfiguration = GraphQLProjectConfiguration()
    projects: dict[str, GraphQLProjectConfiguration] | None = None

    @field_validator("projects")
    @classmethod
    def sort_projects(
        cls,
        value: dict[str, GraphQLProjectConfiguration] | None,
    ) -> dict[str, GraphQLProjectConfiguration] | None:
        """Keep projects in name order."""
        if value is None:
            return None
        return dict(sorted(value.items()))

    @classmethod
    def from_document(cls, document: object) -> "GraphQLConfiguration":
        """Create configuration from a JSON-like document.

        Raises:
            ConfigParseError: If the document does not match the wire format.
        """
        # Deferred import to avoid circular dependency
        from graphql_config._parse import parse_document  # noqa: PLC0415

        return parse_document(document)

    @classmethod
    def from_json(cls, text: str | bytes) -> "GraphQLConfiguration":
        """Create configuration from raw JSON text.

        Raises:
            ConfigSyntaxError: If the text is not valid JSON.
            ConfigParseError: If the document does not match the wire format.
        """
        from graphql_config._parse import parse_json  # noqa: PLC0415

        return parse_json(text)

    def to_document(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Serialize to the JSON-like wire document."""
        from graphql_config._serialize import serialize_document  # noqa: PLC0415

        return serialize_document(self)
