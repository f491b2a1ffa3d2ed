"""Project configuration model.

This module provides the GraphQLProjectConfiguration Pydantic model shared by
the top-level configuration and every named project.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue, StrictStr


class GraphQLProjectConfiguration(BaseModel):
    """Configuration of a single GraphQL project.

    The top-level configuration and project-specific configurations share this
    shape. Every field is optional and an absent field stays ``None``; nothing
    is inherited from the top-level configuration.

    Attributes:
        name: The name of the project. Independent of the key the project is
            stored under in ``projects``.
        schema_path: A file with schema IDL.
        includes: Glob patterns selecting files that belong to the project.
        excludes: Glob patterns selecting files that do not belong to the project.
        extensions: Tool-specific settings, kept verbatim.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    name: StrictStr | None = Field(default=None, description="Project name.")
    schema_path: StrictStr | None = Field(
        default=None,
        alias="schemaPath",
        description="A file with schema IDL.",
    )
    includes: tuple[StrictStr, ...] | None = Field(
        default=None,
        description="Glob patterns of files to include.",
    )
    excludes: tuple[StrictStr, ...] | None = Field(
        default=None,
        description="Glob patterns of files to exclude.",
    )
    extensions: dict[str, JsonValue] | None = Field(
        default=None,
        description="Reserved namespace for tool-specific configuration.",
    )
