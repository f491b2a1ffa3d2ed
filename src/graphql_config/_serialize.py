# pyright: reportAny=false, reportExplicitAny=false
"""Serialization of graphql-config documents back to the wire format."""

from typing import Any

from graphql_config._models import (
    PROJECTS_KEY,
    GraphQLConfiguration,
    GraphQLProjectConfiguration,
)
from graphql_config.utils import dump_json


def serialize_project(project: GraphQLProjectConfiguration) -> dict[str, Any]:
    """Serialize one project configuration to its wire fields.

    Absent fields are omitted. Only top-level fields are filtered, so ``null``
    values nested inside ``extensions`` are kept.
    """
    dumped = project.model_dump(mode="json", by_alias=True)
    return {key: value for key, value in dumped.items() if value is not None}


def serialize_document(configuration: GraphQLConfiguration) -> dict[str, Any]:
    """Serialize a configuration to a JSON-like wire document.

    The root configuration is flattened into the top level and projects are
    emitted under the reserved ``projects`` key.

    Args:
        configuration: The configuration to serialize.

    Returns:
        A dictionary that parses back to an equal configuration.
    """
    document = serialize_project(configuration.root)
    if configuration.projects is not None:
        document[PROJECTS_KEY] = {
            name: serialize_project(project)
            for name, project in sorted(configuration.projects.items())
        }
    return document


def dumps_json(configuration: GraphQLConfiguration, *, indent: bool = False) -> str:
    """Serialize a configuration to JSON text with sorted keys.

    Raises:
        ConfigSerializationError: If an ``extensions`` value cannot be encoded.
    """
    return dump_json(serialize_document(configuration), indent=indent)
