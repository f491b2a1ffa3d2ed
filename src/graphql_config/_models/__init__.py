"""Configuration models.

This module provides the Pydantic models for graphql-config documents.
"""

from graphql_config._models._common import (
    DOCUMENT_CONTEXT,
    EXPECTED_KINDS,
    PROJECTS_KEY,
    ROOT_CONTEXT,
    project_context,
)
from graphql_config._models._configuration import GraphQLConfiguration
from graphql_config._models._project import GraphQLProjectConfiguration

__all__ = [
    "DOCUMENT_CONTEXT",
    "EXPECTED_KINDS",
    "PROJECTS_KEY",
    "ROOT_CONTEXT",
    "GraphQLConfiguration",
    "GraphQLProjectConfiguration",
    "project_context",
]
