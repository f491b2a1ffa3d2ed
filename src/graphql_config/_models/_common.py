"""Common configuration types.

This module defines the reserved wire keys, the error contexts used when
reporting problems, and the descriptions of accepted field shapes.
"""

from typing import Final

PROJECTS_KEY: Final = "projects"
"""Reserved top-level key holding named project configurations."""

DOCUMENT_CONTEXT: Final = "document"
ROOT_CONTEXT: Final = "root"

EXPECTED_KINDS: Final[dict[str, str]] = {
    "name": "string",
    "schemaPath": "string",
    "includes": "array of strings",
    "excludes": "array of strings",
    "extensions": "object",
}
"""Accepted shape for each recognized project field, keyed by wire name."""


def project_context(name: str) -> str:
    """Return the error context for the project stored under ``name``."""
    return f"{PROJECTS_KEY}.{name}"
