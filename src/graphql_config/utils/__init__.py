"""Utility helpers shared across graphql-config."""

from ._json import dump_json, load_json
from ._logging import create_logger

__all__ = ["create_logger", "dump_json", "load_json"]
