"""JSON text decoding and encoding backed by orjson."""

from typing import Any

import orjson

from graphql_config.exceptions import ConfigSerializationError, ConfigSyntaxError


def load_json(text: str | bytes) -> Any:  # pyright: ignore[reportExplicitAny]
    """Load and parse a JSON string.

    Integers beyond the 64-bit range are decoded as floats, losing precision.
    Numbers too large for a float (e.g. ``1e400``) are rejected as a syntax
    error.

    Args:
        text: The JSON text to parse.

    Returns:
        The parsed JSON value.

    Raises:
        ConfigSyntaxError: If the text is not valid JSON.
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        msg = f"Failed to parse JSON: {e.msg}"
        raise ConfigSyntaxError(msg, line=e.lineno, column=e.colno) from e


def dump_json(value: Any, *, indent: bool = False) -> str:  # pyright: ignore[reportExplicitAny]
    """Encode a JSON-like value as text with sorted keys.

    Raises:
        ConfigSerializationError: If the value cannot be encoded, such as an
            integer outside the 64-bit range.
    """
    option = orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    try:
        return orjson.dumps(value, option=option).decode()
    except orjson.JSONEncodeError as e:
        msg = f"Failed to encode JSON: {e}"
        raise ConfigSerializationError(msg, cause=e) from e
