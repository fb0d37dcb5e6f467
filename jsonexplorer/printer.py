import json
import logging

from typing import Any

logger = logging.getLogger(__name__)

INDENT = 2
FORMAT_ERROR_TEXT = "Error formatting JSON"


def pretty_print(value: Any, indent: int = INDENT) -> str:
    """Return indented JSON serialization of `value`, keeping keys and elements order.

    Non-ASCII characters are written as is. Values that cannot be serialized (NaN, infinite numbers, non JSON types)
    produce a fixed placeholder text instead of raising.
    """
    try:
        return json.dumps(
            value,
            indent=indent,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ": "),
        )
    except (TypeError, ValueError, RecursionError):
        logger.exception("Failed to format value of type %s", type(value).__name__)
        return FORMAT_ERROR_TEXT
