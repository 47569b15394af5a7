"""JSON output of introspection results using orjson.

The code generation layer consumes these documents; key order follows the
catalog order of the underlying definitions.
"""

from typing import Any

import orjson
from pydantic import BaseModel


def _default_handler(obj: Any) -> Any:
    """
    Custom default handler for types orjson doesn't handle natively.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation

    Raises:
        TypeError: If object cannot be serialized
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    if isinstance(obj, (set, frozenset)):
        return sorted(obj)

    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dump_definition(obj: Any, indent: bool = True) -> str:
    """
    Serialize a table/schema definition or enum catalog to a JSON string.

    Args:
        obj: TableDefinition, SchemaDefinition, enum catalog or plain data
        indent: Pretty-print with two-space indentation

    Returns:
        JSON string
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(obj, default=_default_handler, option=option).decode("utf-8")
