"""
Classification of PostgreSQL native (udt) type names into target-language types.

The map below covers the common scalar and one-dimensional array types.
Composite, range and multi-dimensional array types are not listed and fall
through to the ``any`` sentinel.
"""

import logging
from enum import Enum
from typing import Callable, Collection

from pg_schema_types.models.table import TableDefinition

logger = logging.getLogger(__name__)


class TargetType(str, Enum):
    """Type categories emitted for code generation."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "Object"
    DATE = "Date"
    NUMBER_ARRAY = "Array<number>"
    BOOLEAN_ARRAY = "Array<boolean>"
    STRING_ARRAY = "Array<string>"
    OBJECT_ARRAY = "Array<Object>"
    DATE_ARRAY = "Array<Date>"
    ANY = "any"


# udt name -> target type (exact, case-sensitive match)
TYPE_MAP: dict[str, TargetType] = {
    # Strings
    "bpchar":       TargetType.STRING,
    "char":         TargetType.STRING,
    "varchar":      TargetType.STRING,
    "text":         TargetType.STRING,
    "citext":       TargetType.STRING,
    "uuid":         TargetType.STRING,
    "bytea":        TargetType.STRING,
    "inet":         TargetType.STRING,
    "time":         TargetType.STRING,
    "timetz":       TargetType.STRING,
    "interval":     TargetType.STRING,
    "name":         TargetType.STRING,
    # Numbers
    "int2":         TargetType.NUMBER,
    "int4":         TargetType.NUMBER,
    "int8":         TargetType.NUMBER,
    "float4":       TargetType.NUMBER,
    "float8":       TargetType.NUMBER,
    "numeric":      TargetType.NUMBER,
    "money":        TargetType.NUMBER,
    "oid":          TargetType.NUMBER,
    "bool":         TargetType.BOOLEAN,
    "json":         TargetType.OBJECT,
    "jsonb":        TargetType.OBJECT,
    "date":         TargetType.DATE,
    "timestamp":    TargetType.DATE,
    "timestamptz":  TargetType.DATE,
    # Arrays (udt names carry a leading underscore)
    "_int2":        TargetType.NUMBER_ARRAY,
    "_int4":        TargetType.NUMBER_ARRAY,
    "_int8":        TargetType.NUMBER_ARRAY,
    "_float4":      TargetType.NUMBER_ARRAY,
    "_float8":      TargetType.NUMBER_ARRAY,
    "_numeric":     TargetType.NUMBER_ARRAY,
    "_money":       TargetType.NUMBER_ARRAY,
    "_bool":        TargetType.BOOLEAN_ARRAY,
    "_varchar":     TargetType.STRING_ARRAY,
    "_text":        TargetType.STRING_ARRAY,
    "_citext":      TargetType.STRING_ARRAY,
    "_uuid":        TargetType.STRING_ARRAY,
    "_bytea":       TargetType.STRING_ARRAY,
    "_json":        TargetType.OBJECT_ARRAY,
    "_jsonb":       TargetType.OBJECT_ARRAY,
    "_timestamptz": TargetType.DATE_ARRAY,
}


def _identity(name: str) -> str:
    return name


def classify_type(
    native_type: str,
    custom_types: Collection[str] = (),
    transform: Callable[[str], str] = _identity,
) -> str:
    """
    Classify a native type name into a target type.

    Built-in names always win over custom types. A custom (enum) type name
    is projected through ``transform``; anything else maps to ``any`` and
    logs a warning.

    Args:
        native_type: udt name as reported by the catalog (e.g. "int4", "_text")
        custom_types: Known custom type names (enum catalog keys)
        transform: Projection applied to custom type names

    Returns:
        Target type name
    """
    target = TYPE_MAP.get(native_type)
    if target is not None:
        return target.value

    if native_type in custom_types:
        return transform(native_type)

    logger.warning(
        f"Type [{native_type}] has been mapped to [{TargetType.ANY.value}] "
        f"because no specific type has been found."
    )
    return TargetType.ANY.value


def map_table_definition(
    table: TableDefinition,
    custom_types: Collection[str] = (),
    transform: Callable[[str], str] = _identity,
) -> TableDefinition:
    """
    Return a copy of a table definition with every column classified.

    Args:
        table: Table definition as read from the catalog
        custom_types: Known custom type names, or the enum catalog itself
        transform: Projection applied to custom type names

    Returns:
        New table definition; the input is left untouched
    """
    known = frozenset(custom_types)

    columns = {
        name: column.model_copy(
            update={
                "target_type": classify_type(column.native_type, known, transform)
            }
        )
        for name, column in table.columns.items()
    }

    return table.model_copy(update={"columns": columns})
