"""Core introspection components."""

from pg_schema_types.core.connection import DatabaseConnection
from pg_schema_types.core.enums import build_enum_catalog
from pg_schema_types.core.inspector import SchemaInspector
from pg_schema_types.core.type_mapper import (
    TYPE_MAP,
    TargetType,
    classify_type,
    map_table_definition,
)

__all__ = [
    "DatabaseConnection",
    "SchemaInspector",
    "TargetType",
    "TYPE_MAP",
    "build_enum_catalog",
    "classify_type",
    "map_table_definition",
]
