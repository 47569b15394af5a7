"""
pg_schema_types - PostgreSQL schema introspection for typed bindings

Reads table, column and enum metadata from the PostgreSQL system catalog and
classifies every column's native type into a target-language type category.
"""

__version__ = "0.1.0"

from pg_schema_types.adapters import BaseAdapter, PostgresAdapter, create_adapter
from pg_schema_types.core import (
    DatabaseConnection,
    SchemaInspector,
    TargetType,
    build_enum_catalog,
    classify_type,
    map_table_definition,
)
from pg_schema_types.models import (
    DEFAULT_SCHEMA,
    CatalogColumn,
    ColumnDefinition,
    DatabaseConfig,
    EnumCatalog,
    IntrospectionOptions,
    SchemaDefinition,
    TableDefinition,
)
from pg_schema_types.utils import dump_definition

__all__ = [
    "DEFAULT_SCHEMA",
    "BaseAdapter",
    "PostgresAdapter",
    "create_adapter",
    "DatabaseConnection",
    "SchemaInspector",
    "TargetType",
    "build_enum_catalog",
    "classify_type",
    "map_table_definition",
    "DatabaseConfig",
    "IntrospectionOptions",
    "CatalogColumn",
    "ColumnDefinition",
    "EnumCatalog",
    "TableDefinition",
    "SchemaDefinition",
    "dump_definition",
]
