"""Pydantic models for configuration and introspection results."""

from .config import DEFAULT_SCHEMA, DatabaseConfig, IntrospectionOptions
from .table import (
    CatalogColumn,
    ColumnDefinition,
    EnumCatalog,
    SchemaDefinition,
    TableDefinition,
)

__all__ = [
    "DEFAULT_SCHEMA",
    "DatabaseConfig",
    "IntrospectionOptions",
    "CatalogColumn",
    "ColumnDefinition",
    "EnumCatalog",
    "TableDefinition",
    "SchemaDefinition",
]
