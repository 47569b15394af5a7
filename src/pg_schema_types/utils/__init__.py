"""Utility modules for schema introspection output."""

from pg_schema_types.utils.serialization import dump_definition

__all__ = [
    "dump_definition",
]
