"""Schema introspection: relation discovery and table definition assembly."""

import logging
from typing import TYPE_CHECKING, Optional

from pg_schema_types.core.connection import DatabaseConnection
from pg_schema_types.core.type_mapper import map_table_definition
from pg_schema_types.models.config import IntrospectionOptions
from pg_schema_types.models.table import (
    CatalogColumn,
    ColumnDefinition,
    EnumCatalog,
    SchemaDefinition,
    TableDefinition,
)

if TYPE_CHECKING:
    from pg_schema_types.adapters.base import BaseAdapter

logger = logging.getLogger(__name__)


class SchemaInspector:
    """Builds typed table definitions from catalog metadata."""

    def __init__(
        self,
        connection: DatabaseConnection,
        adapter: "BaseAdapter",
        options: Optional[IntrospectionOptions] = None,
    ):
        """
        Initialize schema inspector.

        Args:
            connection: Database connection manager
            adapter: Database-specific adapter issuing the catalog queries
            options: Naming and default-schema options
        """
        self.connection = connection
        self.adapter = adapter
        self.options = options or IntrospectionOptions()

    @property
    def default_schema(self) -> str:
        """Schema used when none is given."""
        return self.options.default_schema or self.adapter.default_schema

    async def get_enum_types(self, schema: Optional[str] = None) -> EnumCatalog:
        """
        Fetch enum types and their labels.

        Args:
            schema: Restrict to one schema (None scans the whole database)

        Returns:
            Mapping of enum type name to ordered labels
        """
        async with self.connection.get_connection() as conn:
            return await self.adapter.fetch_enums(conn, schema)

    async def get_schema_tables(self, schema: Optional[str] = None) -> list[str]:
        """
        List tables, views and materialized views in a schema.

        Args:
            schema: Schema name (None for the default schema)

        Returns:
            Distinct relation names in lexicographic order
        """
        schema = schema or self.default_schema
        async with self.connection.get_connection() as conn:
            return await self.adapter.list_relations(conn, schema)

    async def get_table_definition(
        self, table_name: str, schema: Optional[str] = None
    ) -> TableDefinition:
        """
        Read a table's columns without classifying them.

        Args:
            table_name: Relation name
            schema: Schema name (None for the default schema)

        Returns:
            Table definition whose columns have no target type yet
        """
        schema = schema or self.default_schema
        async with self.connection.get_connection() as conn:
            rows = await self.adapter.fetch_columns(conn, table_name, schema)

        return self._assemble(table_name, schema, rows)

    async def describe_table(
        self,
        table_name: str,
        schema: Optional[str] = None,
        enum_types: Optional[EnumCatalog] = None,
    ) -> TableDefinition:
        """
        Read and classify a table's columns.

        Enum types are resolved across the whole database, not only in
        ``schema``: a column may use an enum declared elsewhere. If two
        schemas declare an enum with the same name they are indistinguishable
        here.

        Args:
            table_name: Relation name
            schema: Schema name (None for the default schema)
            enum_types: Pre-fetched enum catalog; fetched when omitted

        Returns:
            Table definition with a target type on every column
        """
        schema = schema or self.default_schema

        async with self.connection.get_connection() as conn:
            if enum_types is None:
                enum_types = await self.adapter.fetch_enums(conn)
            rows = await self.adapter.fetch_columns(conn, table_name, schema)

        logger.debug(
            f"Classifying {len(rows)} columns of {schema}.{table_name} "
            f"({len(enum_types)} known enum types)"
        )

        return map_table_definition(
            self._assemble(table_name, schema, rows),
            enum_types.keys(),
            self.options.transform_type_name,
        )

    async def describe_schema(self, schema: Optional[str] = None) -> SchemaDefinition:
        """
        Describe every relation in a schema, fetching enum types once.

        Args:
            schema: Schema name (None for the default schema)

        Returns:
            Schema definition with classified tables and the schema's own enums
        """
        schema = schema or self.default_schema

        async with self.connection.get_connection() as conn:
            table_names = await self.adapter.list_relations(conn, schema)
            all_enums = await self.adapter.fetch_enums(conn)
            schema_enums = await self.adapter.fetch_enums(conn, schema)

        tables = {}
        for table_name in table_names:
            tables[table_name] = await self.describe_table(
                table_name, schema, enum_types=all_enums
            )

        logger.info(
            f"Described schema {schema}: {len(tables)} relations, "
            f"{len(schema_enums)} enum types"
        )

        return SchemaDefinition(name=schema, tables=tables, enums=schema_enums)

    def _assemble(
        self, table_name: str, schema: str, rows: list[CatalogColumn]
    ) -> TableDefinition:
        """Build a table definition from raw catalog rows."""
        columns = {
            row.name: ColumnDefinition(
                native_type=row.native_type,
                # Only an explicit False NOT NULL flag makes a column nullable
                nullable=row.not_null is False,
            )
            for row in rows
        }
        return TableDefinition(name=table_name, schema=schema, columns=columns)
