"""PostgreSQL adapter querying the pg_catalog system tables."""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from pg_schema_types.adapters.base import BaseAdapter
from pg_schema_types.core.enums import build_enum_catalog
from pg_schema_types.models.table import CatalogColumn, EnumCatalog

logger = logging.getLogger(__name__)

COLUMNS_QUERY = text("""
    SELECT
        pg_attribute.attname AS column_name,
        pg_type.typname::information_schema.sql_identifier AS udt_name,
        pg_attribute.attnotnull AS not_null
    FROM
        pg_attribute
        JOIN pg_class ON pg_attribute.attrelid = pg_class.oid
        JOIN pg_namespace ON pg_class.relnamespace = pg_namespace.oid
        JOIN pg_type ON pg_type.oid = pg_attribute.atttypid
    WHERE
        pg_attribute.attnum > 0
        AND NOT pg_attribute.attisdropped
        AND pg_class.relname = :table_name
        AND pg_namespace.nspname = :schema_name
    ORDER BY
        pg_attribute.attnum
""")

ENUMS_QUERY = """
    SELECT n.nspname AS schema, t.typname AS name, e.enumlabel AS value
    FROM pg_type t
    JOIN pg_enum e ON t.oid = e.enumtypid
    JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
    {where_clause}
    ORDER BY t.typname ASC, e.enumlabel ASC
"""

# relkind: 'm' materialized view, 'v' view, 'r' ordinary table
RELATIONS_QUERY = text("""
    SELECT relname AS table_name
    FROM pg_class
    INNER JOIN pg_namespace ON pg_namespace.oid = pg_class.relnamespace
    WHERE pg_namespace.nspname = :schema_name
      AND relkind IN ('m', 'v', 'r')
    GROUP BY relname
    ORDER BY relname
""")


class PostgresAdapter(BaseAdapter):
    """PostgreSQL catalog adapter."""

    async def fetch_columns(
        self, conn: AsyncConnection, table_name: str, schema: str
    ) -> list[CatalogColumn]:
        """Fetch live columns of a relation ordered by attnum."""
        result = await conn.execute(
            COLUMNS_QUERY, {"table_name": table_name, "schema_name": schema}
        )

        return [
            CatalogColumn(name=row[0], native_type=row[1], not_null=row[2])
            for row in result.fetchall()
        ]

    async def fetch_enums(
        self, conn: AsyncConnection, schema: Optional[str] = None
    ) -> EnumCatalog:
        """Fetch enum types, optionally restricted to one schema."""
        if schema:
            query = text(ENUMS_QUERY.format(where_clause="WHERE n.nspname = :schema_name"))
            result = await conn.execute(query, {"schema_name": schema})
        else:
            query = text(ENUMS_QUERY.format(where_clause=""))
            result = await conn.execute(query)

        rows = result.fetchall()
        logger.debug(f"Fetched {len(rows)} enum labels (schema={schema or '*'})")

        return build_enum_catalog((row[1], row[2]) for row in rows)

    async def list_relations(self, conn: AsyncConnection, schema: str) -> list[str]:
        """List tables, views and materialized views in a schema."""
        result = await conn.execute(RELATIONS_QUERY, {"schema_name": schema})
        return [row[0] for row in result.fetchall()]
