"""Base adapter abstract class for database-specific catalog queries."""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncConnection

from pg_schema_types.models.config import DEFAULT_SCHEMA
from pg_schema_types.models.table import CatalogColumn, EnumCatalog


class BaseAdapter(ABC):
    """Base adapter defining the catalog metadata interface."""

    @property
    def default_schema(self) -> str:
        """Schema used when the caller does not name one."""
        return DEFAULT_SCHEMA

    @abstractmethod
    async def fetch_columns(
        self, conn: AsyncConnection, table_name: str, schema: str
    ) -> list[CatalogColumn]:
        """
        Fetch the live columns of a relation in physical column order.

        Args:
            conn: Database connection
            table_name: Relation name
            schema: Schema name

        Returns:
            Raw column rows (empty if the relation has no columns or does not exist)
        """
        ...

    @abstractmethod
    async def fetch_enums(
        self, conn: AsyncConnection, schema: Optional[str] = None
    ) -> EnumCatalog:
        """
        Fetch enumerated types and their labels.

        Args:
            conn: Database connection
            schema: Restrict to this schema; None or empty scans the whole database

        Returns:
            Mapping of enum type name to ordered labels
        """
        ...

    @abstractmethod
    async def list_relations(self, conn: AsyncConnection, schema: str) -> list[str]:
        """
        List table-like relations (tables, views, materialized views) in a schema.

        Args:
            conn: Database connection
            schema: Schema name

        Returns:
            Distinct relation names, sorted
        """
        ...
