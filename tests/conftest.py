"""Pytest configuration and shared fixtures for introspection tests"""

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

from pg_schema_types.adapters import create_adapter
from pg_schema_types.adapters.base import BaseAdapter
from pg_schema_types.core import DatabaseConnection, SchemaInspector
from pg_schema_types.models.config import DatabaseConfig

# Load environment variables
load_dotenv()


# ==================== Fakes ====================


class FakeDatabaseConnection:
    """Stands in for DatabaseConnection, yielding one mocked AsyncConnection."""

    def __init__(self) -> None:
        self.conn = AsyncMock()
        self.opened = 0

    @asynccontextmanager
    async def get_connection(self) -> AsyncGenerator[AsyncMock, None]:
        self.opened += 1
        yield self.conn


def _make_result(rows: list[tuple]) -> MagicMock:
    result = MagicMock()
    result.fetchall.return_value = list(rows)
    result.fetchone.return_value = rows[0] if rows else None
    return result


@pytest.fixture
def make_result() -> Callable[[list[tuple]], Any]:
    """Factory for mocked SQLAlchemy results returning the given rows"""
    return _make_result


@pytest.fixture
def fake_connection() -> FakeDatabaseConnection:
    """Connection manager whose connections are AsyncMocks"""
    return FakeDatabaseConnection()


@pytest.fixture
def mock_adapter() -> MagicMock:
    """Adapter with async catalog methods and the public default schema"""
    adapter = MagicMock(spec=BaseAdapter)
    adapter.default_schema = "public"
    adapter.fetch_columns = AsyncMock(return_value=[])
    adapter.fetch_enums = AsyncMock(return_value={})
    adapter.list_relations = AsyncMock(return_value=[])
    return adapter


# ==================== Configuration Fixtures ====================


@pytest.fixture(scope="session")
def pg_database_url() -> Optional[str]:
    """PostgreSQL test database URL from environment"""
    return os.getenv("PG_TEST_DATABASE_URL")


# ==================== PostgreSQL Fixtures ====================


@pytest.fixture
async def pg_config(pg_database_url: Optional[str]) -> DatabaseConfig:
    """PostgreSQL database configuration"""
    if not pg_database_url:
        pytest.skip("PG_TEST_DATABASE_URL not set in environment")
    return DatabaseConfig(url=pg_database_url)


@pytest.fixture
async def pg_adapter(pg_config: DatabaseConfig) -> BaseAdapter:
    """PostgreSQL adapter instance"""
    return create_adapter(pg_config)


@pytest.fixture
async def pg_connection(
    pg_config: DatabaseConfig,
) -> AsyncGenerator[DatabaseConnection, None]:
    """PostgreSQL database connection with proper cleanup"""
    connection = DatabaseConnection(pg_config)
    await connection.initialize()
    try:
        yield connection
    finally:
        await connection.dispose()


@pytest.fixture
async def pg_inspector(
    pg_connection: DatabaseConnection, pg_adapter: BaseAdapter
) -> SchemaInspector:
    """PostgreSQL schema inspector"""
    return SchemaInspector(pg_connection, pg_adapter)
