"""Database connection management with SQLAlchemy."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from pg_schema_types.models.config import DatabaseConfig

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Manages SQLAlchemy async engine and connection pool."""

    def __init__(self, config: DatabaseConfig):
        """
        Initialize database connection.

        Args:
            config: Database configuration with connection URL and pool settings
        """
        self.config = config
        self.engine: Optional[AsyncEngine] = None
        self._dialect = config.dialect
        self._driver = config.driver

    async def initialize(self) -> None:
        """Create the async engine."""
        if self.engine is not None:
            return  # Already initialized

        url, connect_args = self._split_ssl_args(self.config.url)

        self.engine = create_async_engine(
            url,
            pool_size=self.config.pool_size,
            max_overflow=self.config.max_overflow,
            pool_timeout=self.config.pool_timeout,
            pool_pre_ping=True,  # Verify connections before using
            echo=self.config.echo_sql,
            connect_args=connect_args,
        )
        logger.debug(f"Initialized {self._dialect}+{self._driver} engine")

    def _split_ssl_args(self, url: str) -> tuple[str, dict]:
        """Move sslmode/ssl URL query options into asyncpg connect_args."""
        connect_args: dict = {}
        if self._driver != "asyncpg":
            return url, connect_args

        url_obj = make_url(url)
        if not url_obj.query:
            return url, connect_args

        # asyncpg expects 'ssl' parameter in connect_args, not in URL
        if "sslmode" in url_obj.query:
            sslmode = url_obj.query["sslmode"]
            if sslmode in ["require", "prefer", "allow"]:
                connect_args["ssl"] = sslmode
            elif sslmode == "disable":
                connect_args["ssl"] = False
            url_obj = url_obj.difference_update_query(["sslmode"])
        elif "ssl" in url_obj.query:
            ssl_value = url_obj.query["ssl"]
            if ssl_value in ["require", "true", "1"]:
                connect_args["ssl"] = "require"
            elif ssl_value in ["false", "0", "disable"]:
                connect_args["ssl"] = False
            url_obj = url_obj.difference_update_query(["ssl"])
        else:
            return url, connect_args

        return url_obj.render_as_string(hide_password=False), connect_args

    async def dispose(self) -> None:
        """Dispose of the connection pool and cleanup resources."""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None

    @asynccontextmanager
    async def get_connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """
        Get a connection from the pool as an async context manager.

        Yields:
            AsyncConnection for executing queries

        Raises:
            RuntimeError: If engine not initialized
        """
        if self.engine is None:
            raise RuntimeError(
                "DatabaseConnection not initialized. Call initialize() first."
            )

        async with self.engine.connect() as conn:
            if self.config.read_only:
                await conn.execute(
                    text("SET SESSION CHARACTERISTICS AS TRANSACTION READ ONLY")
                )

            if self.config.statement_timeout:
                timeout_ms = self.config.statement_timeout * 1000
                await conn.execute(text(f"SET statement_timeout = {timeout_ms}"))

            yield conn

    @property
    def dialect(self) -> str:
        """Get database dialect name."""
        return self._dialect

    @property
    def driver(self) -> str:
        """Get database driver name."""
        return self._driver

    @property
    def is_initialized(self) -> bool:
        """Check if engine is initialized."""
        return self.engine is not None

    async def test_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            async with self.get_connection() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Connection test failed: {e}")
            return False

    async def get_version(self) -> str:
        """
        Get database version string.

        Returns:
            Database version string
        """
        async with self.get_connection() as conn:
            result = await conn.execute(text("SELECT version()"))
            row = result.fetchone()
            return str(row[0]) if row else "Unknown"

    async def __aenter__(self) -> "DatabaseConnection":
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.dispose()
