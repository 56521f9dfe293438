"""Unit tests for connection configuration and management."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from row_taxonomy.adapters.postgresql import _build_conninfo
from row_taxonomy.adapters.sqlite import SqliteSyncAdapter
from row_taxonomy.core.connection import ConnectionConfig, ConnectionManager
from row_taxonomy.core.enums import DatabaseBackend
from row_taxonomy.core.exceptions import AdapterError, ConnectionError  # noqa: A004


class TestConnectionConfig:
    def test_driver_lowercased(self) -> None:
        config = ConnectionConfig(driver="PostgreSQL", database="cms")
        assert config.driver == "postgresql"
        assert config.backend is DatabaseBackend.POSTGRESQL

    def test_defaults(self) -> None:
        config = ConnectionConfig(driver="sqlite", database=":memory:")
        assert config.pool_size == 5
        assert config.extra == {}

    def test_unknown_backend(self) -> None:
        config = ConnectionConfig(driver="oracle", database="cms")
        with pytest.raises(AdapterError, match="oracle"):
            _ = config.backend

    def test_conninfo(self) -> None:
        config = ConnectionConfig(
            driver="postgresql", host="db", port=5432, user="bolt", database="cms"
        )
        assert _build_conninfo(config) == "host=db port=5432 user=bolt dbname=cms"


class TestConnectionManager:
    def test_loads_adapter(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        assert isinstance(manager.adapter, SqliteSyncAdapter)
        assert manager.platform is DatabaseBackend.SQLITE

    def test_unknown_driver(self) -> None:
        with pytest.raises(AdapterError, match="Unsupported database driver"):
            ConnectionManager(ConnectionConfig(driver="mssql", database="cms"))

    def test_pool_initialized_once(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        assert manager.initialize_pool() is manager.initialize_pool()
        manager.close_pool()

    def test_get_connection_releases(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        with manager.get_connection() as conn:
            assert conn.execute("SELECT 1").fetchone()[0] == 1
        with manager.get_connection() as conn:
            assert conn is not None
        manager.close_pool()

    def test_connect_failure_wrapped(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        with patch.object(
            SqliteSyncAdapter, "create_pool", side_effect=OSError("disk unavailable")
        ), pytest.raises(ConnectionError, match="disk unavailable"):
            manager.initialize_pool()
