"""Contract tests for adapter protocol compliance."""

from __future__ import annotations

import pytest

from row_taxonomy.adapters.mysql import MysqlSyncAdapter
from row_taxonomy.adapters.postgresql import PostgresqlSyncAdapter
from row_taxonomy.adapters.protocol import SyncAdapter
from row_taxonomy.adapters.sqlite import SqliteSyncAdapter
from row_taxonomy.core.connection import ConnectionConfig
from row_taxonomy.core.exceptions import PoolError


class TestSqliteSyncAdapterProtocol:
    def test_implements_sync_protocol(self) -> None:
        assert isinstance(SqliteSyncAdapter(), SyncAdapter)

    def test_paramstyle(self) -> None:
        assert SqliteSyncAdapter().paramstyle == "named"

    def test_lifecycle(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteSyncAdapter()
        pool = adapter.create_pool(sqlite_config)
        assert len(pool) == 1

        conn = adapter.acquire_connection(pool)
        assert conn is not None

        cursor = adapter.execute(conn, "SELECT :slug AS slug", {"slug": "news"})
        row = cursor.fetchone()
        assert row["slug"] == "news"

        adapter.release_connection(conn, pool)
        assert len(pool) == 1

        adapter.close_pool(pool)
        assert len(pool) == 0

    def test_empty_pool(self) -> None:
        with pytest.raises(PoolError):
            SqliteSyncAdapter().acquire_connection([])

    def test_foreign_keys_enabled(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteSyncAdapter()
        pool = adapter.create_pool(sqlite_config)
        conn = adapter.acquire_connection(pool)
        assert adapter.execute(conn, "PRAGMA foreign_keys").fetchone()[0] == 1
        adapter.release_connection(conn, pool)
        adapter.close_pool(pool)

    def test_group_concat_available(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteSyncAdapter()
        pool = adapter.create_pool(sqlite_config)
        conn = adapter.acquire_connection(pool)
        cursor = adapter.execute(
            conn,
            "SELECT GROUP_CONCAT(DISTINCT name) AS names FROM "
            "(SELECT 'News' AS name UNION ALL SELECT 'News')",
        )
        assert cursor.fetchone()["names"] == "News"
        adapter.release_connection(conn, pool)
        adapter.close_pool(pool)


# --- PostgreSQL protocol compliance ---


class TestPostgresqlSyncAdapterProtocol:
    def test_implements_sync_protocol(self) -> None:
        assert isinstance(PostgresqlSyncAdapter(), SyncAdapter)

    def test_paramstyle(self) -> None:
        assert PostgresqlSyncAdapter().paramstyle == "pyformat"

    def test_empty_pool(self) -> None:
        with pytest.raises(PoolError):
            PostgresqlSyncAdapter().acquire_connection([])


# --- MySQL protocol compliance ---


class TestMysqlSyncAdapterProtocol:
    def test_implements_sync_protocol(self) -> None:
        assert isinstance(MysqlSyncAdapter(), SyncAdapter)

    def test_paramstyle(self) -> None:
        assert MysqlSyncAdapter().paramstyle == "pyformat"

    def test_empty_pool(self) -> None:
        with pytest.raises(PoolError):
            MysqlSyncAdapter().acquire_connection([])
