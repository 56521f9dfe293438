"""Query execution engine.

The Engine executes built select queries and write statements through the
adapter, converting placeholders to the driver's paramstyle and rows to
dicts. It also hands out query builders bound to the active platform, which
is what the taxonomy join reads its aggregate dialect from.
"""

from __future__ import annotations

import logging
from typing import Any

from row_taxonomy.core.connection import ConnectionConfig, ConnectionManager
from row_taxonomy.core.exceptions import MultipleRowsError, StatementExecutionError
from row_taxonomy.core.params import Statement, normalize_params, resolve_statement
from row_taxonomy.core.transaction import TransactionManager, rows_to_dicts
from row_taxonomy.query.builder import SelectQueryBuilder

log = logging.getLogger(__name__)


class Engine:
    """Synchronous query execution engine."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager
        self._paramstyle = connection_manager.adapter.paramstyle

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Engine:
        """Create an Engine from a ConnectionConfig.

        Args:
            config: ConnectionConfig instance

        Returns:
            Engine instance
        """
        return cls(ConnectionManager(config))

    @property
    def platform(self) -> str:
        """Dialect identifier of the connected database."""
        return self._connection_manager.platform.value

    def create_query_builder(self) -> SelectQueryBuilder:
        """Return an empty select builder targeting this engine's platform."""
        return SelectQueryBuilder(self.platform)

    def fetch_one(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a single row.

        Returns None if zero rows match.
        Raises MultipleRowsError if more than one row matches.
        """
        rows, label = self._fetch(statement, params)
        if len(rows) == 0:
            return None
        if len(rows) > 1:
            raise MultipleRowsError(label, len(rows))
        return rows[0]

    def fetch_all(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch all matching rows."""
        rows, _ = self._fetch(statement, params)
        return rows

    def fetch_scalar(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Fetch a single scalar value (first column of first row)."""
        rows, _ = self._fetch(statement, params)
        if not rows:
            return None
        return next(iter(rows[0].values()))

    def execute(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> int:
        """Execute a write statement and commit. Returns affected row count."""
        sql, bound, label = resolve_statement(statement, params)
        sql = normalize_params(sql, self._paramstyle)

        with self._connection_manager.get_connection() as conn:
            log.debug("execute: %s", label)
            try:
                cursor = self._connection_manager.adapter.execute(conn, sql, bound)
            except Exception as e:
                conn.rollback()
                raise StatementExecutionError(label, str(e)) from e

            conn.commit()
            return int(cursor.rowcount)

    def transaction(self) -> TransactionManager:
        """Create a new transaction context manager."""
        pool = self._connection_manager.initialize_pool()
        conn = self._connection_manager.adapter.acquire_connection(pool)
        return TransactionManager(
            connection=conn,
            adapter=self._connection_manager.adapter,
            pool=pool,
        )

    def close(self) -> None:
        """Close every pooled connection."""
        self._connection_manager.close_pool()

    def _fetch(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None,
    ) -> tuple[list[dict[str, Any]], str]:
        sql, bound, label = resolve_statement(statement, params)
        sql = normalize_params(sql, self._paramstyle)

        with self._connection_manager.get_connection() as conn:
            log.debug("fetch: %s", label)
            try:
                cursor = self._connection_manager.adapter.execute(conn, sql, bound)
            except Exception as e:
                raise StatementExecutionError(label, str(e)) from e

            return rows_to_dicts(cursor), label
