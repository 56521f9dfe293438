"""Transaction management.

Provides a context manager for executing a content record's pending writes
atomically. Auto-commits on success, auto-rolls-back on exception.

Driver errors raised by statements inside the transaction are not wrapped:
they propagate to the caller unchanged after the rollback.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from row_taxonomy.core.exceptions import TransactionStateError
from row_taxonomy.core.params import Statement, normalize_params, resolve_statement

log = logging.getLogger(__name__)


class _TxState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


def rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to list of dicts.

    Handles both tuple-like rows and dict-like rows from different adapters.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()
    if not rows:
        return []

    # psycopg dict_row and the MySQL dictionary cursor already yield dicts
    first_row = rows[0]
    if isinstance(first_row, dict):
        return [dict(row) for row in rows]

    return [dict(zip(columns, row, strict=True)) for row in rows]


class TransactionManager:
    """Synchronous transaction context manager."""

    def __init__(
        self,
        connection: Any,
        adapter: Any,
        pool: Any = None,
    ) -> None:
        self._connection = connection
        self._adapter = adapter
        self._pool = pool
        self._paramstyle: str = adapter.paramstyle
        self._state = _TxState.IDLE

    def __enter__(self) -> TransactionManager:
        self._state = _TxState.ACTIVE
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        try:
            if self._state == _TxState.ACTIVE:
                if exc_type is not None:
                    log.debug("Rolling back transaction after %s", exc_type.__name__)
                    self._connection.rollback()
                    self._state = _TxState.ROLLED_BACK
                else:
                    self._connection.commit()
                    self._state = _TxState.COMMITTED
        finally:
            if self._pool is not None:
                self._adapter.release_connection(self._connection, self._pool)

    def execute(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> int:
        """Execute a write statement within this transaction."""
        cursor = self._run(statement, params)
        return int(cursor.rowcount)

    def fetch_one(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a single row within transaction context."""
        rows = rows_to_dicts(self._run(statement, params))
        if not rows:
            return None
        return rows[0]

    def fetch_all(
        self,
        statement: Statement | str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch all rows within transaction context."""
        return rows_to_dicts(self._run(statement, params))

    def commit(self) -> None:
        """Explicitly commit the transaction."""
        if self._state == _TxState.ROLLED_BACK:
            raise TransactionStateError("rolled_back", "commit")
        if self._state == _TxState.COMMITTED:
            raise TransactionStateError("committed", "commit")
        self._connection.commit()
        self._state = _TxState.COMMITTED

    def rollback(self) -> None:
        """Explicitly rollback the transaction."""
        if self._state == _TxState.COMMITTED:
            raise TransactionStateError("committed", "rollback")
        self._connection.rollback()
        self._state = _TxState.ROLLED_BACK

    def _run(self, statement: Statement | str, params: dict[str, Any] | None) -> Any:
        self._check_active()
        sql, bound, label = resolve_statement(statement, params)
        log.debug("tx: %s", label)
        return self._adapter.execute(
            self._connection, normalize_params(sql, self._paramstyle), bound
        )

    def _check_active(self) -> None:
        if self._state == _TxState.IDLE:
            raise TransactionStateError("idle", "execute")
        if self._state == _TxState.COMMITTED:
            raise TransactionStateError("committed", "execute")
        if self._state == _TxState.ROLLED_BACK:
            raise TransactionStateError("rolled_back", "execute")
