"""Pending write statements.

Field types append the writes a save needs to a shared ``QuerySet``; the
persistence layer executes the whole set inside the transaction that also
writes the owning record.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class InsertStatement:
    """``INSERT INTO <table> (...) VALUES (...)`` with one bound row."""

    table: str
    values: dict[str, Any]

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self.values)

    def get_sql(self) -> str:
        columns = ", ".join(self.values)
        placeholders = ", ".join(f":{c}" for c in self.values)
        return f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})"


@dataclass(frozen=True)
class DeleteStatement:
    """``DELETE FROM <table> WHERE`` a conjunction of equality criteria."""

    table: str
    criteria: dict[str, Any]

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self.criteria)

    def get_sql(self) -> str:
        where = " AND ".join(f"{c} = :{c}" for c in self.criteria)
        return f"DELETE FROM {self.table} WHERE {where}"


WriteStatement = InsertStatement | DeleteStatement


class StatementExecutor(Protocol):
    def execute(self, statement: Any, params: dict[str, Any] | None = None) -> int: ...


class QuerySet:
    """Ordered collection of pending write statements."""

    def __init__(self) -> None:
        self._statements: list[WriteStatement] = []

    def append(self, statement: WriteStatement) -> None:
        self._statements.append(statement)

    def execute(self, executor: StatementExecutor) -> int:
        """Run every statement in order; returns the total affected row count.

        Errors from the executor propagate unchanged.
        """
        return sum(executor.execute(statement) for statement in self._statements)

    def __iter__(self) -> Iterator[WriteStatement]:
        return iter(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def __getitem__(self, index: int) -> WriteStatement:
        return self._statements[index]
