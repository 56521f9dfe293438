"""Select query builder.

Accumulates the parts of a SELECT statement (select list, FROM items, left
joins, WHERE, GROUP BY, ORDER BY and bound parameters) and renders them to
SQL with ``:name`` placeholders. Field types augment a base content query
through this API, so it exposes its FROM part and the platform it targets.
"""

from __future__ import annotations

from typing import Any

from row_taxonomy.core.enums import DatabaseBackend
from row_taxonomy.query.expression import CompositeExpression, ExpressionBuilder


class SelectQueryBuilder:
    """Mutable builder for a single SELECT statement.

    Args:
        platform: Dialect identifier (``"sqlite"``, ``"mysql"``,
            ``"postgresql"``) or a ``DatabaseBackend`` member. It is carried
            as given; only consumers that emit dialect-specific SQL check it,
            so portable queries may leave it unset.
    """

    def __init__(self, platform: str | DatabaseBackend | None = None) -> None:
        self._platform = platform.value if isinstance(platform, DatabaseBackend) else platform
        self._select: list[str] = []
        self._from: list[dict[str, str | None]] = []
        self._join: dict[str, list[dict[str, str]]] = {}
        self._where: CompositeExpression | None = None
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._parameters: dict[str, Any] = {}

    @property
    def platform(self) -> str | None:
        return self._platform

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    def expr(self) -> ExpressionBuilder:
        return ExpressionBuilder()

    def select(self, *columns: str) -> SelectQueryBuilder:
        """Replace the select list."""
        self._select = list(columns)
        return self

    def add_select(self, *columns: str) -> SelectQueryBuilder:
        self._select.extend(columns)
        return self

    def from_(self, table: str, alias: str | None = None) -> SelectQueryBuilder:
        self._from.append({"table": table, "alias": alias})
        return self

    def left_join(
        self, from_alias: str, join: str, alias: str, condition: str
    ) -> SelectQueryBuilder:
        """Left-join *join* as *alias* onto the FROM item named *from_alias*."""
        self._join.setdefault(from_alias, []).append(
            {"table": join, "alias": alias, "condition": condition}
        )
        return self

    def where(self, *predicates: CompositeExpression | str) -> SelectQueryBuilder:
        """Replace the WHERE clause with the conjunction of *predicates*."""
        self._where = CompositeExpression(CompositeExpression.TYPE_AND, predicates)
        return self

    def and_where(self, *predicates: CompositeExpression | str) -> SelectQueryBuilder:
        if self._where is None:
            return self.where(*predicates)
        for predicate in predicates:
            self._where.add(predicate)
        return self

    def add_group_by(self, *columns: str) -> SelectQueryBuilder:
        self._group_by.extend(columns)
        return self

    def add_order_by(self, sort: str, order: str = "ASC") -> SelectQueryBuilder:
        self._order_by.append(f"{sort} {order}")
        return self

    def set_parameter(self, key: str, value: Any) -> SelectQueryBuilder:
        self._parameters[key] = value
        return self

    def set_parameters(self, parameters: dict[str, Any]) -> SelectQueryBuilder:
        self._parameters.update(parameters)
        return self

    def get_query_part(self, name: str) -> Any:
        """Return a copy of one accumulated part.

        Known parts: ``select``, ``from``, ``join``, ``where``, ``group_by``,
        ``order_by``. FROM items are dicts with ``table`` and ``alias`` keys
        (``alias`` is None when the table was added without one).
        """
        parts: dict[str, Any] = {
            "select": list(self._select),
            "from": [dict(item) for item in self._from],
            "join": {k: [dict(j) for j in v] for k, v in self._join.items()},
            "where": self._where,
            "group_by": list(self._group_by),
            "order_by": list(self._order_by),
        }
        if name not in parts:
            raise KeyError(f"Unknown query part: '{name}'")
        return parts[name]

    def get_sql(self) -> str:
        sql = "SELECT " + ", ".join(self._select or ["*"])
        if self._from:
            sql += " FROM " + ", ".join(self._render_from(item) for item in self._from)
        if self._where is not None and len(self._where) > 0:
            sql += " WHERE " + str(self._where)
        if self._group_by:
            sql += " GROUP BY " + ", ".join(self._group_by)
        if self._order_by:
            sql += " ORDER BY " + ", ".join(self._order_by)
        return sql

    def _render_from(self, item: dict[str, str | None]) -> str:
        table = item["table"]
        alias = item["alias"]
        sql = f"{table} {alias}" if alias else str(table)
        for join in self._join.get(alias or str(table), []):
            sql += f" LEFT JOIN {join['table']} {join['alias']} ON {join['condition']}"
        return sql

    def __str__(self) -> str:
        return self.get_sql()
