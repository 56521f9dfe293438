"""Rewrite taxonomy filters onto the join table.

A query such as ``{"categories": "news || events"}`` is parsed into a filter
comparing the content table's ``categories`` column. Taxonomy terms live in
the join table instead, so the filter's expression is replaced by one
comparing the joined alias's ``slug`` column, keeping the combinator and the
parameter keys already bound on the query.
"""

from __future__ import annotations

from collections.abc import Iterable

from row_taxonomy.core.exceptions import InvalidFilterExpressionError
from row_taxonomy.query.expression import CompositeExpression, ExpressionBuilder
from row_taxonomy.query.filter import Filter


def rewrite_filters(
    filters: Iterable[Filter],
    fieldname: str,
    joined_alias: str,
    expr: ExpressionBuilder | None = None,
) -> None:
    """Point every filter keyed *fieldname* at ``<joined_alias>.slug``.

    Raises:
        InvalidFilterExpressionError: If a matching filter's combinator is
            neither AND nor OR.
    """
    expr = expr or ExpressionBuilder()

    for flt in filters:
        if flt.key != fieldname:
            continue

        if flt.combinator == CompositeExpression.TYPE_AND:
            new_expr = expr.and_x()
        elif flt.combinator == CompositeExpression.TYPE_OR:
            new_expr = expr.or_x()
        else:
            raise InvalidFilterExpressionError(flt.key, flt.combinator)

        for param in flt.parameters:
            new_expr.add(expr.eq(f"{joined_alias}.slug", f":{param}"))

        flt.expression = new_expr
