"""Query layer - select builder, filters and pending writes."""

from __future__ import annotations

from row_taxonomy.query.builder import SelectQueryBuilder
from row_taxonomy.query.expression import CompositeExpression, ExpressionBuilder
from row_taxonomy.query.filter import ContentQuery, Filter, parse_filter
from row_taxonomy.query.queryset import DeleteStatement, InsertStatement, QuerySet

__all__ = [
    "SelectQueryBuilder",
    "CompositeExpression",
    "ExpressionBuilder",
    "ContentQuery",
    "Filter",
    "parse_filter",
    "QuerySet",
    "InsertStatement",
    "DeleteStatement",
]
