"""Content query filters.

Callers filter content with a mapping of field name to value, e.g.::

    {"status": "published", "categories": "news || events"}

Each entry becomes a ``Filter`` holding its own parameters and a composite
expression. ``||`` separated values produce an OR expression, ``&&``
separated values an AND expression, and a single value an AND expression with
one part. Parameter keys are ``<field>_<n>`` so several filters can share one
query without clashing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from row_taxonomy.query.builder import SelectQueryBuilder
from row_taxonomy.query.expression import CompositeExpression

log = logging.getLogger(__name__)

_OR_SEPARATOR = "||"
_AND_SEPARATOR = "&&"


@dataclass
class Filter:
    """One filter on a content query.

    ``expression`` is the mutable slot field types overwrite when the filter
    has to be evaluated against something other than the main table.
    """

    key: str
    parameters: dict[str, Any]
    expression: CompositeExpression

    @property
    def combinator(self) -> str:
        return self.expression.type


def parse_filter(key: str, value: Any, alias: str) -> Filter:
    """Build a Filter comparing ``<alias>.<key>`` against each value."""
    if isinstance(value, str) and _OR_SEPARATOR in value:
        combinator, values = CompositeExpression.TYPE_OR, value.split(_OR_SEPARATOR)
    elif isinstance(value, str) and _AND_SEPARATOR in value:
        combinator, values = CompositeExpression.TYPE_AND, value.split(_AND_SEPARATOR)
    else:
        combinator, values = CompositeExpression.TYPE_AND, [value]

    parameters: dict[str, Any] = {}
    expression = CompositeExpression(combinator)
    for i, raw in enumerate(values, start=1):
        param = f"{key}_{i}"
        parameters[param] = raw.strip() if isinstance(raw, str) else raw
        expression.add(f"{alias}.{key} = :{param}")
    return Filter(key=key, parameters=parameters, expression=expression)


class ContentQuery:
    """Select query over one content type's table plus its filters.

    Args:
        query_builder: Empty builder for the target platform.
        table: Content table name.
        content_type: Content type name stored in join tables.
        alias: Alias of the content table in the generated SQL.
    """

    def __init__(
        self,
        query_builder: SelectQueryBuilder,
        table: str,
        content_type: str,
        alias: str = "content",
    ) -> None:
        self._query_builder = query_builder
        self.table = table
        self.content_type = content_type
        self.alias = alias
        self._filters: list[Filter] = []
        query_builder.select(f"{alias}.*").from_(table, alias)

    @property
    def query_builder(self) -> SelectQueryBuilder:
        return self._query_builder

    def set_parameters(self, params: dict[str, Any]) -> ContentQuery:
        for key, value in params.items():
            self._filters.append(parse_filter(key, value, self.alias))
        return self

    def get_filters(self) -> list[Filter]:
        return self._filters

    def build(self) -> SelectQueryBuilder:
        """Apply every filter to the builder and return it."""
        for flt in self._filters:
            log.debug("Filter %s: %s", flt.key, flt.expression)
            self._query_builder.and_where(flt.expression)
            self._query_builder.set_parameters(flt.parameters)
        return self._query_builder
