"""Field type protocol.

Every field type takes part in the same lifecycle: rewrite filters while the
query is assembled (``query``), extend the fetch query (``load``), populate
the entity from each fetched row (``hydrate``) and queue writes on save
(``persist``).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from row_taxonomy.mapping.entity import Content
from row_taxonomy.query.builder import SelectQueryBuilder
from row_taxonomy.query.filter import ContentQuery
from row_taxonomy.query.queryset import QuerySet
from row_taxonomy.taxonomy.lookup import RowFetcher


@runtime_checkable
class FieldType(Protocol):
    """Capability interface shared by all field types."""

    @property
    def name(self) -> str:
        """Declared type name the registry dispatches on."""
        ...

    def query(self, query: ContentQuery) -> None:
        """Adjust the query's filters before they are applied."""
        ...

    def load(self, query: SelectQueryBuilder, content_type: str) -> None:
        """Extend the fetch query with whatever the field needs."""
        ...

    def hydrate(self, row: dict[str, Any], entity: Content) -> None:
        """Populate *entity* from one fetched row."""
        ...

    def persist(self, queries: QuerySet, entity: Content, fetcher: RowFetcher) -> None:
        """Append the writes needed to store *entity*'s field value."""
        ...
