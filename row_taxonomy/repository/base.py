"""Content repository.

Thin orchestration over Engine + field types for one content type: fetch
records with every field's query/load/hydrate step applied, and save a
record's field values inside a single transaction.
"""

from __future__ import annotations

import logging
from typing import Any

from row_taxonomy.core.engine import Engine
from row_taxonomy.fields.protocol import FieldType
from row_taxonomy.mapping.entity import Content
from row_taxonomy.query.filter import ContentQuery
from row_taxonomy.query.queryset import QuerySet

log = logging.getLogger(__name__)


class ContentRepository:
    """Repository for the records of one content type.

    Args:
        engine: Engine connected to the database holding *table*.
        content_type: Content type name stored in join tables.
        table: Table holding one row per record; must have an ``id`` column.
        fields: Field types taking part in fetch and save.
    """

    def __init__(
        self,
        engine: Engine,
        content_type: str,
        table: str,
        fields: list[FieldType] | None = None,
    ) -> None:
        self.engine = engine
        self.content_type = content_type
        self.table = table
        self.fields: list[FieldType] = list(fields or [])

    def create_query(self, filters: dict[str, Any] | None = None) -> ContentQuery:
        """Content query with *filters* parsed and every field's query step applied."""
        query = ContentQuery(self.engine.create_query_builder(), self.table, self.content_type)
        if filters:
            query.set_parameters(filters)
        for field in self.fields:
            field.query(query)
        return query

    def find_all(self, filters: dict[str, Any] | None = None) -> list[Content]:
        """Fetch the records matching *filters* with their field values hydrated."""
        builder = self.create_query(filters).build()
        for field in self.fields:
            field.load(builder, self.content_type)

        rows = self.engine.fetch_all(builder)
        log.debug("Fetched %d %s record(s)", len(rows), self.content_type)
        return [self._hydrate(row) for row in rows]

    def find(self, content_id: Any) -> Content | None:
        """Fetch one record by id, or None."""
        found = self.find_all({"id": content_id})
        return found[0] if found else None

    def persist(self, entity: Content) -> QuerySet:
        """Write *entity*'s field values; returns the statements executed.

        The stored-state lookups and the writes share one transaction, which
        rolls back if any statement fails.
        """
        if not entity.contenttype:
            entity.contenttype = self.content_type

        queries = QuerySet()
        with self.engine.transaction() as tx:
            for field in self.fields:
                field.persist(queries, entity, tx)
            queries.execute(tx)

        log.debug(
            "Saved %s %s with %d statement(s)", self.content_type, entity.id, len(queries)
        )
        return queries

    def _hydrate(self, row: dict[str, Any]) -> Content:
        entity = Content(id=row.get("id"), contenttype=self.content_type, values=dict(row))
        for field in self.fields:
            field.hydrate(row, entity)
        return entity
