"""Lookup of the taxonomy rows already stored for a content record."""

from __future__ import annotations

from typing import Any, Protocol

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content
from row_taxonomy.query.builder import SelectQueryBuilder


class RowFetcher(Protocol):
    def fetch_all(
        self, statement: Any, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]: ...


class TaxonomyLookup:
    """Callable returning a record's stored join-table rows for one field.

    Pass the open transaction as *fetcher* so the lookup reads the same view
    the pending writes will be applied to.
    """

    def __init__(self, fetcher: RowFetcher, config: TaxonomyFieldConfig) -> None:
        self._fetcher = fetcher
        self._config = config

    def build_query(self, entity: Content) -> SelectQueryBuilder:
        return (
            SelectQueryBuilder()
            .select("*")
            .from_(self._config.join_table)
            .where(
                "content_id = :content_id",
                "contenttype = :contenttype",
                "taxonomytype = :taxonomytype",
            )
            .add_order_by("id")
            .set_parameters(
                {
                    "content_id": entity.id,
                    "contenttype": entity.contenttype,
                    "taxonomytype": self._config.fieldname,
                }
            )
        )

    def __call__(self, entity: Content) -> list[dict[str, Any]]:
        if entity.id is None:
            return []
        return self._fetcher.fetch_all(self.build_query(entity))
