"""Taxonomy field type.

Handles the lifecycle of a taxonomy field from query to persist. Terms are
stored one per row in a join table, but the field reads like any other
field on the content entity:

- filters such as ``{"categories": "news || events"}`` are rewritten to
  match the join table's slugs;
- the content fetch joins the join table and aggregates term names, so a
  record still comes back as one row;
- saving diffs the entity's slugs against the stored rows.
"""

from __future__ import annotations

from typing import Any

from row_taxonomy.fields.accessor import FieldConfigAccessor
from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content
from row_taxonomy.query.builder import SelectQueryBuilder
from row_taxonomy.query.filter import ContentQuery
from row_taxonomy.query.queryset import QuerySet
from row_taxonomy.taxonomy.filters import rewrite_filters
from row_taxonomy.taxonomy.hydrate import hydrate_row
from row_taxonomy.taxonomy.join import augment_query
from row_taxonomy.taxonomy.lookup import RowFetcher
from row_taxonomy.taxonomy.persist import persist_taxonomy


class TaxonomyType:
    """Field type for taxonomy fields."""

    def __init__(self, accessor: FieldConfigAccessor) -> None:
        self._accessor = accessor

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> TaxonomyType:
        return cls(FieldConfigAccessor(TaxonomyFieldConfig.from_mapping(mapping)))

    @property
    def name(self) -> str:
        return "taxonomy"

    @property
    def config(self) -> TaxonomyFieldConfig:
        return self._accessor.config

    def query(self, query: ContentQuery) -> None:
        # The join is aliased by field name, see augment_query.
        field = self._accessor.fieldname
        rewrite_filters(
            query.get_filters(), field, field, query.query_builder.expr()
        )

    def load(self, query: SelectQueryBuilder, content_type: str) -> None:
        augment_query(query, self._accessor.config, content_type)

    def hydrate(self, row: dict[str, Any], entity: Content) -> None:
        hydrate_row(row, entity, self._accessor.config)

    def persist(self, queries: QuerySet, entity: Content, fetcher: RowFetcher) -> None:
        persist_taxonomy(
            queries,
            entity,
            self._accessor.config,
            self._accessor.existing_lookup(fetcher),
        )

    def __repr__(self) -> str:
        return f"TaxonomyType({self._accessor.fieldname!r})"
