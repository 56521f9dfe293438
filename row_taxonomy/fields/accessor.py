"""Read-only access to a taxonomy field's configuration.

Field types hold one of these rather than inheriting configuration helpers.
"""

from __future__ import annotations

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.taxonomy.lookup import RowFetcher, TaxonomyLookup


class FieldConfigAccessor:
    def __init__(self, config: TaxonomyFieldConfig) -> None:
        self._config = config

    @property
    def config(self) -> TaxonomyFieldConfig:
        return self._config

    @property
    def fieldname(self) -> str:
        return self._config.fieldname

    @property
    def join_table(self) -> str:
        return self._config.join_table

    @property
    def has_sortorder(self) -> bool:
        return self._config.has_sortorder

    def existing_lookup(self, fetcher: RowFetcher) -> TaxonomyLookup:
        """Lookup of the stored join rows for this field, read through *fetcher*."""
        return TaxonomyLookup(fetcher, self._config)
