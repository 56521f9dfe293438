"""Content entity."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.value import TaxonomyGroup, TaxonomyValue, terms_for

TaxonomyState = dict[str, dict[str, TaxonomyValue] | None]


@dataclass
class Content:
    """A content record and its taxonomy state.

    ``taxonomy`` maps field name to an insertion-ordered mapping of
    ``"<field>/<slug>"`` to value, or None when the record has no terms for
    that field. ``group`` and ``sortorder`` are single slots: hydrating a
    sorted taxonomy field overwrites them with the last term it processed.
    """

    id: Any = None
    contenttype: str = ""
    values: dict[str, Any] = field(default_factory=dict)
    taxonomy: TaxonomyState = field(default_factory=dict)
    group: TaxonomyGroup | None = None
    sortorder: int | None = None

    def terms(self, fieldname: str) -> list[TaxonomyValue]:
        """Ordered values currently held for *fieldname*."""
        return list((self.taxonomy.get(fieldname) or {}).values())

    def set_terms(self, config: TaxonomyFieldConfig, slugs: Iterable[str]) -> None:
        """Replace the desired terms of a field with *slugs*."""
        self.taxonomy[config.fieldname] = terms_for(config, slugs) or None
