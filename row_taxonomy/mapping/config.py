"""Taxonomy field configuration.

One immutable configuration per declared taxonomy field, shared read-only by
the query, load, hydrate and persist steps.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from row_taxonomy.core.exceptions import FieldConfigError

# Ordering index of slugs missing from the configured options: sort last.
SORT_LAST = 2147483647


class TaxonomyFieldConfig(BaseModel):
    """Configuration of a taxonomy field.

    Attributes:
        fieldname: Field (and taxonomy type) name, e.g. ``"categories"``.
        join_table: Table holding one row per (content record, term).
        has_sortorder: Whether the join table's ``sortorder`` column is used.
        options: Ordered slug -> label mapping of configured terms.
    """

    model_config = ConfigDict(frozen=True)

    fieldname: str
    join_table: str
    has_sortorder: bool = False
    options: dict[str, str] = {}

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> TaxonomyFieldConfig:
        """Build from a field-registry definition.

        Expected shape::

            {"fieldname": "categories", "target": "taxonomy",
             "data": {"has_sortorder": False, "options": {"news": "News"}}}
        """
        data = mapping.get("data") or {}
        fieldname = str(mapping.get("fieldname", "<unnamed>"))
        try:
            return cls(
                fieldname=mapping["fieldname"],
                join_table=mapping["target"],
                has_sortorder=bool(data.get("has_sortorder", False)),
                options=data.get("options") or {},
            )
        except KeyError as e:
            raise FieldConfigError(fieldname, f"missing key {e}") from e
        except ValidationError as e:
            raise FieldConfigError(fieldname, str(e)) from e

    def label_for(self, slug: str) -> str:
        """Configured label for *slug*, or the slug itself."""
        return self.options.get(slug, slug)

    def index_of(self, slug: str | None) -> int:
        """Position of *slug* in the option ordering, or ``SORT_LAST``."""
        for index, option in enumerate(self.options):
            if option == slug:
                return index
        return SORT_LAST
