"""Taxonomy value objects."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from row_taxonomy.mapping.config import TaxonomyFieldConfig


@dataclass(frozen=True)
class TaxonomyValue:
    """One term associated with one content record."""

    fieldname: str
    label: str
    slug: str | None
    sortorder: int
    config: TaxonomyFieldConfig

    @property
    def key(self) -> str:
        """Key of this value in an entity's taxonomy mapping."""
        return f"{self.fieldname}/{self.slug}"

    @property
    def name(self) -> str:
        """Configured label for the slug, falling back to the raw label."""
        if self.slug is not None and self.slug in self.config.options:
            return self.config.options[self.slug]
        return self.label

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class TaxonomyGroup:
    """Summary of the grouping term of a record with a sorted taxonomy."""

    slug: str | None
    name: str
    order: int
    index: int


def terms_for(
    config: TaxonomyFieldConfig,
    slugs: Iterable[str],
    sortorder: int = 0,
) -> dict[str, TaxonomyValue]:
    """Desired-state mapping for *slugs*, labelled from the configured options."""
    terms: dict[str, TaxonomyValue] = {}
    for slug in slugs:
        value = TaxonomyValue(
            fieldname=config.fieldname,
            label=config.label_for(slug),
            slug=slug,
            sortorder=sortorder,
            config=config,
        )
        terms[value.key] = value
    return terms
