"""Taxonomy field core - filter rewriting, aggregate join, hydration, diff persistence."""

from __future__ import annotations

from row_taxonomy.taxonomy.filters import rewrite_filters
from row_taxonomy.taxonomy.hydrate import hydrate_row, split_labels
from row_taxonomy.taxonomy.join import augment_query, primary_alias
from row_taxonomy.taxonomy.lookup import TaxonomyLookup
from row_taxonomy.taxonomy.persist import (
    ExistingLookup,
    desired_slugs,
    diff_slugs,
    persist_taxonomy,
)
from row_taxonomy.taxonomy.platform import group_concat

__all__ = [
    "group_concat",
    "rewrite_filters",
    "augment_query",
    "primary_alias",
    "hydrate_row",
    "split_labels",
    "persist_taxonomy",
    "diff_slugs",
    "desired_slugs",
    "ExistingLookup",
    "TaxonomyLookup",
]
