"""Mapping layer - field configuration, taxonomy values and the content entity."""

from __future__ import annotations

from row_taxonomy.mapping.config import SORT_LAST, TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content, TaxonomyState
from row_taxonomy.mapping.value import TaxonomyGroup, TaxonomyValue, terms_for

__all__ = [
    "SORT_LAST",
    "TaxonomyFieldConfig",
    "Content",
    "TaxonomyState",
    "TaxonomyGroup",
    "TaxonomyValue",
    "terms_for",
]
