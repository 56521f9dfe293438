"""Field types - capability protocol, taxonomy field type and registry."""

from __future__ import annotations

from row_taxonomy.fields.accessor import FieldConfigAccessor
from row_taxonomy.fields.protocol import FieldType
from row_taxonomy.fields.registry import FieldTypeRegistry, default_registry
from row_taxonomy.fields.taxonomy import TaxonomyType

__all__ = [
    "FieldType",
    "FieldConfigAccessor",
    "TaxonomyType",
    "FieldTypeRegistry",
    "default_registry",
]
