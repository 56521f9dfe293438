"""Hydrate taxonomy values from an aggregated content row."""

from __future__ import annotations

import logging
from typing import Any

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content
from row_taxonomy.mapping.value import TaxonomyGroup, TaxonomyValue

log = logging.getLogger(__name__)


def split_labels(aggregated: Any) -> list[str]:
    """Split an aggregated name string into its non-empty labels."""
    if aggregated is None:
        return []
    if isinstance(aggregated, (bytes, bytearray)):
        aggregated = aggregated.decode("utf-8")
    return [label for label in str(aggregated).split(",") if label]


def hydrate_row(row: dict[str, Any], entity: Content, config: TaxonomyFieldConfig) -> None:
    """Set the field's taxonomy values and the entity's group summary from *row*.

    Every label in the row shares the row's single slug, so each one lands on
    the same ``"<field>/<slug>"`` key and the last label wins. For sorted
    fields the group and sortorder slots likewise end up describing the last
    label; with no labels both are reset to None.
    """
    field = config.fieldname
    slug = row.get(f"{field}_slug")
    sortorder = row.get(f"{field}_sortorder")
    if sortorder is None:
        sortorder = 0

    values: dict[str, TaxonomyValue] = {}
    group: TaxonomyGroup | None = None
    group_sortorder: int | None = None

    for label in split_labels(row.get(field)):
        values[f"{field}/{slug}"] = TaxonomyValue(
            fieldname=field,
            label=label,
            slug=slug,
            sortorder=sortorder,
            config=config,
        )

        if config.has_sortorder:
            group_sortorder = sortorder
            group = TaxonomyGroup(
                slug=slug,
                name=label,
                order=sortorder,
                index=config.index_of(slug),
            )

    entity.taxonomy[field] = values or None
    entity.group = group
    entity.sortorder = group_sortorder
    log.debug("Hydrated %d %s value(s) for %s", len(values), field, entity.id)
