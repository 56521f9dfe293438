"""Persist a taxonomy field as a minimal set of join-table writes.

The desired slugs held on the entity are compared with the rows already in
the join table; only slugs missing from the table are inserted and only
slugs no longer wanted are deleted, so saving an unchanged record appends
nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content
from row_taxonomy.query.queryset import DeleteStatement, InsertStatement, QuerySet

log = logging.getLogger(__name__)

ExistingLookup = Callable[[Content], Sequence[Mapping[str, Any]] | None]


def diff_slugs(desired: Iterable[str], existing: Iterable[str]) -> tuple[list[str], list[str]]:
    """Return ``(to_insert, to_delete)``.

    ``to_insert`` is desired minus existing in desired order, ``to_delete``
    existing minus desired in existing order. Both are duplicate free.
    """
    desired = list(dict.fromkeys(desired))
    existing = list(dict.fromkeys(existing))
    desired_set = set(desired)
    existing_set = set(existing)
    to_insert = [slug for slug in desired if slug not in existing_set]
    to_delete = [slug for slug in existing if slug not in desired_set]
    return to_insert, to_delete


def desired_slugs(entity: Content, fieldname: str) -> list[str]:
    """Slugs of the entity's values for *fieldname*, skipping empty entries."""
    values = entity.taxonomy.get(fieldname) or {}
    return [value.slug for value in values.values() if value is not None and value.slug]


def persist_taxonomy(
    queries: QuerySet,
    entity: Content,
    config: TaxonomyFieldConfig,
    existing_lookup: ExistingLookup,
) -> tuple[list[str], list[str]]:
    """Append the inserts and deletes that bring the join table in line with *entity*.

    *existing_lookup* returns the join-table rows currently stored for the
    entity and field. Returns the inserted and deleted slugs.
    """
    field = config.fieldname
    desired = desired_slugs(entity, field)
    existing = [row["slug"] for row in existing_lookup(entity) or [] if row]

    to_insert, to_delete = diff_slugs(desired, existing)

    if config.has_sortorder and entity.sortorder is not None:
        sortorder = entity.sortorder
    else:
        sortorder = 0

    for slug in to_insert:
        queries.append(
            InsertStatement(
                config.join_table,
                {
                    "content_id": entity.id,
                    "contenttype": entity.contenttype,
                    "taxonomytype": field,
                    "slug": slug,
                    "name": config.label_for(slug),
                    "sortorder": sortorder,
                },
            )
        )

    for slug in to_delete:
        queries.append(
            DeleteStatement(
                config.join_table,
                {"content_id": entity.id, "taxonomytype": field, "slug": slug},
            )
        )

    if to_insert or to_delete:
        log.debug(
            "%s %s: +%s -%s", entity.contenttype, entity.id, to_insert, to_delete
        )
    return to_insert, to_delete
