"""Aggregate join fetching a record's taxonomy terms with the record itself.

The join table is left-joined under the field name as alias and grouped by
the content id, so every content record still comes back as exactly one row.
That row carries, for a field named ``categories``:

- ``categories`` - the term names aggregated into one comma-joined string;
- ``categories_slug`` - the slug of one of the joined rows (not aggregated);
- ``categories_sortorder`` - likewise, only when the field has a sort order.
"""

from __future__ import annotations

import logging

from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.query.builder import SelectQueryBuilder
from row_taxonomy.taxonomy.platform import group_concat

log = logging.getLogger(__name__)


def primary_alias(query: SelectQueryBuilder) -> str:
    """Alias of the first FROM item, or its table name when it has none."""
    from_ = query.get_query_part("from")[0]
    return from_["alias"] or from_["table"]


def augment_query(
    query: SelectQueryBuilder,
    config: TaxonomyFieldConfig,
    content_type: str,
) -> None:
    """Add the taxonomy selects, left join and group-by to a content query.

    Raises:
        UnsupportedPlatformError: If the query targets a platform without an
            aggregate fragment. The query is left untouched in that case.
    """
    field = config.fieldname
    alias = primary_alias(query)

    if config.has_sortorder:
        order = f"{field}.sortorder"
    else:
        order = f"{field}.id"

    aggregate = group_concat(query.platform, f"{field}.name", order, field)

    if config.has_sortorder:
        query.add_select(f"{field}.sortorder as {field}_sortorder")

    quoted_type = content_type.replace("'", "''")
    query.add_select(f"{field}.slug as {field}_slug").add_select(aggregate).left_join(
        alias,
        config.join_table,
        field,
        f"{alias}.id = {field}.content_id"
        f" AND {field}.contenttype = '{quoted_type}'"
        f" AND {field}.taxonomytype = '{field}'",
    ).add_group_by(f"{alias}.id")

    log.debug("Joined %s as %s onto %s (%s)", config.join_table, field, alias, query.platform)
