"""Platform specific aggregate SQL for taxonomy joins."""

from __future__ import annotations

from row_taxonomy.core.enums import DatabaseBackend
from row_taxonomy.core.exceptions import UnsupportedPlatformError


def group_concat(
    platform: str | DatabaseBackend | None,
    column: str,
    order_column: str,
    alias: str,
) -> str:
    """Return the select fragment aggregating *column* into a comma-joined string.

    SQLite cannot order inside ``GROUP_CONCAT``, so *order_column* is ignored
    there and the aggregated order is unspecified.

    Raises:
        UnsupportedPlatformError: If *platform* is not mysql, sqlite or postgresql.
    """
    name = platform.value if isinstance(platform, DatabaseBackend) else platform

    if name == DatabaseBackend.MYSQL.value:
        return f"GROUP_CONCAT(DISTINCT {column} ORDER BY {order_column} ASC) as {alias}"
    if name == DatabaseBackend.SQLITE.value:
        return f"GROUP_CONCAT(DISTINCT {column}) as {alias}"
    if name == DatabaseBackend.POSTGRESQL.value:
        return f"string_agg(DISTINCT {column}, ',' ORDER BY {order_column}) as {alias}"
    raise UnsupportedPlatformError(str(name))
