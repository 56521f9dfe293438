"""Statement resolution and parameter normalization.

Built queries and pending-write statements render SQL with ``:name``
placeholders. Before execution the placeholders are converted to the
driver's paramstyle, leaving string literals (such as the quoted content type
in a taxonomy join condition) and PostgreSQL ``::typecast`` syntax alone.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

# Matches :name but not ::typecast and not inside words
_PARAM_PATTERN = re.compile(r"(?<![:\w]):([a-zA-Z_]\w*)")

# Matches single-quoted string literals (with escaped quotes handled)
_STRING_LITERAL_PATTERN = re.compile(r"'(?:[^'\\]|\\.)*'")


@runtime_checkable
class Statement(Protocol):
    """Anything that can render itself to SQL with bound parameters."""

    @property
    def parameters(self) -> dict[str, Any]: ...

    def get_sql(self) -> str: ...


def normalize_params(sql: str, paramstyle: str) -> str:
    """Convert :name parameters to the target param style.

    Args:
        sql: SQL string with :name parameters.
        paramstyle: Target style - 'named' (no conversion) or 'pyformat' (%(name)s).

    Returns:
        SQL with parameters converted to the target style.
    """
    if paramstyle == "named":
        return sql
    return _convert_to_pyformat(sql)


@lru_cache(maxsize=256)
def _convert_to_pyformat(sql: str) -> str:
    """Convert :name params to %(name)s, preserving string literals."""
    parts: list[str] = []
    last_end = 0

    for match in _STRING_LITERAL_PATTERN.finditer(sql):
        start, end = match.span()
        if start > last_end:
            parts.append(_PARAM_PATTERN.sub(r"%(\1)s", sql[last_end:start]))
        parts.append(match.group())
        last_end = end

    if last_end < len(sql):
        parts.append(_PARAM_PATTERN.sub(r"%(\1)s", sql[last_end:]))

    return "".join(parts)


def resolve_statement(
    statement: Statement | str,
    params: dict[str, Any] | None = None,
) -> tuple[str, dict[str, Any], str]:
    """Return ``(sql, params, label)`` for a built statement or raw SQL text.

    Parameters bound on a statement object are merged with *params*; explicit
    *params* win on key collisions. *label* identifies the statement in error
    messages and log lines: the whitespace-collapsed SQL cut to 60 characters.
    """
    if isinstance(statement, str):
        sql = statement
        merged = dict(params or {})
    else:
        sql = statement.get_sql()
        merged = {**statement.parameters, **(params or {})}
    label = " ".join(sql.split())
    if len(label) > 60:
        label = label[:57] + "..."
    return sql, merged, label
