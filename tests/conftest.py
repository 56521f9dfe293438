"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from row_taxonomy.core.connection import ConnectionConfig
from row_taxonomy.core.engine import Engine
from row_taxonomy.mapping.config import TaxonomyFieldConfig

CREATE_PAGES = "CREATE TABLE pages (id INTEGER PRIMARY KEY, title TEXT NOT NULL)"

CREATE_TAXONOMY = """
CREATE TABLE taxonomy (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    content_id   INTEGER NOT NULL,
    contenttype  TEXT NOT NULL,
    taxonomytype TEXT NOT NULL,
    slug         TEXT NOT NULL,
    name         TEXT NOT NULL,
    sortorder    INTEGER NOT NULL DEFAULT 0,
    UNIQUE (content_id, contenttype, taxonomytype, slug)
)
"""


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:", pool_size=1)


@pytest.fixture
def categories() -> TaxonomyFieldConfig:
    """Unsorted taxonomy with three configured terms."""
    return TaxonomyFieldConfig(
        fieldname="categories",
        join_table="taxonomy",
        options={"news": "News", "events": "Events", "sports": "Sports"},
    )


@pytest.fixture
def groups() -> TaxonomyFieldConfig:
    """Sorted taxonomy (grouping) with two configured terms."""
    return TaxonomyFieldConfig(
        fieldname="groups",
        join_table="taxonomy",
        has_sortorder=True,
        options={"main": "Main menu", "meta": "Meta"},
    )


@pytest.fixture
def engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Engine over an in-memory database with a pages table and a taxonomy join table."""
    eng = Engine.from_config(sqlite_config)
    eng.execute(CREATE_PAGES)
    eng.execute(CREATE_TAXONOMY)
    yield eng
    eng.close()
