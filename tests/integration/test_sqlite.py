"""Integration test for the taxonomy field against SQLite.

Covers: diff persistence, aggregate loading, slug filters, the sorted-group
summary and transactional rollback end-to-end against a real SQLite
in-memory database.
"""

from __future__ import annotations

import sqlite3

import pytest

from row_taxonomy.core.engine import Engine
from row_taxonomy.fields.accessor import FieldConfigAccessor
from row_taxonomy.fields.registry import default_registry
from row_taxonomy.fields.taxonomy import TaxonomyType
from row_taxonomy.mapping.config import TaxonomyFieldConfig
from row_taxonomy.mapping.entity import Content
from row_taxonomy.mapping.value import TaxonomyGroup
from row_taxonomy.query.queryset import DeleteStatement, InsertStatement
from row_taxonomy.repository.base import ContentRepository
from row_taxonomy.taxonomy.hydrate import split_labels

STORED = "SELECT taxonomytype, slug, name, sortorder FROM taxonomy ORDER BY id"


# --- Fixtures ---


@pytest.fixture
def pages(engine: Engine) -> Engine:
    engine.execute("INSERT INTO pages (id, title) VALUES (1, 'Home')")
    engine.execute("INSERT INTO pages (id, title) VALUES (2, 'About')")
    return engine


@pytest.fixture
def sections() -> TaxonomyFieldConfig:
    """Sorted taxonomy stored in the shared join table."""
    return TaxonomyFieldConfig(
        fieldname="sections",
        join_table="taxonomy",
        has_sortorder=True,
        options={"main": "Main menu", "meta": "Meta"},
    )


@pytest.fixture
def repo(pages: Engine, categories: TaxonomyFieldConfig) -> ContentRepository:
    return ContentRepository(
        pages, "pages", "pages", [TaxonomyType(FieldConfigAccessor(categories))]
    )


def _page(config: TaxonomyFieldConfig, slugs: list[str], page_id: int = 1) -> Content:
    entity = Content(id=page_id, contenttype="pages")
    entity.set_terms(config, slugs)
    return entity


# --- Integration Tests ---


@pytest.mark.integration
class TestSqlitePersist:
    def test_inserts_join_rows(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        queries = repo.persist(_page(categories, ["news", "events"]))

        assert [type(s) for s in queries] == [InsertStatement, InsertStatement]
        assert repo.engine.fetch_all(STORED) == [
            {"taxonomytype": "categories", "slug": "news", "name": "News", "sortorder": 0},
            {"taxonomytype": "categories", "slug": "events", "name": "Events", "sortorder": 0},
        ]

    def test_unchanged_terms_write_nothing(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        entity = _page(categories, ["news", "events"])
        repo.persist(entity)

        assert len(repo.persist(entity)) == 0
        assert len(repo.engine.fetch_all(STORED)) == 2

    def test_removed_term_deleted(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        repo.persist(_page(categories, ["news", "events"]))

        queries = repo.persist(_page(categories, ["news"]))

        assert list(queries) == [
            DeleteStatement(
                "taxonomy", {"content_id": 1, "taxonomytype": "categories", "slug": "events"}
            )
        ]
        assert [row["slug"] for row in repo.engine.fetch_all(STORED)] == ["news"]

    def test_other_records_untouched(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        repo.persist(_page(categories, ["news"], page_id=1))
        repo.persist(_page(categories, ["news"], page_id=2))

        repo.persist(_page(categories, [], page_id=1))

        rows = repo.engine.fetch_all("SELECT content_id FROM taxonomy")
        assert rows == [{"content_id": 2}]

    def test_failed_write_rolls_back(
        self, pages: Engine, categories: TaxonomyFieldConfig
    ) -> None:
        # no sortorder column: inserting a tag fails after the category insert ran
        pages.execute(
            "CREATE TABLE tag_taxonomy (id INTEGER PRIMARY KEY, content_id INTEGER, "
            "contenttype TEXT, taxonomytype TEXT, slug TEXT, name TEXT)"
        )
        tags = TaxonomyFieldConfig(fieldname="tags", join_table="tag_taxonomy")
        repo = ContentRepository(
            pages,
            "pages",
            "pages",
            [
                TaxonomyType(FieldConfigAccessor(categories)),
                TaxonomyType(FieldConfigAccessor(tags)),
            ],
        )
        entity = _page(categories, ["news"])
        entity.set_terms(tags, ["php"])

        with pytest.raises(sqlite3.OperationalError, match="sortorder"):
            repo.persist(entity)

        assert pages.fetch_all(STORED) == []


@pytest.mark.integration
class TestSqliteLoad:
    def test_one_row_per_record(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        repo.persist(_page(categories, ["news", "events"]))

        records = repo.find_all()

        assert [r.id for r in records] == [1, 2]
        home, about = records
        assert set(split_labels(home.values["categories"])) == {"News", "Events"}
        # every label shares the row's single slug, so one value survives
        terms = home.terms("categories")
        assert len(terms) == 1
        assert terms[0].slug in {"news", "events"}
        assert about.taxonomy["categories"] is None

    def test_find(self, repo: ContentRepository, categories: TaxonomyFieldConfig) -> None:
        repo.persist(_page(categories, ["sports"]))

        record = repo.find(1)

        assert record is not None
        assert record.values["title"] == "Home"
        assert [v.label for v in record.terms("categories")] == ["Sports"]

    def test_find_missing(self, repo: ContentRepository) -> None:
        assert repo.find(99) is None

    def test_filter_by_slug(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        repo.persist(_page(categories, ["news"], page_id=1))
        repo.persist(_page(categories, ["events"], page_id=2))

        assert [r.id for r in repo.find_all({"categories": "events"})] == [2]
        assert [r.id for r in repo.find_all({"categories": "news || events"})] == [1, 2]
        assert repo.find_all({"categories": "sports"}) == []

    def test_filter_combined_with_column(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        repo.persist(_page(categories, ["news"], page_id=1))
        repo.persist(_page(categories, ["news"], page_id=2))

        found = repo.find_all({"categories": "news", "title": "About"})

        assert [r.id for r in found] == [2]

    def test_content_type_scopes_join(
        self, repo: ContentRepository, categories: TaxonomyFieldConfig
    ) -> None:
        entry = _page(categories, ["news"])
        entry.contenttype = "entries"
        repo.persist(entry)

        assert repo.find(1).taxonomy["categories"] is None


@pytest.mark.integration
class TestSqliteSortedGroup:
    def test_group_summary(self, pages: Engine, sections: TaxonomyFieldConfig) -> None:
        field = TaxonomyType(FieldConfigAccessor(sections))
        repo = ContentRepository(pages, "pages", "pages", [field])
        entity = _page(sections, ["meta"])
        entity.sortorder = 3
        repo.persist(entity)

        record = repo.find(1)

        assert record is not None
        assert record.group == TaxonomyGroup(slug="meta", name="Meta", order=3, index=1)
        assert record.sortorder == 3

    def test_fields_from_registry(
        self, pages: Engine, categories: TaxonomyFieldConfig, sections: TaxonomyFieldConfig
    ) -> None:
        fields = default_registry().create_all(
            [
                {
                    "type": "taxonomy",
                    "fieldname": "categories",
                    "target": "taxonomy",
                    "data": {"options": dict(categories.options)},
                },
                {
                    "type": "taxonomy",
                    "fieldname": "sections",
                    "target": "taxonomy",
                    "data": {"has_sortorder": True, "options": dict(sections.options)},
                },
            ]
        )
        repo = ContentRepository(pages, "pages", "pages", fields)
        entity = _page(categories, ["news"])
        entity.set_terms(sections, ["main"])
        entity.sortorder = 1
        repo.persist(entity)

        record = repo.find(1)

        assert record is not None
        assert [v.slug for v in record.terms("categories")] == ["news"]
        assert record.group == TaxonomyGroup(slug="main", name="Main menu", order=1, index=0)
