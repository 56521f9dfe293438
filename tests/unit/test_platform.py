"""Unit tests for platform specific aggregate SQL."""

from __future__ import annotations

import pytest

from row_taxonomy.core.enums import DatabaseBackend
from row_taxonomy.core.exceptions import QueryBuildError, UnsupportedPlatformError
from row_taxonomy.taxonomy.platform import group_concat


class TestGroupConcat:
    def test_mysql(self) -> None:
        sql = group_concat("mysql", "name", "ord", "categories")
        assert sql == "GROUP_CONCAT(DISTINCT name ORDER BY ord ASC) as categories"

    def test_sqlite_has_no_ordering(self) -> None:
        sql = group_concat("sqlite", "name", "ord", "categories")
        assert sql == "GROUP_CONCAT(DISTINCT name) as categories"

    def test_postgresql(self) -> None:
        sql = group_concat("postgresql", "name", "ord", "categories")
        assert sql == "string_agg(DISTINCT name, ',' ORDER BY ord) as categories"

    def test_accepts_backend_enum(self) -> None:
        assert group_concat(DatabaseBackend.MYSQL, "t.name", "t.id", "tags") == (
            "GROUP_CONCAT(DISTINCT t.name ORDER BY t.id ASC) as tags"
        )

    def test_unsupported_platform_raises(self) -> None:
        with pytest.raises(UnsupportedPlatformError, match="oracle") as exc_info:
            group_concat("oracle", "name", "ord", "categories")
        assert exc_info.value.platform == "oracle"

    def test_platform_name_is_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            group_concat("MySQL", "name", "ord", "categories")

    def test_missing_platform_raises(self) -> None:
        with pytest.raises(UnsupportedPlatformError, match="None"):
            group_concat(None, "name", "ord", "categories")

    def test_is_query_build_error(self) -> None:
        with pytest.raises(QueryBuildError):
            group_concat("mssql", "name", "ord", "categories")
