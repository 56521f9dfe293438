"""
Example 02: Grouping Taxonomy

This example demonstrates a taxonomy with a sort order, which gives every
entry a group summary, and the aggregate SQL generated for each platform.
"""

from row_taxonomy import (
    ConnectionConfig,
    Content,
    ContentRepository,
    Engine,
    SelectQueryBuilder,
    TaxonomyType,
    UnsupportedPlatformError,
)
import tempfile
import sqlite3
from pathlib import Path


def main():
    # Set up database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE bolt_entries (id INTEGER PRIMARY KEY, title TEXT NOT NULL)")
    conn.execute("""
        CREATE TABLE bolt_taxonomy (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            content_id INTEGER NOT NULL,
            contenttype TEXT NOT NULL,
            taxonomytype TEXT NOT NULL,
            slug TEXT NOT NULL,
            name TEXT NOT NULL,
            sortorder INTEGER DEFAULT 0
        )
    """)
    conn.execute("INSERT INTO bolt_entries (id, title) VALUES (1, 'Welcome')")
    conn.execute("INSERT INTO bolt_entries (id, title) VALUES (2, 'Imprint')")
    conn.commit()
    conn.close()

    field = TaxonomyType.from_mapping(
        {
            "fieldname": "chapters",
            "target": "bolt_taxonomy",
            "data": {
                "has_sortorder": True,
                "options": {"intro": "Introduction", "legal": "Legal"},
            },
        }
    )
    chapters = field.config

    engine = Engine.from_config(ConnectionConfig(driver="sqlite", database=db_path))
    entries = ContentRepository(engine, "entries", "bolt_entries", [field])

    print("=== Grouping Taxonomy ===\n")

    # Save entries into chapters with a position
    print("1. Assign chapters:")
    for entry_id, slug, position in [(1, "intro", 1), (2, "legal", 5)]:
        entry = Content(id=entry_id, sortorder=position)
        entry.set_terms(chapters, [slug])
        entries.persist(entry)
        print(f"   #{entry_id} -> {slug} at {position}")
    print()

    # Group summary
    print("2. Group summaries:")
    for entry in entries.find_all():
        print(f"   #{entry.id} {entry.values['title']}: {entry.group}")
    print()

    # Aggregate SQL per platform
    print("3. Load SQL per platform:")
    for platform in ("mysql", "postgresql", "sqlite", "mssql"):
        builder = SelectQueryBuilder(platform).select("content.*").from_("bolt_entries", "content")
        try:
            field.load(builder, "entries")
            print(f"   {platform}: {builder.get_sql()}")
        except UnsupportedPlatformError as e:
            print(f"   {platform}: {e}")
    print()

    # Clean up
    engine.close()
    Path(db_path).unlink()


if __name__ == "__main__":
    main()
