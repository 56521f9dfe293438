"""
Example 01: Taxonomy Field

This example demonstrates storing categories for pages in a join table and
reading them back as part of each page row.
"""

from row_taxonomy import ConnectionConfig, ContentRepository, Content, Engine, default_registry
import tempfile
import sqlite3
from pathlib import Path


FIELDS = [
    {
        "type": "taxonomy",
        "fieldname": "categories",
        "target": "bolt_taxonomy",
        "data": {
            "has_sortorder": False,
            "options": {"news": "News", "events": "Events", "sports": "Sports"},
        },
    },
]


def main():
    # Set up database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE bolt_pages (id INTEGER PRIMARY KEY, title TEXT NOT NULL)")
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
    conn.execute("INSERT INTO bolt_pages (id, title) VALUES (1, 'Home')")
    conn.execute("INSERT INTO bolt_pages (id, title) VALUES (2, 'About')")
    conn.commit()
    conn.close()

    # Configure engine, fields and repository
    config = ConnectionConfig(driver="sqlite", database=db_path)
    engine = Engine.from_config(config)
    fields = default_registry().create_all(FIELDS)
    categories = fields[0].config
    pages = ContentRepository(engine, "pages", "bolt_pages", fields)

    print("=== Taxonomy Field ===\n")

    # Save terms
    print("1. Tag page #1 with news and events:")
    home = Content(id=1, contenttype="pages")
    home.set_terms(categories, ["news", "events"])
    queries = pages.persist(home)
    print(f"   Executed {len(queries)} statement(s)\n")

    # Saving again is a no-op
    print("2. Save again without changes:")
    print(f"   Executed {len(pages.persist(home))} statement(s)\n")

    # Load with the aggregated terms
    print("3. Load all pages:")
    for page in pages.find_all():
        print(f"   #{page.id} {page.values['title']}: {page.values['categories']}")
    print()

    # Filter on a slug
    print("4. Pages in events or sports:")
    for page in pages.find_all({"categories": "events || sports"}):
        print(f"   #{page.id} {page.values['title']}")
    print()

    # Remove a term
    print("5. Drop events from page #1:")
    home.set_terms(categories, ["news"])
    for statement in pages.persist(home):
        print(f"   {statement.get_sql()}")
    print()

    # Clean up
    engine.close()
    Path(db_path).unlink()


if __name__ == "__main__":
    main()
