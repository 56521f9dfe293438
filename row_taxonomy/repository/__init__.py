"""Repository layer - content repository over engine and field types."""

from __future__ import annotations

from row_taxonomy.repository.base import ContentRepository

__all__ = [
    "ContentRepository",
]
