"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class Article:
    """Core domain entity representing a news article.

    ``created_at`` and ``source`` are kept exactly as received so that a
    stored article reads back unchanged. The ``id`` is owned by the storage
    layer and stays ``None`` until the article has been persisted.
    """

    author: str
    title: str
    summary: str
    created_at: str
    source: str
    tags: list[str] = field(default_factory=list)
    id: UUID | None = None

    def copy(self, **changes) -> "Article":
        """Return a detached copy, optionally overriding some fields."""
        values = {
            "author": self.author,
            "title": self.title,
            "summary": self.summary,
            "created_at": self.created_at,
            "source": self.source,
            "tags": list(self.tags),
            "id": self.id,
        }
        values.update(changes)
        return Article(**values)
