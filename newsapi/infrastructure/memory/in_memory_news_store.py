"""In-process news store backed by a dict."""

import logging
from uuid import UUID, uuid4

from newsapi.application.interfaces import NewsStore
from newsapi.domain.entities import Article
from newsapi.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class InMemoryNewsStore(NewsStore):
    """Implements the NewsStore port with a plain dict.

    No method awaits between reading and writing the dict, so each
    operation runs to completion on the event loop before another request
    task can touch the store. Articles are copied on the way in and on the
    way out, so callers never hold a reference to a stored record.
    """

    def __init__(self):
        self._articles: dict[UUID, Article] = {}

    async def create(self, article: Article) -> Article:
        stored = article.copy(id=uuid4())
        self._articles[stored.id] = stored
        logger.debug("Stored article %s", stored.id)
        return stored.copy()

    async def find_by_id(self, article_id: UUID) -> Article:
        stored = self._articles.get(article_id)
        if stored is None:
            raise EntityNotFoundError("Article", article_id)
        return stored.copy()

    async def find_all(self) -> list[Article]:
        return [a.copy() for a in self._articles.values()]

    async def delete_by_id(self, article_id: UUID) -> None:
        if self._articles.pop(article_id, None) is None:
            raise EntityNotFoundError("Article", article_id)

    async def update(self, article_id: UUID, article: Article) -> Article:
        if article_id not in self._articles:
            raise EntityNotFoundError("Article", article_id)
        stored = article.copy(id=article_id)
        self._articles[article_id] = stored
        return stored.copy()
