"""Application service (use case) for news operations."""

from uuid import UUID

from newsapi.application.interfaces import NewsStore
from newsapi.domain.entities import Article
from newsapi.domain.validation import validate_article


class NewsService:
    """Orchestrates news use cases. Depends on the store port (DI).

    Articles are validated before they reach the store, so a backend never
    sees a payload that breaks the field rules.
    """

    def __init__(self, store: NewsStore):
        self._store = store

    async def create_news(self, article: Article) -> Article:
        validate_article(article)
        return await self._store.create(article)

    async def list_news(self) -> list[Article]:
        return await self._store.find_all()

    async def get_news(self, article_id: UUID) -> Article:
        return await self._store.find_by_id(article_id)

    async def update_news(self, article_id: UUID, article: Article) -> Article:
        validate_article(article)
        return await self._store.update(article_id, article)

    async def delete_news(self, article_id: UUID) -> None:
        await self._store.delete_by_id(article_id)
