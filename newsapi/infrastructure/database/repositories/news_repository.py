"""Concrete news store backed by SQLAlchemy."""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsapi.application.interfaces import NewsStore
from newsapi.domain.entities import Article
from newsapi.domain.exceptions import EntityNotFoundError, StorageError
from newsapi.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyNewsStore(NewsStore):
    """Implements the NewsStore port using SQLAlchemy async sessions.

    One store is built per request around that request's session, so no
    session is ever shared between tasks.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=UUID(model.id),
            author=model.author,
            title=model.title,
            summary=model.summary,
            created_at=model.created_at,
            source=model.source,
            tags=list(model.tags),
        )

    def _to_model(self, entity: Article, article_id: UUID) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=str(article_id),
            author=entity.author,
            title=entity.title,
            summary=entity.summary,
            created_at=entity.created_at,
            source=entity.source,
            tags=list(entity.tags),
        )

    async def _get_model(self, article_id: UUID) -> ArticleModel:
        model = await self._session.get(ArticleModel, str(article_id))
        if model is None:
            raise EntityNotFoundError("Article", article_id)
        return model

    async def create(self, article: Article) -> Article:
        model = self._to_model(article, uuid4())
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to insert article: {exc}") from exc
        return self._to_entity(model)

    async def find_by_id(self, article_id: UUID) -> Article:
        try:
            model = await self._get_model(article_id)
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to load article {article_id}: {exc}") from exc
        return self._to_entity(model)

    async def find_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.desc())
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to list articles: {exc}") from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete_by_id(self, article_id: UUID) -> None:
        try:
            model = await self._get_model(article_id)
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to delete article {article_id}: {exc}") from exc
        logger.debug("Deleted article %s", article_id)

    async def update(self, article_id: UUID, article: Article) -> Article:
        try:
            model = await self._get_model(article_id)
            model.author = article.author
            model.title = article.title
            model.summary = article.summary
            model.created_at = article.created_at
            model.source = article.source
            model.tags = list(article.tags)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to update article {article_id}: {exc}") from exc
        return self._to_entity(model)
