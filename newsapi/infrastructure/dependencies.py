"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from newsapi.application.interfaces import NewsStore
from newsapi.application.services import NewsService
from newsapi.config import get_settings
from newsapi.infrastructure.memory import InMemoryNewsStore


@lru_cache
def get_in_memory_store() -> InMemoryNewsStore:
    """Process-wide in-memory store, shared by every request."""
    return InMemoryNewsStore()


async def get_news_store() -> AsyncGenerator[NewsStore, None]:
    """Provides the configured NewsStore backend for one request."""
    settings = get_settings()
    if settings.storage_backend == "database":
        from newsapi.infrastructure.database.repositories import SQLAlchemyNewsStore
        from newsapi.infrastructure.database.session import session_scope

        async with session_scope() as session:
            yield SQLAlchemyNewsStore(session)
    else:
        yield get_in_memory_store()


async def get_news_service(
    store: NewsStore = Depends(get_news_store),
) -> AsyncGenerator[NewsService, None]:
    """Provides a NewsService instance with its store wired up."""
    yield NewsService(store)
