"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from uuid import UUID

from newsapi.domain.entities import Article


class NewsStore(ABC):
    """Port for news persistence — implemented in the infrastructure layer.

    Every failure is raised as a ``StorageError``; a missing record raises
    ``EntityNotFoundError``. Implementations are shared by concurrent request
    tasks and must be safe for that.
    """

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def find_by_id(self, article_id: UUID) -> Article:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Retrieve every stored article."""
        ...

    @abstractmethod
    async def delete_by_id(self, article_id: UUID) -> None:
        """Delete an article by its ID."""
        ...

    @abstractmethod
    async def update(self, article_id: UUID, article: Article) -> Article:
        """Replace all fields of the stored article and return the result."""
        ...
