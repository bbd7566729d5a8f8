from .news_repository import SQLAlchemyNewsStore

__all__ = [
    "SQLAlchemyNewsStore",
]
