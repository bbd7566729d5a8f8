from .news_store import NewsStore

__all__ = [
    "NewsStore",
]
