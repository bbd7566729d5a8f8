from .in_memory_news_store import InMemoryNewsStore

__all__ = [
    "InMemoryNewsStore",
]
