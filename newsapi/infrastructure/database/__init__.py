from .base import Base
from .session import engine, async_session_factory, session_scope
from .models import ArticleModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "session_scope",
    "ArticleModel",
]
