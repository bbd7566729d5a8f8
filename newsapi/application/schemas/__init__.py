from .article import ArticlePayload, ArticleResponse

__all__ = [
    "ArticlePayload",
    "ArticleResponse",
]
