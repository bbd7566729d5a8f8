"""Pydantic DTOs (Data Transfer Objects) for the news feature."""

from uuid import UUID

from pydantic import BaseModel, Field

from newsapi.domain.entities import Article


class ArticlePayload(BaseModel):
    """Request body for create and update.

    Only the JSON shape is checked here; missing fields decode to empty
    values and are rejected later by the field rules. A client supplied
    ``id`` is ignored.
    """

    author: str = Field("", examples=["Jane Doe"])
    title: str = Field("", examples=["Markets rally"])
    summary: str = Field("", examples=["Stocks closed higher on Friday."])
    created_at: str = Field("", examples=["2025-07-30T15:30:45Z"])
    source: str = Field("", examples=["https://example.com/markets"])
    tags: list[str] = Field(default_factory=list, examples=[["markets"]])

    model_config = {"extra": "ignore"}

    def to_entity(self) -> Article:
        return Article(
            author=self.author,
            title=self.title,
            summary=self.summary,
            created_at=self.created_at,
            source=self.source,
            tags=list(self.tags),
        )


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: UUID
    author: str
    title: str
    summary: str
    created_at: str
    source: str
    tags: list[str]

    model_config = {"from_attributes": True}
