"""News CRUD endpoints.

Every handler runs the same steps in order and stops at the first failure:
parse the path id, decode the body, validate, call the store, encode the
response. Any store failure, including a missing record, is answered
with 500.
"""

import logging
from collections.abc import Callable
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from newsapi.application.schemas import ArticlePayload, ArticleResponse
from newsapi.application.services import NewsService
from newsapi.domain.entities import Article
from newsapi.domain.exceptions import ArticleValidationError, StorageError
from newsapi.infrastructure.dependencies import get_news_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["News"])

# ":path" also matches an empty segment, so "/news/" reaches the handler
# and is answered as a missing id instead of a slash redirect.
_ID_PATH = "/{article_id:path}"

_ARTICLE_LIST = TypeAdapter(list[ArticleResponse])

_INTERNAL_ERROR = "internal server error"


def _parse_id(raw: str) -> UUID:
    if not raw:
        logger.error("missing id parameter")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing id parameter")
    try:
        return UUID(raw)
    except ValueError as e:
        logger.error("failed to parse id %r: %s", raw, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id format")


async def _decode_body(request: Request) -> Article:
    try:
        data = await request.json()
        payload = ArticlePayload.model_validate(data)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and pydantic's ValidationError
        logger.error("failed to decode request body: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="malformed request body")
    return payload.to_entity()


def _validation_failed(e: ArticleValidationError) -> HTTPException:
    logger.error("failed to validate request body: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"validation failed: {e}")


def _json_response(status_code: int, render: Callable[[], str | bytes]) -> Response:
    """Render the JSON body; on failure keep the status and send no body."""
    try:
        body = render()
    except (ValidationError, PydanticSerializationError) as e:
        logger.error("failed to encode response: %s", e)
        body = b""
    return Response(content=body, status_code=status_code, media_type="application/json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_news(
    request: Request,
    service: NewsService = Depends(get_news_service),
) -> Response:
    """Create a news article. Responds 201 with an empty body."""
    logger.info("request received")
    article = await _decode_body(request)
    try:
        await service.create_news(article)
    except ArticleValidationError as e:
        raise _validation_failed(e)
    except StorageError:
        logger.exception("failed to create news")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_INTERNAL_ERROR)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=list[ArticleResponse])
async def list_news(
    service: NewsService = Depends(get_news_service),
) -> Response:
    """Retrieve every stored news article."""
    logger.info("request received")
    try:
        articles = await service.list_news()
    except StorageError:
        logger.exception("failed to get all news")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_INTERNAL_ERROR)
    return _json_response(
        status.HTTP_200_OK,
        lambda: _ARTICLE_LIST.dump_json(
            [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
        ),
    )


@router.get(_ID_PATH, response_model=ArticleResponse)
async def get_news(
    article_id: str,
    service: NewsService = Depends(get_news_service),
) -> Response:
    """Retrieve a single news article by ID."""
    logger.info("request received")
    news_id = _parse_id(article_id)
    try:
        article = await service.get_news(news_id)
    except StorageError:
        logger.exception("failed to get news %s", news_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_INTERNAL_ERROR)
    return _json_response(
        status.HTTP_200_OK,
        lambda: ArticleResponse.model_validate(article, from_attributes=True).model_dump_json(),
    )


@router.put(_ID_PATH, response_model=ArticleResponse)
async def update_news(
    article_id: str,
    request: Request,
    service: NewsService = Depends(get_news_service),
) -> Response:
    """Replace every field of an existing news article."""
    logger.info("request received")
    news_id = _parse_id(article_id)
    article = await _decode_body(request)
    try:
        updated = await service.update_news(news_id, article)
    except ArticleValidationError as e:
        raise _validation_failed(e)
    except StorageError:
        logger.exception("failed to update news %s", news_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_INTERNAL_ERROR)
    return _json_response(
        status.HTTP_200_OK,
        lambda: ArticleResponse.model_validate(updated, from_attributes=True).model_dump_json(),
    )


@router.delete(_ID_PATH, status_code=status.HTTP_204_NO_CONTENT)
async def delete_news(
    article_id: str,
    service: NewsService = Depends(get_news_service),
) -> Response:
    """Delete a news article by ID."""
    logger.info("request received")
    news_id = _parse_id(article_id)
    try:
        await service.delete_news(news_id)
    except StorageError:
        logger.exception("failed to delete news %s", news_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_INTERNAL_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
