"""Top-level API router — binds every endpoint router at the site root."""

from fastapi import APIRouter

from newsapi.presentation.api.endpoints.health import router as health_router
from newsapi.presentation.api.endpoints.news import router as news_router

router = APIRouter()
router.include_router(health_router)
router.include_router(news_router)
