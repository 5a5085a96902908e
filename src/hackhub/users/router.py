"""User directory endpoints: /api/users and /api/ratings."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends

from hackhub.database import BACKEND_ERRORS, DocumentStore
from hackhub.dependencies import get_store
from hackhub.middleware.error_handler import internal_error
from hackhub.users.service import list_ratings, list_users

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/users")
async def get_users(
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """List every user document."""
    try:
        return await list_users(store)
    except BACKEND_ERRORS as e:
        logger.error("users_fetch_failed", error=str(e))
        raise internal_error("Failed to fetch users", e) from e


@router.get("/ratings")
async def get_ratings(
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """Users sorted by rating.totalScore, highest first."""
    try:
        return await list_ratings(store)
    except BACKEND_ERRORS as e:
        logger.error("ratings_fetch_failed", error=str(e))
        raise internal_error("Failed to fetch ratings", e) from e
