"""Hackathon endpoints: catalog, joined list, join."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException

from hackhub.auth.dependencies import get_current_user
from hackhub.auth.schemas import AuthenticatedUser
from hackhub.database import BACKEND_ERRORS, DocumentStore
from hackhub.dependencies import get_store
from hackhub.hackathons.schemas import JoinHackathonRequest, JoinHackathonResponse
from hackhub.hackathons.service import (
    AlreadyJoinedError,
    HackathonNotFoundError,
    join_hackathon,
    list_hackathons,
    list_joined_hackathons,
)
from hackhub.middleware.error_handler import internal_error

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Hackathons"])


@router.get("/hackathons")
async def get_hackathons(
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """List every hackathon document."""
    try:
        return await list_hackathons(store)
    except BACKEND_ERRORS as e:
        logger.error("hackathons_fetch_failed", error=str(e))
        raise internal_error("Failed to fetch hackathons", e) from e


@router.get("/user-joined-hackathons/{user_id}")
async def get_user_joined_hackathons(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """Hackathons joined by the caller. Other users' lists are forbidden."""
    if user.uid != user_id:
        raise HTTPException(status_code=403, detail="Forbidden: You can only access your own data")

    try:
        return await list_joined_hackathons(store, user_id)
    except BACKEND_ERRORS as e:
        logger.error("joined_hackathons_fetch_failed", user_id=user_id, error=str(e))
        raise internal_error("Failed to fetch joined hackathons", e) from e


@router.post("/join-hackathon", response_model=JoinHackathonResponse)
async def join(
    body: JoinHackathonRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
) -> JoinHackathonResponse:
    """Join a hackathon, creating the caller's project for it."""
    if body.hackathon_id is None or body.hackathon_id == "":
        raise HTTPException(status_code=400, detail="Missing hackathonId")

    hackathon_id = str(body.hackathon_id)
    if not hackathon_id.strip():
        raise HTTPException(status_code=400, detail="Invalid hackathonId: must be a non-empty string")

    try:
        participants = await join_hackathon(store, user.uid, hackathon_id)
    except HackathonNotFoundError as e:
        raise HTTPException(status_code=404, detail="Hackathon not found") from e
    except AlreadyJoinedError as e:
        raise HTTPException(status_code=400, detail="You have already joined this hackathon") from e
    except BACKEND_ERRORS as e:
        logger.error("join_hackathon_failed", user_id=user.uid, hackathon_id=hackathon_id, error=str(e))
        raise internal_error("Failed to join hackathon", e) from e

    return JoinHackathonResponse(message="Successfully joined hackathon", participants=participants)
