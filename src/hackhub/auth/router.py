"""Authentication endpoints: registration and the protected-route probe."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException

from hackhub.auth.dependencies import get_current_user
from hackhub.auth.firebase import IdentityProvider, IdentityProviderError
from hackhub.auth.schemas import (
    AuthenticatedUser,
    ProtectedResponse,
    RegisterRequest,
    RegisterResponse,
)
from hackhub.auth.service import register_user
from hackhub.database import BACKEND_ERRORS, DocumentStore
from hackhub.dependencies import get_identity, get_store
from hackhub.middleware.error_handler import internal_error

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Auth"])


@router.get("/protected", response_model=ProtectedResponse)
async def protected(
    user: AuthenticatedUser = Depends(get_current_user),
) -> ProtectedResponse:
    """Echo the verified token claims."""
    return ProtectedResponse(message="You have accessed a protected route!", user=user.claims)


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: RegisterRequest,
    store: DocumentStore = Depends(get_store),
    identity: IdentityProvider = Depends(get_identity),
) -> RegisterResponse:
    """Create an identity account and its user document."""
    if not (body.email and body.password and body.name and body.surname):
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        uid = await register_user(
            store,
            identity,
            email=body.email,
            password=body.password,
            name=body.name,
            surname=body.surname,
        )
    except (IdentityProviderError, *BACKEND_ERRORS) as e:
        logger.error("registration_failed", error=str(e))
        raise internal_error("Failed to register user", e) from e

    return RegisterResponse(message="User registered successfully", uid=uid)
