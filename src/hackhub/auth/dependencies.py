"""FastAPI authentication dependencies."""

from __future__ import annotations

import structlog
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hackhub.auth.firebase import IdentityProvider, InvalidCredentialError
from hackhub.auth.schemas import AuthenticatedUser
from hackhub.dependencies import get_identity

logger = structlog.get_logger()

_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    identity: IdentityProvider = Depends(get_identity),
) -> AuthenticatedUser:
    """
    Extract and verify the bearer ID token, return the caller's identity.

    Raises 401 when the header is missing or the token is rejected.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        claims = await identity.verify_token(credentials.credentials)
    except InvalidCredentialError as e:
        logger.warning("token_verification_failed", error=str(e))
        raise HTTPException(status_code=401, detail="Unauthorized") from e

    uid = claims.get("uid") or claims.get("sub")
    if not uid:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return AuthenticatedUser(uid=str(uid), claims=claims)
