"""Request/response schemas for authentication endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """Identity attached to a request after bearer token verification."""

    uid: str
    claims: dict[str, Any]


class ProtectedResponse(BaseModel):
    message: str
    user: dict[str, Any]


class RegisterRequest(BaseModel):
    """Account registration. Presence of every field is checked by the router."""

    email: str | None = None
    password: str | None = None
    name: str | None = None
    surname: str | None = None


class RegisterResponse(BaseModel):
    message: str
    uid: str
