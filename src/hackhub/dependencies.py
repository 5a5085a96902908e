"""Shared FastAPI dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request

from hackhub.auth.firebase import IdentityProvider
from hackhub.database import DocumentStore


@dataclass
class Services:
    """Process-wide collaborators, built once at startup and kept on ``app.state``."""

    store: DocumentStore
    identity: IdentityProvider


def get_services(request: Request) -> Services:
    """Return the Services container of the running app."""
    services: Services | None = getattr(request.app.state, "services", None)
    if services is None:
        msg = "Services not initialized. Pass them to create_app() or start the lifespan."
        raise RuntimeError(msg)
    return services


def get_store(services: Services = Depends(get_services)) -> DocumentStore:  # noqa: B008
    """Yield the document store as a FastAPI dependency."""
    return services.store


def get_identity(services: Services = Depends(get_services)) -> IdentityProvider:  # noqa: B008
    """Yield the identity provider as a FastAPI dependency."""
    return services.identity
