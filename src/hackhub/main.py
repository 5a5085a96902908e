"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from hackhub.auth.firebase import FirebaseIdentityProvider
from hackhub.auth.router import router as auth_router
from hackhub.config import get_settings
from hackhub.database import close_firebase, create_store, init_firebase
from hackhub.dependencies import Services
from hackhub.hackathons.router import router as hackathons_router
from hackhub.health.router import router as health_router
from hackhub.middleware import setup_middleware
from hackhub.projects.router import router as projects_router
from hackhub.users.router import router as users_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle.

    Builds the Firebase-backed Services unless create_app() was given some.
    """
    if getattr(app.state, "services", None) is not None:
        yield
        return

    settings = get_settings()
    firebase_app = init_firebase(settings)
    app.state.services = Services(
        store=create_store(firebase_app),
        identity=FirebaseIdentityProvider(firebase_app, check_revoked=settings.check_revoked_tokens),
    )
    logger.info("firebase_initialized", project_id=firebase_app.project_id)

    yield

    app.state.services = None
    close_firebase(firebase_app)


def create_app(services: Services | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Hackhub API",
        description="Backend API for hackathon listings, participation and ratings",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.services = services

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(hackathons_router)
    app.include_router(projects_router)

    return app


app = create_app()
