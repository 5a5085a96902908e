"""Health, readiness, and version endpoints."""

from fastapi import APIRouter, Depends

from hackhub.config import get_settings
from hackhub.database import BACKEND_ERRORS, DocumentStore
from hackhub.dependencies import get_store

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> dict[str, object]:
    """Readiness probe: checks Firestore connectivity."""
    checks: dict[str, object] = {}

    try:
        await store.ping()
        checks["firestore"] = "ok"
    except BACKEND_ERRORS as exc:
        checks["firestore"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
