"""Project endpoints: /api/update-project-status."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException

from hackhub.auth.dependencies import get_current_user
from hackhub.auth.schemas import AuthenticatedUser
from hackhub.database import BACKEND_ERRORS, DocumentStore
from hackhub.dependencies import get_store
from hackhub.middleware.error_handler import internal_error
from hackhub.projects.schemas import UpdateProjectStatusRequest, UpdateProjectStatusResponse
from hackhub.projects.service import (
    ProjectNotFoundError,
    ProjectOwnershipError,
    update_project_status,
)
from hackhub.projects.status import parse_status

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Projects"])


@router.post("/update-project-status", response_model=UpdateProjectStatusResponse)
async def update_status(
    body: UpdateProjectStatusRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
) -> UpdateProjectStatusResponse:
    """Move one of the caller's projects to active, draft or completed."""
    if not body.project_id or not body.new_status:
        raise HTTPException(status_code=400, detail="Missing projectId or newStatus")

    new_status = parse_status(body.new_status)
    if new_status is None:
        raise HTTPException(status_code=400, detail="Invalid newStatus value")

    try:
        project = await update_project_status(store, user.uid, body.project_id, new_status)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail="Project not found") from e
    except ProjectOwnershipError as e:
        raise HTTPException(status_code=403, detail="Forbidden: You can only update your own projects") from e
    except BACKEND_ERRORS as e:
        logger.error("project_status_update_failed", project_id=body.project_id, error=str(e))
        raise internal_error("Failed to update project status", e) from e

    return UpdateProjectStatusResponse(message="Project status updated successfully", project=project)
