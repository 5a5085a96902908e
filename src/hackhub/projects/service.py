"""Project status business logic."""

from __future__ import annotations

from typing import Any

import structlog

from hackhub.config import get_settings
from hackhub.database import DocumentStore, doc_path
from hackhub.projects.status import ProjectStatus, get_labels, status_update_fields

logger = structlog.get_logger()


class ProjectNotFoundError(LookupError):
    """No project document with the requested id."""


class ProjectOwnershipError(PermissionError):
    """The caller does not own the project."""


async def update_project_status(
    store: DocumentStore,
    user_id: str,
    project_id: str,
    new_status: ProjectStatus,
) -> dict[str, Any]:
    """
    Apply the status table for ``new_status`` to a project owned by ``user_id``.

    Only the status-derived fields are written (partial update).

    Returns:
        The project as stored before the update, merged with the applied fields.

    Raises:
        ProjectNotFoundError: If the project does not exist.
        ProjectOwnershipError: If ``project.userId`` differs from ``user_id``.
    """
    settings = get_settings()
    path = doc_path(settings.projects_collection, project_id)

    project = await store.get(path)
    if project is None:
        raise ProjectNotFoundError(project_id)
    if project.get("userId") != user_id:
        raise ProjectOwnershipError(project_id)

    fields = status_update_fields(new_status, project, get_labels(settings.labels_locale))
    await store.update(path, fields)

    logger.info(
        "project_status_updated",
        project_id=project_id,
        user_id=user_id,
        previous=project.get("status"),
        new=new_status.value,
    )
    return {"id": project_id, **project, **fields}
