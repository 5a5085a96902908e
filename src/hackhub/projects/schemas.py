"""Request/response schemas for project endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UpdateProjectStatusRequest(BaseModel):
    """Change a project's status. Both fields are checked by the router."""

    model_config = ConfigDict(populate_by_name=True)

    project_id: str | None = Field(None, alias="projectId")
    new_status: str | None = Field(None, alias="newStatus")


class UpdateProjectStatusResponse(BaseModel):
    message: str
    project: dict[str, Any]
