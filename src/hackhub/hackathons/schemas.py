"""Request/response schemas for hackathon endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class JoinHackathonRequest(BaseModel):
    """Join a hackathon. Numeric ids are accepted and coerced to strings."""

    model_config = ConfigDict(populate_by_name=True)

    hackathon_id: StrictStr | StrictInt | None = Field(None, alias="hackathonId")


class JoinHackathonResponse(BaseModel):
    message: str
    participants: int
