"""Hackathon catalog and the join workflow.

Joining touches four documents with independent writes, in this order:

1. ``users/{uid}/joinedHackathons/{hid}`` is created (create-if-absent, the
   duplicate-join guard),
2. ``hackathons/{hid}.participants`` is incremented server-side,
3. ``my_projects/{uid}_{hid}`` is overwritten,
4. ``users/{uid}.rating.participations`` is incremented server-side.

There is no transaction: a failure part-way leaves the earlier writes in
place.
"""

from __future__ import annotations

import math
from typing import Any

import structlog
from google.api_core.exceptions import AlreadyExists

from hackhub.config import get_settings
from hackhub.database import DocumentStore, Increment, doc_path, utc_now_iso
from hackhub.projects.status import get_labels, initial_project_fields

logger = structlog.get_logger()


class HackathonNotFoundError(LookupError):
    """No hackathon document with the requested id."""


class AlreadyJoinedError(ValueError):
    """The user already joined this hackathon."""


def project_id_for(user_id: str, hackathon_id: str) -> str:
    """Project document id for a (user, hackathon) pair."""
    return f"{user_id}_{hackathon_id}"


def participant_count(hackathon: dict[str, Any]) -> int:
    """Stored ``participants`` of a hackathon; missing, non-numeric or non-finite counts as 0."""
    count = hackathon.get("participants")
    if isinstance(count, bool) or not isinstance(count, (int, float)) or not math.isfinite(count):
        return 0
    return int(count)


async def list_hackathons(store: DocumentStore) -> list[dict[str, Any]]:
    """All hackathon documents as ``{id, ...fields}``."""
    return await store.list_collection(get_settings().hackathons_collection)


async def list_joined_hackathons(store: DocumentStore, user_id: str) -> list[dict[str, Any]]:
    """Joined-hackathon records of one user."""
    settings = get_settings()
    return await store.list_collection(
        doc_path(settings.users_collection, user_id, settings.joined_hackathons_collection)
    )


def build_project(
    user_id: str,
    hackathon_id: str,
    hackathon: dict[str, Any],
    now: str,
) -> dict[str, Any]:
    """Project document created when ``user_id`` joins ``hackathon``."""
    labels = get_labels(get_settings().labels_locale)
    project_id = project_id_for(user_id, hackathon_id)
    return {
        "id": project_id,
        "title": hackathon.get("title"),
        "description": hackathon.get("description"),
        "image": hackathon.get("image") or "default-image",
        "hackathonId": hackathon_id,
        **initial_project_fields(hackathon, labels),
        "createdAt": now,
        "userId": user_id,
    }


async def join_hackathon(store: DocumentStore, user_id: str, hackathon_id: str) -> int:
    """
    Join ``user_id`` to ``hackathon_id``.

    Returns:
        The participant count read before joining, plus one. Concurrent joins
        may make this stale; the stored counter is incremented atomically.

    Raises:
        HackathonNotFoundError: If the hackathon does not exist. Nothing is written.
        AlreadyJoinedError: If the user already joined. Nothing is written.
    """
    settings = get_settings()
    hackathon_path = doc_path(settings.hackathons_collection, hackathon_id)
    user_path = doc_path(settings.users_collection, user_id)
    joined_path = doc_path(user_path, settings.joined_hackathons_collection, hackathon_id)

    hackathon = await store.get(hackathon_path)
    if hackathon is None:
        raise HackathonNotFoundError(hackathon_id)

    if await store.get(joined_path) is not None:
        raise AlreadyJoinedError(hackathon_id)

    participants = participant_count(hackathon) + 1
    now = utc_now_iso()
    try:
        await store.create(joined_path, {"joinedAt": now, "hackathonId": hackathon_id})
    except AlreadyExists as e:
        # Lost a race with a concurrent join of the same pair
        raise AlreadyJoinedError(hackathon_id) from e

    await store.update(hackathon_path, {"participants": Increment(1)})

    project = build_project(user_id, hackathon_id, hackathon, now)
    await store.set(doc_path(settings.projects_collection, project["id"]), project)

    await store.update(
        user_path,
        {
            "rating.participations": Increment(1),
            "rating.lastUpdated": now,
        },
    )

    logger.info(
        "hackathon_joined",
        user_id=user_id,
        hackathon_id=hackathon_id,
        hackathon_status=hackathon.get("status"),
        participants=participants,
    )
    return participants
