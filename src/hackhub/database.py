"""Firestore document store and Firebase app lifecycle."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Protocol

import firebase_admin
from firebase_admin import credentials, firestore, firestore_async
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import AsyncClient

from hackhub.config import Settings

# Failures surfaced by Firestore or Firebase Auth; routers map these to 500.
BACKEND_ERRORS: tuple[type[Exception], ...] = (GoogleAPIError, FirebaseError)

# Server-side numeric increment, usable as a value in set/update payloads.
Increment = firestore.Increment


class DocumentStore(Protocol):
    """Collection/document CRUD used by the services.

    Paths are slash-joined Firestore paths, e.g. ``users/abc/joinedHackathons``.
    ``update`` merges fields (dotted keys address nested fields), ``set``
    overwrites the whole document and ``create`` fails with
    ``google.api_core.exceptions.AlreadyExists`` when the document exists.
    """

    async def list_collection(self, path: str) -> list[dict[str, Any]]: ...

    async def get(self, path: str) -> dict[str, Any] | None: ...

    async def create(self, path: str, data: Mapping[str, Any]) -> None: ...

    async def set(self, path: str, data: Mapping[str, Any]) -> None: ...

    async def update(self, path: str, fields: Mapping[str, Any]) -> None: ...

    async def ping(self) -> None: ...


def doc_path(*segments: str) -> str:
    """Join path segments into a Firestore path."""
    return "/".join(segments)


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FirestoreStore:
    """DocumentStore backed by the async Firestore client."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def list_collection(self, path: str) -> list[dict[str, Any]]:
        return [
            {"id": snap.id, **(snap.to_dict() or {})}
            async for snap in self._client.collection(path).stream()
        ]

    async def get(self, path: str) -> dict[str, Any] | None:
        snap = await self._client.document(path).get()
        if not snap.exists:
            return None
        return snap.to_dict() or {}

    async def create(self, path: str, data: Mapping[str, Any]) -> None:
        await self._client.document(path).create(dict(data))

    async def set(self, path: str, data: Mapping[str, Any]) -> None:
        await self._client.document(path).set(dict(data))

    async def update(self, path: str, fields: Mapping[str, Any]) -> None:
        await self._client.document(path).update(dict(fields))

    async def ping(self) -> None:
        """Round-trip to Firestore by listing root collections."""
        async for _ in self._client.collections():
            break


def _load_credentials(raw: str) -> credentials.Base:
    raw = raw.strip()
    if not raw:
        return credentials.ApplicationDefault()
    if raw.startswith("{"):
        return credentials.Certificate(json.loads(raw))
    return credentials.Certificate(raw)


def init_firebase(settings: Settings) -> firebase_admin.App:
    """Initialize the Firebase Admin app from settings."""
    options: dict[str, Any] = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id
    return firebase_admin.initialize_app(_load_credentials(settings.firebase_credentials), options or None)


def close_firebase(app: firebase_admin.App) -> None:
    """Dispose of the Firebase Admin app."""
    firebase_admin.delete_app(app)


def create_store(app: firebase_admin.App) -> FirestoreStore:
    """Build a FirestoreStore bound to the given Firebase app."""
    return FirestoreStore(firestore_async.client(app))
