"""Shared test fixtures."""

from __future__ import annotations

import copy
from collections.abc import AsyncGenerator, Mapping
from typing import Any

import pytest
import pytest_asyncio
from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists, NotFound
from httpx import ASGITransport, AsyncClient

from hackhub.auth.firebase import IdentityProviderError, InvalidCredentialError, NewAccount
from hackhub.config import get_settings
from hackhub.dependencies import Services
from hackhub.main import create_app


class MemoryStore:
    """In-process DocumentStore with Firestore's set/update/create semantics.

    ``writes`` records every successful mutation as ``(op, path)``.
    ``failures`` maps an operation name to the exception it should raise.
    """

    def __init__(self) -> None:
        self.docs: dict[str, dict[str, Any]] = {}
        self.writes: list[tuple[str, str]] = []
        self.failures: dict[str, Exception] = {}

    def seed(self, path: str, data: Mapping[str, Any]) -> None:
        self.docs[path] = copy.deepcopy(dict(data))

    def _maybe_fail(self, op: str) -> None:
        if op in self.failures:
            raise self.failures[op]

    async def list_collection(self, path: str) -> list[dict[str, Any]]:
        self._maybe_fail("list_collection")
        prefix = f"{path}/"
        result = []
        for doc_path, data in sorted(self.docs.items()):
            if not doc_path.startswith(prefix):
                continue
            doc_id = doc_path[len(prefix):]
            if "/" not in doc_id:
                result.append({"id": doc_id, **copy.deepcopy(data)})
        return result

    async def get(self, path: str) -> dict[str, Any] | None:
        self._maybe_fail("get")
        data = self.docs.get(path)
        return copy.deepcopy(data) if data is not None else None

    async def create(self, path: str, data: Mapping[str, Any]) -> None:
        self._maybe_fail("create")
        if path in self.docs:
            raise AlreadyExists(f"Document already exists: {path}")
        self.docs[path] = _apply({}, data)
        self.writes.append(("create", path))

    async def set(self, path: str, data: Mapping[str, Any]) -> None:
        self._maybe_fail("set")
        self.docs[path] = _apply({}, data)
        self.writes.append(("set", path))

    async def update(self, path: str, fields: Mapping[str, Any]) -> None:
        self._maybe_fail("update")
        if path not in self.docs:
            raise NotFound(f"No document to update: {path}")
        self.docs[path] = _apply(self.docs[path], fields, dotted=True)
        self.writes.append(("update", path))

    async def ping(self) -> None:
        self._maybe_fail("ping")


def _apply(doc: dict[str, Any], fields: Mapping[str, Any], dotted: bool = False) -> dict[str, Any]:
    doc = copy.deepcopy(doc)
    for key, value in fields.items():
        parts = key.split(".") if dotted else [key]
        node = doc
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        leaf = parts[-1]
        if isinstance(value, firestore.Increment):
            current = node.get(leaf)
            node[leaf] = (current if isinstance(current, (int, float)) else 0) + value.value
        else:
            node[leaf] = copy.deepcopy(value)
    return doc


class FakeIdentityProvider:
    """IdentityProvider that issues opaque tokens and keeps accounts in memory."""

    def __init__(self) -> None:
        self.tokens: dict[str, dict[str, Any]] = {}
        self.accounts: dict[str, dict[str, str]] = {}
        self.deleted: list[str] = []
        self.create_error: str | None = None

    def issue_token(self, uid: str, **claims: Any) -> str:
        token = f"token-{uid}"
        self.tokens[token] = {"uid": uid, "sub": uid, **claims}
        return token

    async def verify_token(self, token: str) -> dict[str, Any]:
        if token not in self.tokens:
            raise InvalidCredentialError("Could not verify ID token")
        return dict(self.tokens[token])

    async def create_user(self, *, email: str, password: str, display_name: str) -> NewAccount:
        if self.create_error is not None:
            raise IdentityProviderError(self.create_error)
        if any(a["email"] == email for a in self.accounts.values()):
            raise IdentityProviderError("The user with the provided email already exists (EMAIL_EXISTS).")
        uid = f"uid-{len(self.accounts) + 1}"
        self.accounts[uid] = {"email": email, "password": password, "display_name": display_name}
        return NewAccount(uid=uid, email=email)

    async def delete_user(self, uid: str) -> None:
        self.accounts.pop(uid, None)
        self.deleted.append(uid)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; tests that patch the environment get a fresh copy."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest_asyncio.fixture
async def client(store: MemoryStore, identity: FakeIdentityProvider) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP test client over an app wired to the in-memory collaborators."""
    app = create_app(Services(store=store, identity=identity))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def authed_client(client: AsyncClient, identity: FakeIdentityProvider) -> AsyncClient:
    """Client authenticated as ``user-1``."""
    token = identity.issue_token("user-1", email="ann@example.com")
    client.headers["Authorization"] = f"Bearer {token}"
    return client


@pytest.fixture
def seeded_user(store: MemoryStore) -> dict[str, Any]:
    """Profile document of ``user-1``, as registration would write it."""
    profile = {
        "uid": "user-1",
        "email": "ann@example.com",
        "name": "Ann",
        "surname": "Lee",
        "createdAt": "2026-01-01T00:00:00.000Z",
        "rating": {
            "activity": "inactive",
            "lastUpdated": "2026-01-01T00:00:00.000Z",
            "initials": "AL",
            "participations": 0,
            "team": "C.C.P.C.",
            "totalScore": 0,
            "trend": {"direction": "same", "value": 0},
            "victories": 0,
        },
    }
    store.seed("users/user-1", profile)
    return profile
