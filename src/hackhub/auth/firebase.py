"""Firebase Authentication client: ID token verification and account management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from starlette.concurrency import run_in_threadpool


class InvalidCredentialError(Exception):
    """The bearer credential could not be verified."""


class IdentityProviderError(Exception):
    """The identity provider rejected or failed an account operation."""


@dataclass(frozen=True)
class NewAccount:
    """Account created with the identity provider."""

    uid: str
    email: str


class IdentityProvider(Protocol):
    async def verify_token(self, token: str) -> dict[str, Any]: ...

    async def create_user(self, *, email: str, password: str, display_name: str) -> NewAccount: ...

    async def delete_user(self, uid: str) -> None: ...


class FirebaseIdentityProvider:
    """IdentityProvider backed by firebase_admin.auth.

    The Admin SDK is blocking, so every call runs in Starlette's threadpool.
    """

    def __init__(self, app: firebase_admin.App, check_revoked: bool = False) -> None:
        self._app = app
        self._check_revoked = check_revoked

    async def verify_token(self, token: str) -> dict[str, Any]:
        """
        Verify a Firebase ID token and return its decoded claims.

        Raises:
            InvalidCredentialError: If the token is malformed, expired, revoked
                or otherwise rejected.
        """
        try:
            return await run_in_threadpool(
                auth.verify_id_token,
                token,
                app=self._app,
                check_revoked=self._check_revoked,
            )
        except (ValueError, FirebaseError) as e:
            raise InvalidCredentialError(str(e)) from e

    async def create_user(self, *, email: str, password: str, display_name: str) -> NewAccount:
        """
        Create an email/password account.

        Raises:
            IdentityProviderError: If the arguments are rejected or the email is taken.
        """
        try:
            record = await run_in_threadpool(
                auth.create_user,
                email=email,
                password=password,
                display_name=display_name,
                app=self._app,
            )
        except (ValueError, FirebaseError) as e:
            raise IdentityProviderError(str(e)) from e
        return NewAccount(uid=record.uid, email=record.email or email)

    async def delete_user(self, uid: str) -> None:
        try:
            await run_in_threadpool(auth.delete_user, uid, app=self._app)
        except (ValueError, FirebaseError) as e:
            raise IdentityProviderError(str(e)) from e
