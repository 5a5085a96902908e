"""Account registration business logic."""

from __future__ import annotations

from typing import Any

import structlog

from hackhub.auth.firebase import IdentityProvider, IdentityProviderError
from hackhub.config import get_settings
from hackhub.database import BACKEND_ERRORS, DocumentStore, doc_path, utc_now_iso

logger = structlog.get_logger()


def initials_for(name: str, surname: str) -> str:
    """First letter of name and surname, uppercased."""
    return f"{name[:1]}{surname[:1]}".upper()


def build_user_profile(uid: str, email: str, name: str, surname: str, team: str) -> dict[str, Any]:
    """User document for a freshly registered account, with a zeroed rating block."""
    now = utc_now_iso()
    return {
        "uid": uid,
        "email": email,
        "name": name,
        "surname": surname,
        "createdAt": now,
        "rating": {
            "activity": "inactive",
            "lastUpdated": now,
            "initials": initials_for(name, surname),
            "participations": 0,
            "team": team,
            "totalScore": 0,
            "trend": {"direction": "same", "value": 0},
            "victories": 0,
        },
    }


async def register_user(
    store: DocumentStore,
    identity: IdentityProvider,
    *,
    email: str,
    password: str,
    name: str,
    surname: str,
) -> str:
    """
    Create the identity account, then the user document keyed by its uid.

    If the document write fails, the new account is deleted so a retry with
    the same email can succeed.

    Returns:
        The new account's uid.

    Raises:
        IdentityProviderError: If the account could not be created.
    """
    settings = get_settings()

    account = await identity.create_user(
        email=email,
        password=password,
        display_name=f"{name} {surname}",
    )
    logger.info("identity_account_created", uid=account.uid)

    profile = build_user_profile(account.uid, account.email, name, surname, settings.default_team)
    try:
        await store.set(doc_path(settings.users_collection, account.uid), profile)
    except BACKEND_ERRORS:
        logger.error("user_profile_write_failed", uid=account.uid, exc_info=True)
        try:
            await identity.delete_user(account.uid)
        except IdentityProviderError as cleanup_error:
            logger.error("identity_account_cleanup_failed", uid=account.uid, error=str(cleanup_error))
        else:
            logger.info("identity_account_deleted", uid=account.uid)
        raise

    logger.info("user_registered", uid=account.uid)
    return account.uid
