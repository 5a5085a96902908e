"""User directory and ratings leaderboard."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from hackhub.config import get_settings
from hackhub.database import DocumentStore


def rating_score(user: dict[str, Any]) -> float:
    """``rating.totalScore`` of a user document; missing, non-numeric or NaN counts as 0."""
    rating = user.get("rating")
    if not isinstance(rating, dict):
        return 0
    score = rating.get("totalScore")
    if isinstance(score, bool) or not isinstance(score, (int, float)) or math.isnan(score):
        return 0
    return score


def sort_by_rating(users: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Highest totalScore first; ties ordered by document id ascending."""
    return sorted(users, key=lambda u: (-rating_score(u), str(u.get("id", ""))))


async def list_users(store: DocumentStore) -> list[dict[str, Any]]:
    """All user documents as ``{id, ...fields}``."""
    return await store.list_collection(get_settings().users_collection)


async def list_ratings(store: DocumentStore) -> list[dict[str, Any]]:
    """All user documents ranked for the leaderboard."""
    return sort_by_rating(await list_users(store))
