"""Project status vocabulary.

Maps a hackathon or project status onto the display fields stored on a
project document: action labels, status text, progress text and time status.
Labels come in two locales, ``en`` and ``uk``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    DRAFT = "draft"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Labels:
    """Display strings for one locale."""

    actions: Mapping[ProjectStatus, tuple[str, str]]
    fallback_actions: tuple[str, str]
    status_in_progress: str
    status_draft: str
    status_completed: str
    progress_in_progress: str
    finished: str
    starting_soon: str


LABELS: dict[str, Labels] = {
    "en": Labels(
        actions={
            ProjectStatus.ACTIVE: ("Edit", "Submit"),
            ProjectStatus.DRAFT: ("View", "Delete"),
            ProjectStatus.COMPLETED: ("View", "Share"),
        },
        fallback_actions=("Edit", "Submit"),
        status_in_progress="In progress",
        status_draft="Draft",
        status_completed="Completed",
        progress_in_progress="In progress",
        finished="Finished",
        starting_soon="Starting soon",
    ),
    "uk": Labels(
        actions={
            ProjectStatus.ACTIVE: ("Редагувати", "Подати"),
            ProjectStatus.DRAFT: ("Переглянути", "Видалити"),
            ProjectStatus.COMPLETED: ("Переглянути", "Поділитися"),
        },
        fallback_actions=("Редагувати", "Подати"),
        status_in_progress="В процесі",
        status_draft="Чернетка",
        status_completed="Завершений",
        progress_in_progress="У процесі",
        finished="Завершено",
        starting_soon="Скоро розпочнеться",
    ),
}


def get_labels(locale: str) -> Labels:
    """Labels for a locale; raises KeyError for unknown locales."""
    return LABELS[locale]


def parse_status(value: Any) -> ProjectStatus | None:
    """Return the ProjectStatus for ``value``, or None if it is not one."""
    try:
        return ProjectStatus(value)
    except ValueError:
        return None


def actions_for(status: Any, labels: Labels) -> list[str]:
    """Action labels for a status; unknown statuses get the fallback pair."""
    parsed = parse_status(status)
    if parsed is None:
        return list(labels.fallback_actions)
    return list(labels.actions[parsed])


def initial_project_fields(hackathon: Mapping[str, Any], labels: Labels) -> dict[str, Any]:
    """Status-derived fields of a project created by joining ``hackathon``.

    The project itself always starts as active; only the texts depend on
    whether the hackathon is already completed.
    """
    hackathon_status = hackathon.get("status")
    if hackathon_status == ProjectStatus.COMPLETED.value:
        return {
            "status": ProjectStatus.ACTIVE.value,
            "statusText": labels.status_completed,
            "timeStatus": labels.finished,
            "progress": "100%",
            "progressText": labels.finished,
            "actions": actions_for(hackathon_status, labels),
        }
    return {
        "status": ProjectStatus.ACTIVE.value,
        "statusText": labels.status_in_progress,
        "timeStatus": hackathon.get("timeLeft") or labels.starting_soon,
        "progress": "50%",
        "progressText": labels.progress_in_progress,
        "actions": actions_for(hackathon_status, labels),
    }


def status_update_fields(
    status: ProjectStatus,
    project: Mapping[str, Any],
    labels: Labels,
) -> dict[str, Any]:
    """Partial update applied to ``project`` when its status changes to ``status``."""
    if status is ProjectStatus.COMPLETED:
        fields: dict[str, Any] = {
            "status": status.value,
            "statusText": labels.status_completed,
            "progressText": labels.finished,
            "timeStatus": labels.finished,
        }
    elif status is ProjectStatus.DRAFT:
        fields = {
            "status": status.value,
            "statusText": labels.status_draft,
            "progressText": labels.progress_in_progress,
        }
    else:
        fields = {
            "status": status.value,
            "statusText": labels.status_in_progress,
            "progressText": labels.progress_in_progress,
        }
    fields["actions"] = actions_for(status, labels)
    if "progress" in project:
        fields["progress"] = project["progress"]
    return fields
