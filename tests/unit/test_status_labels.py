"""Unit tests for the project status vocabulary."""

import pytest

from hackhub.projects.status import (
    LABELS,
    ProjectStatus,
    actions_for,
    get_labels,
    initial_project_fields,
    parse_status,
    status_update_fields,
)

EN = get_labels("en")
UK = get_labels("uk")


class TestActions:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("active", ["Edit", "Submit"]),
            ("draft", ["View", "Delete"]),
            ("completed", ["View", "Share"]),
        ],
    )
    def test_known_statuses(self, status, expected):
        assert actions_for(status, EN) == expected

    @pytest.mark.parametrize("status", ["archived", "", None, 3, "ACTIVE"])
    def test_fallback(self, status):
        assert actions_for(status, EN) == ["Edit", "Submit"]

    def test_returns_fresh_list(self):
        actions = actions_for("active", EN)
        actions.append("Extra")
        assert actions_for("active", EN) == ["Edit", "Submit"]

    def test_every_locale_covers_every_status(self):
        for labels in LABELS.values():
            assert set(labels.actions) == set(ProjectStatus)


class TestParseStatus:
    def test_valid(self):
        assert parse_status("draft") is ProjectStatus.DRAFT

    @pytest.mark.parametrize("value", ["Draft", "deleted", None, ["draft"]])
    def test_invalid(self, value):
        assert parse_status(value) is None


class TestInitialProjectFields:
    def test_completed_hackathon(self):
        fields = initial_project_fields({"status": "completed", "timeLeft": "2 days"}, EN)
        assert fields == {
            "status": "active",
            "statusText": "Completed",
            "timeStatus": "Finished",
            "progress": "100%",
            "progressText": "Finished",
            "actions": ["View", "Share"],
        }

    @pytest.mark.parametrize("status", ["active", "draft", "archived"])
    def test_not_completed(self, status):
        fields = initial_project_fields({"status": status, "timeLeft": "2 days"}, EN)
        assert fields["status"] == "active"
        assert fields["statusText"] == "In progress"
        assert fields["timeStatus"] == "2 days"
        assert fields["progress"] == "50%"
        assert fields["progressText"] == "In progress"

    def test_starting_soon_without_time_left(self):
        assert initial_project_fields({"status": "active"}, EN)["timeStatus"] == "Starting soon"
        assert initial_project_fields({"status": "active"}, UK)["timeStatus"] == "Скоро розпочнеться"


class TestStatusUpdateFields:
    def test_completed_sets_time_status(self):
        fields = status_update_fields(ProjectStatus.COMPLETED, {"progress": "80%"}, EN)
        assert fields == {
            "status": "completed",
            "statusText": "Completed",
            "progressText": "Finished",
            "timeStatus": "Finished",
            "actions": ["View", "Share"],
            "progress": "80%",
        }

    @pytest.mark.parametrize("status", [ProjectStatus.ACTIVE, ProjectStatus.DRAFT])
    def test_active_and_draft_keep_time_status(self, status):
        assert "timeStatus" not in status_update_fields(status, {}, EN)

    def test_progress_only_carried_when_present(self):
        assert "progress" not in status_update_fields(ProjectStatus.DRAFT, {}, EN)

    def test_ukrainian_draft(self):
        fields = status_update_fields(ProjectStatus.DRAFT, {}, UK)
        assert fields["statusText"] == "Чернетка"
        assert fields["progressText"] == "У процесі"
        assert fields["actions"] == ["Переглянути", "Видалити"]
