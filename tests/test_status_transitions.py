"""
Tests for application status transitions and the status history timeline.

Tests cover:
- Transition postconditions (application row + history entry)
- Permissive any-to-any transitions
- Not found / invalid status handling
- History ordering
- Authentication and actor attribution
"""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import InvalidInputError, NotFoundError, StorageError
from app.models.application import Application, ApplicationStatus
from app.models.status_event import StatusEvent
from app.services import status_recorder


def fail_status_event_writes(db, monkeypatch):
    """Make every StatusEvent insert on this session fail."""
    original_add = db.add

    def add(instance, *args, **kwargs):
        if isinstance(instance, StatusEvent):
            raise OperationalError("INSERT INTO status_history", {}, Exception("disk I/O error"))
        return original_add(instance, *args, **kwargs)

    monkeypatch.setattr(db, "add", add)


class TestTransitionService:
    """Tests for status_recorder.transition"""

    def test_transition_updates_application_and_appends_event(self, db_session, application):
        result = status_recorder.transition(
            db_session,
            application.id,
            "For Examination",
            remarks="Scheduled for Jan 30",
            actor="Juan Dela Cruz",
            today=date(2026, 1, 28),
        )

        assert result.application.status == ApplicationStatus.FOR_EXAMINATION
        assert result.application.remarks == "Scheduled for Jan 30"
        assert result.history.application_id == application.id
        assert result.history.status == ApplicationStatus.FOR_EXAMINATION
        assert result.history.remarks == "Scheduled for Jan 30"
        assert result.history.updated_by == "Juan Dela Cruz"
        assert result.history.updated_at == date(2026, 1, 28)

        events = status_recorder.history_for(db_session, application.id)
        assert len(events) == 1
        assert events[0].id == result.history.id

    def test_transition_accepts_enum_value(self, db_session, application):
        result = status_recorder.transition(db_session, application.id, ApplicationStatus.REJECTED)

        assert result.application.status == ApplicationStatus.REJECTED

    def test_identical_transitions_append_two_events(self, db_session, application):
        for _ in range(2):
            status_recorder.transition(db_session, application.id, "For Interview", remarks="Same")

        events = status_recorder.history_for(db_session, application.id)
        assert len(events) == 2
        assert all(e.status == ApplicationStatus.FOR_INTERVIEW for e in events)
        assert events[0].id < events[1].id

    def test_missing_remarks_clear_application_remarks(self, db_session, application):
        status_recorder.transition(db_session, application.id, "Under Initial Screening", remarks="Docs ok")
        result = status_recorder.transition(db_session, application.id, "For Examination")

        assert result.application.remarks is None
        assert result.history.remarks == ""

    def test_actor_defaults_to_system(self, db_session, application):
        result = status_recorder.transition(db_session, application.id, "Approved", actor="  ")

        assert result.history.updated_by == "System"

    @pytest.mark.parametrize("terminal", [ApplicationStatus.HIRED, ApplicationStatus.REJECTED])
    def test_terminal_statuses_can_move_again(self, db_session, application_factory, applicant, vacancy, terminal):
        app_row = application_factory(applicant, vacancy, status=terminal)

        result = status_recorder.transition(db_session, app_row.id, "Under Initial Screening")

        assert result.application.status == ApplicationStatus.UNDER_INITIAL_SCREENING

    def test_unknown_application_writes_nothing(self, db_session, application):
        with pytest.raises(NotFoundError):
            status_recorder.transition(db_session, 9999, "Hired")

        assert db_session.query(StatusEvent).count() == 0
        refreshed = db_session.query(Application).filter(Application.id == application.id).first()
        assert refreshed.status == ApplicationStatus.APPLICATION_RECEIVED

    @pytest.mark.parametrize("bad_status", ["", "   ", None, "Shortlisted", "hired"])
    def test_invalid_status_rejected(self, db_session, application, bad_status):
        with pytest.raises(InvalidInputError):
            status_recorder.transition(db_session, application.id, bad_status)

        assert db_session.query(StatusEvent).count() == 0

    def test_latest_event_matches_application_status(self, db_session, application):
        assert status_recorder.latest_event(db_session, application.id) is None

        status_recorder.transition(db_session, application.id, "Under Initial Screening", today=date(2026, 1, 25))
        status_recorder.transition(db_session, application.id, "For Examination", today=date(2026, 1, 28))

        latest = status_recorder.latest_event(db_session, application.id)
        assert latest.status == ApplicationStatus.FOR_EXAMINATION
        assert db_session.get(Application, application.id).status == latest.status

    def test_failed_history_write_rolls_back_status(self, db_session, application, monkeypatch):
        status_recorder.transition(db_session, application.id, "Under Initial Screening", remarks="Docs ok")
        fail_status_event_writes(db_session, monkeypatch)

        with pytest.raises(StorageError):
            status_recorder.transition(db_session, application.id, "Hired", remarks="Board approved")

        monkeypatch.undo()
        # Anything left pending by the failed call would be written here
        db_session.commit()
        db_session.expire_all()
        refreshed = db_session.get(Application, application.id)
        assert refreshed.status == ApplicationStatus.UNDER_INITIAL_SCREENING
        assert refreshed.remarks == "Docs ok"
        events = status_recorder.history_for(db_session, application.id)
        assert [e.status for e in events] == [ApplicationStatus.UNDER_INITIAL_SCREENING]


class TestHistoryOrdering:
    """Tests for status_recorder.history_for ordering"""

    def test_history_ordered_by_date(self, db_session, application):
        # Written out of order on purpose
        steps = [
            ("For Interview", date(2026, 2, 2)),
            ("Application Received", date(2026, 1, 20)),
            ("For Examination", date(2026, 1, 28)),
            ("Under Initial Screening", date(2026, 1, 25)),
        ]
        for status, when in steps:
            status_recorder.transition(db_session, application.id, status, today=when)

        events = status_recorder.history_for(db_session, application.id)

        assert [e.updated_at for e in events] == [
            date(2026, 1, 20),
            date(2026, 1, 25),
            date(2026, 1, 28),
            date(2026, 2, 2),
        ]

    def test_same_day_events_keep_insertion_order(self, db_session, application):
        day = date(2026, 2, 10)
        status_recorder.transition(db_session, application.id, "Approved", today=day)
        status_recorder.transition(db_session, application.id, "Hired", today=day)

        events = status_recorder.history_for(db_session, application.id)

        assert [e.status for e in events] == [ApplicationStatus.APPROVED, ApplicationStatus.HIRED]

    def test_history_is_per_application(self, db_session, application, application_factory, applicant_factory, vacancy):
        other = application_factory(applicant_factory("Jose Mendoza"), vacancy)
        status_recorder.transition(db_session, application.id, "Rejected")
        status_recorder.transition(db_session, other.id, "Hired")

        events = status_recorder.history_for(db_session, other.id)

        assert len(events) == 1
        assert events[0].status == ApplicationStatus.HIRED

    def test_history_for_unknown_application_is_empty(self, db_session):
        assert status_recorder.history_for(db_session, 424242) == []


class TestTransitionEndpoint:
    """Tests for PATCH /api/applications/{id}/status and GET /api/status-history"""

    def test_patch_status_success(self, client, application, staff_headers):
        response = client.patch(
            f"/api/applications/{application.id}/status",
            json={"status": "For Interview", "remarks": "Passed examination"},
            headers=staff_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["application"]["id"] == application.id
        assert data["application"]["status"] == "For Interview"
        assert data["application"]["remarks"] == "Passed examination"
        assert data["history"]["applicationId"] == application.id
        assert data["history"]["status"] == "For Interview"
        assert data["history"]["remarks"] == "Passed examination"
        assert data["history"]["updatedBy"] == "Juan Dela Cruz"
        assert data["history"]["updatedAt"] == date.today().isoformat()

    def test_patch_status_records_actor_from_token(self, client, application, admin_headers):
        response = client.patch(
            f"/api/applications/{application.id}/status",
            json={"status": "Hired", "remarks": "Board approved"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["history"]["updatedBy"] == "Maria Santos"

    def test_patch_status_requires_auth(self, client, db_session, application):
        response = client.patch(f"/api/applications/{application.id}/status", json={"status": "Hired"})

        assert response.status_code == 401
        assert db_session.query(StatusEvent).count() == 0

    def test_patch_status_invalid_token(self, client, application):
        response = client.patch(
            f"/api/applications/{application.id}/status",
            json={"status": "Hired"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_patch_status_unknown_application(self, client, db_session, staff_headers):
        response = client.patch("/api/applications/9999/status", json={"status": "Hired"}, headers=staff_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Application not found"
        assert db_session.query(StatusEvent).count() == 0

    def test_patch_status_history_write_failure(self, client, db_session, application, staff_headers, monkeypatch):
        fail_status_event_writes(db_session, monkeypatch)

        response = client.patch(
            f"/api/applications/{application.id}/status",
            json={"status": "Hired"},
            headers=staff_headers,
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Server error"
        monkeypatch.undo()
        db_session.expire_all()
        assert db_session.get(Application, application.id).status == ApplicationStatus.APPLICATION_RECEIVED
        assert db_session.query(StatusEvent).count() == 0

    def test_patch_status_unknown_value(self, client, application, staff_headers):
        response = client.patch(
            f"/api/applications/{application.id}/status",
            json={"status": "Shortlisted"},
            headers=staff_headers,
        )

        assert response.status_code == 400
        assert "Shortlisted" in response.json()["detail"]

    @pytest.mark.parametrize("body", [{}, {"status": ""}, {"remarks": "no status"}])
    def test_patch_status_missing_value(self, client, application, staff_headers, body):
        response = client.patch(f"/api/applications/{application.id}/status", json=body, headers=staff_headers)

        assert response.status_code == 400
        assert "detail" in response.json()

    def test_status_history_endpoint(self, client, application, staff_headers):
        for status in ("Under Initial Screening", "For Examination"):
            client.patch(
                f"/api/applications/{application.id}/status",
                json={"status": status},
                headers=staff_headers,
            )

        response = client.get("/api/status-history", params={"applicationId": application.id})

        assert response.status_code == 200
        data = response.json()
        assert [e["status"] for e in data] == ["Under Initial Screening", "For Examination"]
        assert data[0]["updatedBy"] == "Juan Dela Cruz"

    def test_status_history_requires_application_id(self, client):
        response = client.get("/api/status-history")

        assert response.status_code == 400
        assert "applicationId" in response.json()["detail"]
