"""
Status Transition Recorder.

Applies a status change to an Application and appends the matching
StatusEvent in the same database transaction. Either both rows are written
or neither is; the history table is the system of record for status changes.

Transitions are permissive: any status may move to any other status,
including onward from Hired or Rejected.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidInputError, NotFoundError, StorageError
from app.models.application import Application, ApplicationStatus
from app.models.status_event import StatusEvent, SYSTEM_ACTOR

logger = logging.getLogger(__name__)


@dataclass
class TransitionResult:
    application: Application
    history: StatusEvent


def parse_status(value: Union[str, ApplicationStatus, None]) -> ApplicationStatus:
    """
    Coerce a raw status value into ApplicationStatus.

    Raises:
        InvalidInputError: If the value is empty or not a known status
    """
    if isinstance(value, ApplicationStatus):
        return value
    if value is None or not str(value).strip():
        raise InvalidInputError("Status is required")
    try:
        return ApplicationStatus(str(value).strip())
    except ValueError:
        allowed = ", ".join(s.value for s in ApplicationStatus)
        raise InvalidInputError(f"Unknown status '{value}'. Expected one of: {allowed}")


def transition(
    db: Session,
    application_id: int,
    new_status: Union[str, ApplicationStatus, None],
    remarks: Optional[str] = None,
    actor: Optional[str] = None,
    today: Optional[date] = None,
) -> TransitionResult:
    """
    Move an application to `new_status` and record the change.

    The application's status and remarks are overwritten (previous remarks
    survive only in history). The application row is locked for the
    duration of the transaction so concurrent transitions on the same
    application commit one after the other.

    Args:
        db: Database session
        application_id: Application to transition
        new_status: Target status
        remarks: Optional remarks; stored on the application and the event
        actor: Name of the acting user, "System" if unknown
        today: Event date (defaults to date.today())

    Returns:
        TransitionResult with the refreshed application and the new event

    Raises:
        InvalidInputError: If the status is empty or unknown
        NotFoundError: If the application does not exist (nothing is written)
        StorageError: If either write fails (both are rolled back)
    """
    status = parse_status(new_status)
    actor = (actor or "").strip() or SYSTEM_ACTOR
    event_date = today or date.today()

    try:
        application = (
            db.query(Application)
            .filter(Application.id == application_id)
            .with_for_update()
            .first()
        )
        if application is None:
            db.rollback()
            raise NotFoundError("Application not found")

        previous = application.status
        application.status = status
        application.remarks = remarks

        event = StatusEvent(
            application_id=application.id,
            status=status,
            remarks=remarks or "",
            updated_by=actor,
            updated_at=event_date,
        )
        db.add(event)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Status transition failed for application {application_id}: {e}")
        raise StorageError() from e

    db.refresh(application)
    db.refresh(event)

    logger.info(
        f"Application {application.id}: '{previous.value}' -> '{status.value}' by {actor}"
    )
    return TransitionResult(application=application, history=event)


def history_for(db: Session, application_id: int) -> List[StatusEvent]:
    """
    Status timeline of an application, oldest first.

    Events share a calendar date granularity, so same-day events fall back
    to insertion order.
    """
    return (
        db.query(StatusEvent)
        .filter(StatusEvent.application_id == application_id)
        .order_by(StatusEvent.updated_at.asc(), StatusEvent.id.asc())
        .all()
    )


def latest_event(db: Session, application_id: int) -> Optional[StatusEvent]:
    """Most recently appended event, or None if the application has no history."""
    return (
        db.query(StatusEvent)
        .filter(StatusEvent.application_id == application_id)
        .order_by(StatusEvent.updated_at.desc(), StatusEvent.id.desc())
        .first()
    )
