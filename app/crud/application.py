"""
CRUD operations for Application model.

Status is only set here at creation time. Later status changes go through
app.services.status_recorder so that history stays consistent.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.application import Application, ApplicationStatus
from app.schemas.application import ApplicationCreateRequest, ApplicationUpdateRequest


def create(db: Session, application_data: ApplicationCreateRequest) -> Application:
    """
    Link an applicant to a vacancy.

    No StatusEvent is written; until the first transition the creation
    status is the application's only status record.
    """
    db_application = Application(
        applicant_id=application_data.applicant_id,
        vacancy_id=application_data.vacancy_id,
        status=application_data.status,
        date_applied=application_data.date_applied,
        remarks=application_data.remarks,
    )

    db.add(db_application)
    db.commit()
    db.refresh(db_application)

    return db_application


def get_by_id(db: Session, application_id: int) -> Optional[Application]:
    return db.query(Application).filter(Application.id == application_id).first()


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    vacancy_id: Optional[int] = None,
    applicant_id: Optional[int] = None,
    status: Optional[ApplicationStatus] = None,
) -> List[Application]:
    """
    Retrieve applications, most recent first, with optional filters.
    """
    query = db.query(Application)

    if vacancy_id is not None:
        query = query.filter(Application.vacancy_id == vacancy_id)
    if applicant_id is not None:
        query = query.filter(Application.applicant_id == applicant_id)
    if status:
        query = query.filter(Application.status == status)

    return query.order_by(Application.date_applied.desc(), Application.id.desc()).offset(skip).limit(limit).all()


def update(db: Session, application_id: int, application_data: ApplicationUpdateRequest) -> Optional[Application]:
    """
    Overwrite applicant, vacancy, date and remarks. Status is left untouched.

    Returns:
        Updated Application if found, None otherwise
    """
    application = get_by_id(db, application_id)
    if not application:
        return None

    application.applicant_id = application_data.applicant_id
    application.vacancy_id = application_data.vacancy_id
    application.date_applied = application_data.date_applied
    application.remarks = application_data.remarks

    db.commit()
    db.refresh(application)

    return application


def delete(db: Session, application_id: int) -> bool:
    """
    Delete an application; its status history and evaluation go with it.

    Returns:
        True if deleted, False if not found
    """
    application = get_by_id(db, application_id)
    if not application:
        return False

    db.delete(application)
    db.commit()

    return True
