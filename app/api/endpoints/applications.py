"""
API endpoints for applications and their status timeline.

Handles application CRUD, the status transition endpoint and the
status-history listing.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_actor_name, get_admin_user, get_current_user
from app.core.exceptions import InvalidInputError
from app.crud import applicant as applicant_crud
from app.crud import application as application_crud
from app.crud import vacancy as vacancy_crud
from app.models.application import ApplicationStatus
from app.models.user import User
from app.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
    StatusEventResponse,
    StatusTransitionRequest,
    StatusTransitionResponse,
)
from app.services import status_recorder

router = APIRouter(prefix="/applications", tags=["Applications"])
history_router = APIRouter(prefix="/status-history", tags=["Applications"])
logger = logging.getLogger(__name__)


def _check_references(db: Session, applicant_id: int, vacancy_id: int) -> None:
    if applicant_crud.get_by_id(db, applicant_id) is None:
        raise InvalidInputError(f"Unknown applicantId {applicant_id}")
    if vacancy_crud.get_by_id(db, vacancy_id) is None:
        raise InvalidInputError(f"Unknown vacancyId {vacancy_id}")


@router.get("", response_model=List[ApplicationResponse])
def list_applications(
    skip: int = 0,
    limit: int = 100,
    vacancy_id: Optional[int] = Query(None, alias="vacancyId"),
    applicant_id: Optional[int] = Query(None, alias="applicantId"),
    status: Optional[ApplicationStatus] = None,
    db: Session = Depends(get_db)
):
    """
    List applications, most recent first.

    Args:
        vacancyId: Only applications for this vacancy
        applicantId: Only applications by this applicant
        status: Only applications currently in this status
    """
    limit = min(limit, 500)
    return application_crud.get_multi(
        db,
        skip=skip,
        limit=limit,
        vacancy_id=vacancy_id,
        applicant_id=applicant_id,
        status=status,
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: int, db: Session = Depends(get_db)):
    application = application_crud.get_by_id(db, application_id)

    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    return application


@router.post("", status_code=201, response_model=ApplicationResponse)
def create_application(
    request: ApplicationCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Link an applicant to a vacancy with an initial status
    (default: Application Received).
    """
    _check_references(db, request.applicant_id, request.vacancy_id)
    application = application_crud.create(db, request)
    logger.info(
        f"Created application {application.id}: applicant {application.applicant_id} -> "
        f"vacancy {application.vacancy_id} (by {current_user.email})"
    )
    return application


@router.put("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: int,
    request: ApplicationUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update applicant, vacancy, date applied and remarks.

    Status cannot be changed here; use PATCH /applications/{id}/status.
    """
    if application_crud.get_by_id(db, application_id) is None:
        raise HTTPException(status_code=404, detail="Application not found")

    _check_references(db, request.applicant_id, request.vacancy_id)
    return application_crud.update(db, application_id, request)


@router.patch("/{application_id}/status", response_model=StatusTransitionResponse)
def transition_status(
    application_id: int,
    request: StatusTransitionRequest,
    db: Session = Depends(get_db),
    actor: str = Depends(get_actor_name)
):
    """
    Change an application's status and append the matching history entry.

    Both writes happen in one transaction. Any status may follow any other.

    Returns:
        The updated application and the new history entry

    Raises:
        400: Unknown or empty status
        404: Application not found
    """
    result = status_recorder.transition(
        db,
        application_id,
        request.status,
        remarks=request.remarks,
        actor=actor,
    )

    return StatusTransitionResponse(
        application=ApplicationResponse.model_validate(result.application),
        history=StatusEventResponse.model_validate(result.history),
    )


@router.delete("/{application_id}", status_code=204)
def delete_application(
    application_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete an application. Its status history and evaluation are removed
    with it.
    """
    deleted = application_crud.delete(db, application_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Application not found")

    logger.info(f"Deleted application {application_id} (by {admin_user.email})")
    return None


@history_router.get("", response_model=List[StatusEventResponse])
def list_status_history(
    application_id: Optional[int] = Query(None, alias="applicationId"),
    db: Session = Depends(get_db)
):
    """
    Status timeline for one application, oldest first.
    """
    if application_id is None:
        raise InvalidInputError("applicationId is required")

    return status_recorder.history_for(db, application_id)
