"""
API endpoints for applicant records.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_current_user
from app.crud import applicant as applicant_crud
from app.models.user import User
from app.schemas.applicant import ApplicantCreateRequest, ApplicantResponse, ApplicantUpdateRequest

router = APIRouter(prefix="/applicants", tags=["Applicants"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ApplicantResponse])
def list_applicants(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    limit = min(limit, 500)
    return applicant_crud.get_multi(db, skip=skip, limit=limit)


@router.get("/{applicant_id}", response_model=ApplicantResponse)
def get_applicant(applicant_id: int, db: Session = Depends(get_db)):
    applicant = applicant_crud.get_by_id(db, applicant_id)

    if not applicant:
        raise HTTPException(status_code=404, detail="Applicant not found")

    return applicant


@router.post("", status_code=201, response_model=ApplicantResponse)
def create_applicant(
    request: ApplicantCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    applicant = applicant_crud.create(db, request)
    logger.info(f"Created applicant {applicant.id} (by {current_user.email})")
    return applicant


@router.put("/{applicant_id}", response_model=ApplicantResponse)
def update_applicant(
    applicant_id: int,
    request: ApplicantUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    applicant = applicant_crud.update(db, applicant_id, request)

    if not applicant:
        raise HTTPException(status_code=404, detail="Applicant not found")

    return applicant


@router.delete("/{applicant_id}", status_code=204)
def delete_applicant(
    applicant_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete an applicant together with all of their applications.
    """
    deleted = applicant_crud.delete(db, applicant_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Applicant not found")

    logger.info(f"Deleted applicant {applicant_id} (by {admin_user.email})")
    return None
