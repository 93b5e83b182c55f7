"""
CRUD operations for Applicant model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.applicant import Applicant
from app.schemas.applicant import ApplicantCreateRequest, ApplicantUpdateRequest


def create(db: Session, applicant_data: ApplicantCreateRequest) -> Applicant:
    db_applicant = Applicant(**applicant_data.model_dump())

    db.add(db_applicant)
    db.commit()
    db.refresh(db_applicant)

    return db_applicant


def get_by_id(db: Session, applicant_id: int) -> Optional[Applicant]:
    return db.query(Applicant).filter(Applicant.id == applicant_id).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Applicant]:
    """Applicants in alphabetical order of full name."""
    return db.query(Applicant).order_by(Applicant.full_name, Applicant.id).offset(skip).limit(limit).all()


def update(db: Session, applicant_id: int, applicant_data: ApplicantUpdateRequest) -> Optional[Applicant]:
    applicant = get_by_id(db, applicant_id)
    if not applicant:
        return None

    for key, value in applicant_data.model_dump().items():
        setattr(applicant, key, value)

    db.commit()
    db.refresh(applicant)

    return applicant


def delete(db: Session, applicant_id: int) -> bool:
    """
    Delete an applicant together with their applications, status history
    and evaluations.

    Returns:
        True if deleted, False if not found
    """
    applicant = get_by_id(db, applicant_id)
    if not applicant:
        return False

    db.delete(applicant)
    db.commit()

    return True
