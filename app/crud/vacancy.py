"""
CRUD operations for departments and job vacancies.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.vacancy import Department, JobVacancy, VacancyStatus
from app.schemas.vacancy import VacancyCreateRequest, VacancyUpdateRequest


def list_departments(db: Session) -> List[Department]:
    return db.query(Department).order_by(Department.name).all()


def get_department(db: Session, department_id: int) -> Optional[Department]:
    return db.query(Department).filter(Department.id == department_id).first()


def create(db: Session, vacancy_data: VacancyCreateRequest) -> JobVacancy:
    """
    Create a new job vacancy.

    Args:
        db: Database session
        vacancy_data: Validated vacancy data

    Returns:
        Created JobVacancy instance with id
    """
    db_vacancy = JobVacancy(**vacancy_data.model_dump())

    db.add(db_vacancy)
    db.commit()
    db.refresh(db_vacancy)

    return db_vacancy


def get_by_id(db: Session, vacancy_id: int) -> Optional[JobVacancy]:
    return db.query(JobVacancy).filter(JobVacancy.id == vacancy_id).first()


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    status: Optional[VacancyStatus] = None
) -> List[JobVacancy]:
    """
    Retrieve vacancies, newest posting first.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return
        status: Optional status filter
    """
    query = db.query(JobVacancy)

    if status:
        query = query.filter(JobVacancy.status == status)

    return query.order_by(JobVacancy.posting_date.desc(), JobVacancy.id.desc()).offset(skip).limit(limit).all()


def update(db: Session, vacancy_id: int, vacancy_data: VacancyUpdateRequest) -> Optional[JobVacancy]:
    """
    Overwrite all vacancy fields.

    Returns:
        Updated JobVacancy if found, None otherwise
    """
    vacancy = get_by_id(db, vacancy_id)
    if not vacancy:
        return None

    for key, value in vacancy_data.model_dump().items():
        setattr(vacancy, key, value)

    db.commit()
    db.refresh(vacancy)

    return vacancy


def delete(db: Session, vacancy_id: int) -> bool:
    """
    Delete a vacancy and, by cascade, its applications.

    Returns:
        True if deleted, False if not found
    """
    vacancy = get_by_id(db, vacancy_id)
    if not vacancy:
        return False

    db.delete(vacancy)
    db.commit()

    return True
