import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_current_user
from app.core.exceptions import InvalidInputError
from app.crud import vacancy as vacancy_crud
from app.models.user import User
from app.models.vacancy import VacancyStatus
from app.schemas.evaluation import RankedApplicantResponse
from app.schemas.vacancy import (
    DepartmentResponse,
    VacancyCreateRequest,
    VacancyResponse,
    VacancyUpdateRequest,
)
from app.services import ranking

router = APIRouter(prefix="/jobs", tags=["Job Vacancies"])
departments_router = APIRouter(prefix="/departments", tags=["Departments"])
logger = logging.getLogger(__name__)


@departments_router.get("", response_model=List[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    """List all departments in alphabetical order."""
    return vacancy_crud.list_departments(db)


def _check_department(db: Session, department_id: int) -> None:
    if vacancy_crud.get_department(db, department_id) is None:
        raise InvalidInputError(f"Unknown departmentId {department_id}")


@router.get("", response_model=List[VacancyResponse])
def list_jobs(
    skip: int = 0,
    limit: int = 100,
    status: Optional[VacancyStatus] = None,
    db: Session = Depends(get_db)
):
    """
    List vacancies, newest posting first.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 500)
        status: Optional filter (Open, Closed, Filled)
    """
    limit = min(limit, 500)
    return vacancy_crud.get_multi(db, skip=skip, limit=limit, status=status)


@router.get("/{job_id}", response_model=VacancyResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    vacancy = vacancy_crud.get_by_id(db, job_id)

    if not vacancy:
        raise HTTPException(status_code=404, detail="Job not found")

    return vacancy


@router.get("/{job_id}/ranking", response_model=List[RankedApplicantResponse])
def get_job_ranking(job_id: int, db: Session = Depends(get_db)):
    """
    Evaluated applicants for this vacancy, highest total score first.

    Applicants without an evaluation are not listed. Recomputed on every
    request.
    """
    return ranking.rank_for_vacancy(db, job_id)


@router.post("", status_code=201, response_model=VacancyResponse)
def create_job(
    request: VacancyCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _check_department(db, request.department_id)
    vacancy = vacancy_crud.create(db, request)
    logger.info(f"Created vacancy {vacancy.id}: {vacancy.position_title} (by {current_user.email})")
    return vacancy


@router.put("/{job_id}", response_model=VacancyResponse)
def update_job(
    job_id: int,
    request: VacancyUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _check_department(db, request.department_id)
    vacancy = vacancy_crud.update(db, job_id, request)

    if not vacancy:
        raise HTTPException(status_code=404, detail="Job not found")

    return vacancy


@router.delete("/{job_id}", status_code=204)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete a vacancy. Its applications, their history and evaluations are
    deleted with it.
    """
    deleted = vacancy_crud.delete(db, job_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted vacancy {job_id} (by {admin_user.email})")
    return None
