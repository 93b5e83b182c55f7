"""
API endpoints for exam/interview evaluations and rankings.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_actor_name, get_admin_user, get_current_user
from app.models.user import User
from app.schemas.evaluation import (
    EvaluationCreateRequest,
    EvaluationResponse,
    EvaluationUpdateRequest,
    VacancyRankingResponse,
)
from app.services import evaluation_scorer, ranking

router = APIRouter(prefix="/evaluations", tags=["Evaluations"])
rankings_router = APIRouter(prefix="/rankings", tags=["Evaluations"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[EvaluationResponse])
def list_evaluations(db: Session = Depends(get_db)):
    return evaluation_scorer.list_evaluations(db)


@router.post("", status_code=201, response_model=EvaluationResponse)
def create_evaluation(
    request: EvaluationCreateRequest,
    db: Session = Depends(get_db),
    evaluator: str = Depends(get_actor_name)
):
    """
    Score an application. totalScore = 0.5 * examScore + 0.5 * interviewScore.

    Raises:
        400: Missing scores
        404: Application not found
        409: Application already evaluated
    """
    return evaluation_scorer.record_evaluation(
        db,
        request.application_id,
        request.exam_score,
        request.interview_score,
        remarks=request.remarks,
        evaluator=evaluator,
    )


@router.put("/{evaluation_id}", response_model=EvaluationResponse)
def update_evaluation(
    evaluation_id: int,
    request: EvaluationUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Replace both sub-scores and remarks; the total is recomputed.
    """
    return evaluation_scorer.update_evaluation(
        db,
        evaluation_id,
        request.exam_score,
        request.interview_score,
        remarks=request.remarks,
    )


@router.delete("/{evaluation_id}", status_code=204)
def delete_evaluation(
    evaluation_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    evaluation_scorer.delete_evaluation(db, evaluation_id)
    return None


@rankings_router.get("", response_model=List[VacancyRankingResponse])
def list_rankings(db: Session = Depends(get_db)):
    """Per-vacancy rankings for every vacancy with at least one evaluation."""
    return ranking.rank_all_vacancies(db)
