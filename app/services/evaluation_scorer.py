"""
Evaluation Scorer.

Computes the weighted total of exam and interview scores and persists it
with its inputs. The total is recomputed on every write; no range checks or
rounding are applied.
"""

import logging
import math
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InvalidInputError, NotFoundError, StorageError
from app.models.application import Application
from app.models.evaluation import Evaluation
from app.models.status_event import SYSTEM_ACTOR

logger = logging.getLogger(__name__)

EXAM_WEIGHT = 0.5
INTERVIEW_WEIGHT = 0.5


def compute_total(exam_score: float, interview_score: float) -> float:
    """total = 0.5 * exam + 0.5 * interview, e.g. (85, 0) -> 42.5"""
    return EXAM_WEIGHT * float(exam_score) + INTERVIEW_WEIGHT * float(interview_score)


def _require_scores(exam_score, interview_score) -> None:
    missing = [
        name for name, value in (("examScore", exam_score), ("interviewScore", interview_score))
        if value is None
    ]
    if missing:
        raise InvalidInputError(f"Missing required fields: {', '.join(missing)}")
    for name, value in (("examScore", exam_score), ("interviewScore", interview_score)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"{name} must be a number")
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number")


def get_by_id(db: Session, evaluation_id: int) -> Optional[Evaluation]:
    return db.query(Evaluation).filter(Evaluation.id == evaluation_id).first()


def list_evaluations(db: Session) -> List[Evaluation]:
    return db.query(Evaluation).order_by(Evaluation.id).all()


def record_evaluation(
    db: Session,
    application_id: int,
    exam_score: float,
    interview_score: float,
    remarks: Optional[str] = None,
    evaluator: Optional[str] = None,
    today: Optional[date] = None,
) -> Evaluation:
    """
    Create the evaluation for an application.

    Raises:
        InvalidInputError: If either score is missing, not numeric or not finite
        NotFoundError: If the application does not exist
        ConflictError: If the application already has an evaluation
        StorageError: If the insert fails for any other reason
    """
    _require_scores(exam_score, interview_score)

    if db.query(Application.id).filter(Application.id == application_id).first() is None:
        raise NotFoundError("Application not found")

    evaluation = Evaluation(
        application_id=application_id,
        exam_score=float(exam_score),
        interview_score=float(interview_score),
        total_score=compute_total(exam_score, interview_score),
        remarks=remarks or "",
        evaluated_by=(evaluator or "").strip() or SYSTEM_ACTOR,
        evaluated_at=today or date.today(),
    )

    try:
        db.add(evaluation)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if db.query(Evaluation.id).filter(Evaluation.application_id == application_id).first() is not None:
            logger.warning(f"Rejected second evaluation for application {application_id}: {e.orig}")
            raise ConflictError("Application already has an evaluation") from e
        logger.error(f"Failed to record evaluation for application {application_id}: {e.orig}")
        raise StorageError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to record evaluation for application {application_id}: {e}")
        raise StorageError() from e

    db.refresh(evaluation)
    logger.info(
        f"Evaluation {evaluation.id} recorded for application {application_id}: "
        f"exam={evaluation.exam_score} interview={evaluation.interview_score} total={evaluation.total_score}"
    )
    return evaluation


def update_evaluation(
    db: Session,
    evaluation_id: int,
    exam_score: float,
    interview_score: float,
    remarks: Optional[str] = None,
) -> Evaluation:
    """
    Replace both sub-scores and remarks, recomputing the total.

    Raises:
        InvalidInputError: If either score is missing, not numeric or not finite
        NotFoundError: If the evaluation does not exist
        StorageError: If the update fails
    """
    _require_scores(exam_score, interview_score)

    evaluation = get_by_id(db, evaluation_id)
    if evaluation is None:
        raise NotFoundError("Evaluation not found")

    evaluation.exam_score = float(exam_score)
    evaluation.interview_score = float(interview_score)
    evaluation.total_score = compute_total(exam_score, interview_score)
    evaluation.remarks = remarks or ""

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update evaluation {evaluation_id}: {e}")
        raise StorageError() from e

    db.refresh(evaluation)
    return evaluation


def delete_evaluation(db: Session, evaluation_id: int) -> None:
    """
    Raises:
        NotFoundError: If the evaluation does not exist
        StorageError: If the delete fails
    """
    evaluation = get_by_id(db, evaluation_id)
    if evaluation is None:
        raise NotFoundError("Evaluation not found")

    try:
        db.delete(evaluation)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete evaluation {evaluation_id}: {e}")
        raise StorageError() from e

    logger.info(f"Deleted evaluation {evaluation_id}")
