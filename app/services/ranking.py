"""
Ranking View.

Orders the evaluated applications of a vacancy by total score, highest
first. Applications without an evaluation are left out rather than ranked
with a zero score. Equal totals are ordered by evaluation date (earlier
first), then by evaluation id, so the order does not depend on the storage
engine. Rankings are recomputed on every call.
"""

from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.applicant import Applicant
from app.models.application import Application
from app.models.evaluation import Evaluation
from app.models.vacancy import JobVacancy


@dataclass
class RankedApplicant:
    rank: int
    application_id: int
    evaluation_id: int
    applicant_name: str
    exam_score: float
    interview_score: float
    total_score: float
    remarks: str


@dataclass
class VacancyRanking:
    vacancy_id: int
    position_title: str
    rankings: List[RankedApplicant] = field(default_factory=list)


def _ranked_rows(db: Session, vacancy_ids=None):
    query = (
        db.query(Evaluation, Application.vacancy_id, Applicant.full_name)
        .join(Application, Evaluation.application_id == Application.id)
        .join(Applicant, Application.applicant_id == Applicant.id)
    )
    if vacancy_ids is not None:
        query = query.filter(Application.vacancy_id.in_(vacancy_ids))
    return query.order_by(
        Evaluation.total_score.desc(),
        Evaluation.evaluated_at.asc(),
        Evaluation.id.asc(),
    ).all()


def _to_ranked(position: int, evaluation: Evaluation, applicant_name: str) -> RankedApplicant:
    return RankedApplicant(
        rank=position,
        application_id=evaluation.application_id,
        evaluation_id=evaluation.id,
        applicant_name=applicant_name,
        exam_score=evaluation.exam_score,
        interview_score=evaluation.interview_score,
        total_score=evaluation.total_score,
        remarks=evaluation.remarks or "",
    )


def rank_for_vacancy(db: Session, vacancy_id: int) -> List[RankedApplicant]:
    """
    Ranked evaluated applicants for one vacancy.

    Returns an empty list when the vacancy exists but nobody has been
    evaluated yet.

    Raises:
        NotFoundError: If the vacancy does not exist
    """
    if db.query(JobVacancy.id).filter(JobVacancy.id == vacancy_id).first() is None:
        raise NotFoundError("Job not found")

    rows = _ranked_rows(db, [vacancy_id])
    return [
        _to_ranked(position, evaluation, applicant_name)
        for position, (evaluation, _, applicant_name) in enumerate(rows, start=1)
    ]


def rank_all_vacancies(db: Session) -> List[VacancyRanking]:
    """Rankings for every vacancy that has at least one evaluated application."""
    titles = dict(db.query(JobVacancy.id, JobVacancy.position_title).all())

    grouped = {}
    for evaluation, vacancy_id, applicant_name in _ranked_rows(db):
        ranking = grouped.get(vacancy_id)
        if ranking is None:
            ranking = grouped[vacancy_id] = VacancyRanking(
                vacancy_id=vacancy_id,
                position_title=titles.get(vacancy_id, ""),
            )
        ranking.rankings.append(_to_ranked(len(ranking.rankings) + 1, evaluation, applicant_name))

    return [grouped[vacancy_id] for vacancy_id in sorted(grouped)]
