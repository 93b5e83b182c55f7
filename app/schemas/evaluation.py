"""
Pydantic schemas for evaluations and per-vacancy rankings.
"""

from datetime import date
from typing import List, Optional
from pydantic import Field
from app.schemas.base import CamelSchema


class EvaluationCreateRequest(CamelSchema):
    """Both sub-scores are required; no range is enforced (the UI suggests 0-100)."""
    application_id: int
    exam_score: float
    interview_score: float
    remarks: Optional[str] = None


class EvaluationUpdateRequest(CamelSchema):
    """Both sub-scores must be resupplied, even if only one changed."""
    exam_score: float
    interview_score: float
    remarks: Optional[str] = None


class EvaluationResponse(CamelSchema):
    id: int
    application_id: int
    exam_score: float
    interview_score: float
    total_score: float
    remarks: str
    evaluated_by: str
    evaluated_at: date


class RankedApplicantResponse(CamelSchema):
    rank: int = Field(..., ge=1)
    application_id: int
    evaluation_id: int
    applicant_name: str
    exam_score: float
    interview_score: float
    total_score: float
    remarks: str


class VacancyRankingResponse(CamelSchema):
    vacancy_id: int
    position_title: str
    rankings: List[RankedApplicantResponse]
