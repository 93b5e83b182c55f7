"""
Pydantic schemas for applications and their status timeline.
"""

from datetime import date
from typing import Optional
from pydantic import Field
from app.models.application import ApplicationStatus
from app.schemas.base import CamelSchema


class ApplicationCreateRequest(CamelSchema):
    """Schema for linking an applicant to a vacancy"""
    applicant_id: int
    vacancy_id: int
    status: ApplicationStatus = ApplicationStatus.APPLICATION_RECEIVED
    date_applied: date
    remarks: Optional[str] = None


class ApplicationUpdateRequest(CamelSchema):
    """
    Schema for updating an application.

    Status is deliberately absent: it only changes through
    PATCH /applications/{id}/status so the history stays in sync.
    A `status` key in the body is ignored.
    """
    applicant_id: int
    vacancy_id: int
    date_applied: date
    remarks: Optional[str] = None


class ApplicationResponse(CamelSchema):
    id: int
    applicant_id: int
    vacancy_id: int
    status: ApplicationStatus
    date_applied: date
    remarks: Optional[str] = None


class StatusTransitionRequest(CamelSchema):
    """Body of PATCH /applications/{id}/status"""
    status: str = Field(..., min_length=1, description="One of the ApplicationStatus values")
    remarks: Optional[str] = None


class StatusEventResponse(CamelSchema):
    id: int
    application_id: int
    status: ApplicationStatus
    remarks: str
    updated_by: str
    updated_at: date


class StatusTransitionResponse(CamelSchema):
    application: ApplicationResponse
    history: StatusEventResponse
