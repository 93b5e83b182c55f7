"""
Pydantic schemas for Applicant API requests/responses.
"""

from pydantic import EmailStr, Field
from app.schemas.base import CamelSchema


class ApplicantBase(CamelSchema):
    """Base applicant schema with common fields."""
    full_name: str = Field(..., min_length=1, max_length=200)
    contact_number: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    address: str = Field(..., min_length=1)
    educational_background: str = Field(..., min_length=1)
    work_experience: str = Field(..., min_length=1)


class ApplicantCreateRequest(ApplicantBase):
    pass


class ApplicantUpdateRequest(ApplicantBase):
    pass


class ApplicantResponse(ApplicantBase):
    id: int
    # Stored values are returned as entered, even if they predate email validation
    email: str
