from datetime import date
from pydantic import Field, model_validator
from app.models.vacancy import VacancyStatus
from app.schemas.base import CamelSchema


class DepartmentResponse(CamelSchema):
    id: int
    name: str


class VacancyBase(CamelSchema):
    """Fields shared by vacancy create/update requests"""
    position_title: str = Field(..., min_length=1, max_length=200)
    department_id: int
    salary_grade: int = Field(..., ge=1, description="Government salary grade")
    qualifications: str = Field(..., min_length=1)
    posting_date: date
    closing_date: date
    status: VacancyStatus = VacancyStatus.OPEN

    @model_validator(mode="after")
    def check_posting_window(self):
        if self.closing_date < self.posting_date:
            raise ValueError("closingDate must not be before postingDate")
        return self


class VacancyCreateRequest(VacancyBase):
    pass


class VacancyUpdateRequest(VacancyBase):
    pass


class VacancyResponse(CamelSchema):
    id: int
    position_title: str
    department_id: int
    salary_grade: int
    qualifications: str
    posting_date: date
    closing_date: date
    status: VacancyStatus
