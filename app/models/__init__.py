"""
Database models package.
"""

from app.models.user import User, UserRole
from app.models.vacancy import Department, JobVacancy, VacancyStatus
from app.models.applicant import Applicant
from app.models.application import Application, ApplicationStatus
from app.models.status_event import StatusEvent, SYSTEM_ACTOR
from app.models.evaluation import Evaluation

__all__ = [
    "User",
    "UserRole",
    "Department",
    "JobVacancy",
    "VacancyStatus",
    "Applicant",
    "Application",
    "ApplicationStatus",
    "StatusEvent",
    "SYSTEM_ACTOR",
    "Evaluation",
]
