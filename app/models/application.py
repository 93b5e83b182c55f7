"""
Application database model.

Links one applicant to one vacancy and carries the candidacy's current
pipeline status. The status timeline lives in status_history (StatusEvent).
"""

from sqlalchemy import Column, Integer, ForeignKey, Enum, Text, Date
from sqlalchemy.orm import relationship
import enum
from app.core.database import Base


class ApplicationStatus(str, enum.Enum):
    """
    Hiring pipeline stages, in their usual order:

    Application Received -> Under Initial Screening -> For Examination
        -> For Interview -> For Final Evaluation -> Approved -> Hired
                                  (any stage) -> Rejected

    Transitions are not constrained to this order; HR staff may move an
    application from any status to any other to correct mistakes.
    """
    APPLICATION_RECEIVED = "Application Received"
    UNDER_INITIAL_SCREENING = "Under Initial Screening"
    FOR_EXAMINATION = "For Examination"
    FOR_INTERVIEW = "For Interview"
    FOR_FINAL_EVALUATION = "For Final Evaluation"
    APPROVED = "Approved"
    HIRED = "Hired"
    REJECTED = "Rejected"


class Application(Base):
    """
    One applicant's candidacy for one vacancy.

    `status` is only changed through the status recorder so that it always
    matches the latest StatusEvent (or the creation status when the
    application has no history yet).
    """
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    applicant_id = Column(Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True)
    vacancy_id = Column(Integer, ForeignKey("job_vacancies.id", ondelete="CASCADE"), nullable=False, index=True)

    status = Column(
        Enum(ApplicationStatus, values_callable=lambda e: [m.value for m in e]),
        default=ApplicationStatus.APPLICATION_RECEIVED,
        nullable=False,
        index=True,
    )
    date_applied = Column(Date, nullable=False)
    remarks = Column(Text, nullable=True)

    # Relationships
    applicant = relationship("Applicant", back_populates="applications")
    vacancy = relationship("JobVacancy", back_populates="applications")
    status_events = relationship(
        "StatusEvent",
        back_populates="application",
        cascade="all, delete-orphan",
        order_by="(StatusEvent.updated_at, StatusEvent.id)",
    )
    evaluation = relationship("Evaluation", back_populates="application", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Application(id={self.id}, applicant_id={self.applicant_id}, vacancy_id={self.vacancy_id}, status='{self.status.value}')>"
