import enum
from sqlalchemy import Column, Integer, String, Text, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class VacancyStatus(str, enum.Enum):
    """
    Posting state of a job vacancy.

    - OPEN: accepting applications
    - CLOSED: posting window ended
    - FILLED: position has been filled
    """
    OPEN = "Open"
    CLOSED = "Closed"
    FILLED = "Filled"


class Department(Base):
    """A university college or office that owns vacancies."""
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    vacancies = relationship("JobVacancy", back_populates="department")

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}')>"


class JobVacancy(Base):
    """
    An open position with department, salary grade and posting window.
    """
    __tablename__ = "job_vacancies"

    id = Column(Integer, primary_key=True, index=True)
    position_title = Column(String, nullable=False, index=True)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False, index=True)
    salary_grade = Column(Integer, nullable=False)
    qualifications = Column(Text, nullable=False)
    posting_date = Column(Date, nullable=False)
    closing_date = Column(Date, nullable=False)
    status = Column(
        Enum(VacancyStatus, values_callable=lambda e: [m.value for m in e]),
        default=VacancyStatus.OPEN,
        nullable=False,
        index=True,
    )

    # Relationships
    department = relationship("Department", back_populates="vacancies")
    applications = relationship("Application", back_populates="vacancy", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<JobVacancy(id={self.id}, position_title='{self.position_title}', status={self.status.value})>"
