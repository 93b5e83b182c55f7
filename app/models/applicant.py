from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


class Applicant(Base):
    """
    A person applying to university vacancies.

    One applicant may hold several applications across vacancies.
    """
    __tablename__ = "applicants"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False, index=True)
    contact_number = Column(String, nullable=False)
    email = Column(String, nullable=False)
    address = Column(String, nullable=False)
    educational_background = Column(Text, nullable=False)
    work_experience = Column(Text, nullable=False)

    applications = relationship("Application", back_populates="applicant", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Applicant(id={self.id}, full_name='{self.full_name}')>"
