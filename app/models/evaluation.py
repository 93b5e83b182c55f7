"""
Evaluation model for exam and interview scoring.

total_score is derived from the two sub-scores by the evaluation scorer and
persisted alongside them so rankings can be read straight from the table.
"""

from sqlalchemy import Column, Integer, ForeignKey, Float, String, Text, Date
from sqlalchemy.orm import relationship
from app.core.database import Base


class Evaluation(Base):
    """
    Numeric assessment of one application.

    At most one evaluation exists per application (unique application_id).
    """
    __tablename__ = "evaluations"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(
        Integer,
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    exam_score = Column(Float, nullable=False)
    interview_score = Column(Float, nullable=False)
    total_score = Column(Float, nullable=False, index=True)

    remarks = Column(Text, nullable=False, default="")
    evaluated_by = Column(String, nullable=False)
    evaluated_at = Column(Date, nullable=False)

    # Relationships
    application = relationship("Application", back_populates="evaluation")

    def __repr__(self):
        return f"<Evaluation(application_id={self.application_id}, total_score={self.total_score})>"
