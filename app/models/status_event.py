"""
StatusEvent model: the append-only audit trail of application status changes.

Each row records the status, remarks and actor of exactly one transition.
Rows are never updated; they are only removed together with their
application.
"""

from sqlalchemy import Column, Integer, String, Text, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.application import ApplicationStatus

SYSTEM_ACTOR = "System"


class StatusEvent(Base):
    __tablename__ = "status_history"

    # Autoincrement id doubles as insertion order for same-day events
    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)

    status = Column(Enum(ApplicationStatus, values_callable=lambda e: [m.value for m in e]), nullable=False)
    remarks = Column(Text, nullable=False, default="")
    updated_by = Column(String, nullable=False, default=SYSTEM_ACTOR)
    updated_at = Column(Date, nullable=False, index=True)

    application = relationship("Application", back_populates="status_events")

    def __repr__(self):
        return f"<StatusEvent(application_id={self.application_id}, status='{self.status.value}', updated_at={self.updated_at})>"
