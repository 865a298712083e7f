from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from matchmate.core.database import Base

REPORT_STATUSES = ("pending", "reviewed", "resolved")


class Report(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, index=True)
    reporter_id = Column(Integer, nullable=False, index=True)
    reported_user_id = Column(Integer, nullable=False, index=True)
    reason = Column(Text, nullable=False)
    details = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Report(id={self.id}, reporter_id={self.reporter_id}, reported_user_id={self.reported_user_id}, status='{self.status}')>"
