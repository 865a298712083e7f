from typing import Literal, Optional
from datetime import datetime

from .common import CamelModel


class ReportCreate(CamelModel):
    reported_user_id: Optional[int] = None
    reason: Optional[str] = ""
    details: Optional[str] = None


class ReportResponse(CamelModel):
    id: int
    reporter_id: int
    reported_user_id: int
    reason: str
    details: str = ""
    status: Literal["pending", "reviewed", "resolved"] = "pending"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReportEnvelope(CamelModel):
    message: str
    report: ReportResponse
