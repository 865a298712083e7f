import logging
from typing import Optional

from sqlalchemy.orm import Session

from matchmate.core.exceptions import NotFound, ValidationError
from matchmate.models.report import Report
from matchmate.services.account_service import AccountService

logger = logging.getLogger(__name__)


class ModerationService:
    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountService(db)

    def report_user(
        self,
        reporter_id: int,
        reported_user_id: Optional[int],
        reason: Optional[str],
        details: Optional[str] = None,
    ) -> Report:
        """File a pending report; status changes are an admin concern"""
        if reported_user_id is None:
            raise ValidationError("Reported user ID is required.")
        if not reason or not reason.strip():
            raise ValidationError("Reason for reporting is required.")

        if not self.accounts.get_user(reported_user_id):
            raise NotFound("User to be reported not found.")

        if reporter_id == reported_user_id:
            raise ValidationError("You cannot report yourself.")

        report = Report(
            reporter_id=reporter_id,
            reported_user_id=reported_user_id,
            reason=reason.strip(),
            details=details.strip() if details else "",
            status="pending",
        )
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)

        logger.info(f"Report {report.id}: user {reporter_id} reported user {reported_user_id}")
        return report
