import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from matchmate.core.exceptions import Conflict, NotFound, ValidationError
from matchmate.models.gift import GIFT_TYPE_MAX_LENGTH, Gift
from matchmate.models.love_request import LoveRequest
from matchmate.models.user import User
from matchmate.services.account_service import AccountService

logger = logging.getLogger(__name__)


class RelationshipService:
    """Love requests (one per ordered pair) and gifts (unlimited)."""

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountService(db)

    def find_love_request(self, sender_id: int, receiver_id: int) -> Optional[LoveRequest]:
        return self.db.query(LoveRequest).filter(
            LoveRequest.sender_id == sender_id,
            LoveRequest.receiver_id == receiver_id
        ).first()

    def send_love_request(self, sender_id: int, receiver_username: Optional[str]) -> LoveRequest:
        if not receiver_username or not receiver_username.strip():
            raise ValidationError("Receiver username is required.")

        receiver = self.accounts.get_user_by_username(receiver_username)
        if not receiver:
            raise NotFound("User not found.")

        if receiver.id == sender_id:
            raise ValidationError("You cannot send a love request to yourself.")

        if self.find_love_request(sender_id, receiver.id):
            raise Conflict("Love request already sent.")

        love_request = LoveRequest(sender_id=sender_id, receiver_id=receiver.id)
        self.db.add(love_request)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent request for the same pair won
            self.db.rollback()
            raise Conflict("Love request already sent.")
        self.db.refresh(love_request)

        logger.info(f"Love request {love_request.id}: user {sender_id} -> user {receiver.id}")
        return love_request

    def send_gift(
        self,
        sender_id: int,
        receiver_username: Optional[str],
        gift_type: Optional[str],
        message: Optional[str] = None,
    ) -> Tuple[Gift, User]:
        if not receiver_username or not receiver_username.strip() or not gift_type or not gift_type.strip():
            raise ValidationError("Receiver username and gift type are required.")
        if len(gift_type.strip()) > GIFT_TYPE_MAX_LENGTH:
            raise ValidationError(f"Gift type must be at most {GIFT_TYPE_MAX_LENGTH} characters.")

        receiver = self.accounts.get_user_by_username(receiver_username)
        if not receiver:
            raise NotFound("Receiver not found.")

        if receiver.id == sender_id:
            raise ValidationError("You cannot send a gift to yourself.")

        gift = Gift(
            sender_id=sender_id,
            receiver_id=receiver.id,
            gift_type=gift_type.strip(),
            message=message,
        )
        self.db.add(gift)
        self.db.commit()
        self.db.refresh(gift)

        logger.info(f"Gift {gift.id} ({gift.gift_type}): user {sender_id} -> user {receiver.id}")
        return gift, receiver
