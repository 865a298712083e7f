from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from matchmate.core.database import Base

GIFT_TYPE_MAX_LENGTH = 100


class Gift(Base):
    __tablename__ = "gifts"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, nullable=False, index=True)
    receiver_id = Column(Integer, nullable=False, index=True)
    gift_type = Column(String(GIFT_TYPE_MAX_LENGTH), nullable=False)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Gift(id={self.id}, sender_id={self.sender_id}, receiver_id={self.receiver_id}, gift_type='{self.gift_type}')>"
