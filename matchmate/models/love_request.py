from sqlalchemy import Column, Integer, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from matchmate.core.database import Base


class LoveRequest(Base):
    __tablename__ = "love_requests"

    id = Column(Integer, primary_key=True, index=True)
    # Account ids are weak references: deleting a user leaves these rows in place
    sender_id = Column(Integer, nullable=False, index=True)
    receiver_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # One request per ordered (sender, receiver) pair
    __table_args__ = (
        UniqueConstraint('sender_id', 'receiver_id', name='uq_love_request_pair'),
    )

    def __repr__(self):
        return f"<LoveRequest(id={self.id}, sender_id={self.sender_id}, receiver_id={self.receiver_id})>"
