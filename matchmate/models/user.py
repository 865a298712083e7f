from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from matchmate.core.database import Base

GENDERS = ("male", "female", "other")
INTERESTS = ("male", "female", "both")

NAME_MAX_LENGTH = 100
USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
HOBBY_MAX_LENGTH = 100


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    last_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    phone_number = Column(String(11), unique=True, index=True, nullable=False)
    gender = Column(String(10), nullable=False)
    interested_in = Column(String(10), nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationship
    hobby_entries = relationship(
        "UserHobby",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserHobby.id",
    )

    @property
    def hobbies(self):
        return [entry.name for entry in self.hobby_entries]

    @hobbies.setter
    def hobbies(self, names):
        self.hobby_entries = [UserHobby(name=name) for name in names]

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}', is_verified={self.is_verified})>"


# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(User.__table__.c.username), unique=True)


class UserHobby(Base):
    __tablename__ = "user_hobbies"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(HOBBY_MAX_LENGTH), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_user_hobby"),
    )

    user = relationship("User", back_populates="hobby_entries")

    def __repr__(self):
        return f"<UserHobby(user_id={self.user_id}, name='{self.name}')>"
