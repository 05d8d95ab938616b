from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.database import Base
from app.utils.clock import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String(100), nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    # present only while a verification is pending
    verification_token = Column(String(6), index=True, nullable=True)
    verification_token_expires_at = Column(DateTime, nullable=True)

    # 存 hash，不要存明碼 token；present only while a reset is pending
    reset_password_token = Column(String(64), index=True, nullable=True)
    reset_password_expires_at = Column(DateTime, nullable=True)

    last_login = Column(DateTime, default=utcnow, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    @property
    def has_pending_verification(self) -> bool:
        return self.verification_token is not None

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, is_verified={self.is_verified})>"
