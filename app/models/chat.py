from sqlalchemy import Column, DateTime, Integer, String, Text

from app.database import Base
from app.utils.clock import utcnow


class ChatEntry(Base):
    __tablename__ = "chats"

    id = Column(Integer, primary_key=True)
    # not a foreign key: entries outlive the account they were written for
    user_id = Column(String(64), index=True, nullable=False)
    chat = Column(Text, nullable=False)
    response = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
