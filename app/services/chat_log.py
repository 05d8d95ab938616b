import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import ValidationError
from app.models.chat import ChatEntry

logger = logging.getLogger("app.chat")


def _as_user_key(user_id: int | str | None) -> str:
    if user_id is None:
        return ""
    return str(user_id).strip()


class ChatLog:
    """Append-only (user, chat, response) records."""

    def __init__(self, db: Session):
        self.db = db

    def record(self, user_id: int | str | None, chat: str | None, response: str | None) -> ChatEntry:
        user_key = _as_user_key(user_id)
        if not user_key:
            raise ValidationError("Missing required fields: id")
        if not chat or not chat.strip():
            raise ValidationError("Missing required fields: chat")
        if not response or not response.strip():
            raise ValidationError("Missing required fields: response")

        entry = ChatEntry(user_id=user_key, chat=chat, response=response)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        logger.info("Recorded chat entry %s for user %s", entry.id, user_key)
        return entry

    def list_for_user(self, user_id: int | str | None) -> list[ChatEntry]:
        user_key = _as_user_key(user_id)
        if not user_key:
            raise ValidationError("Missing required field: id")

        return (
            self.db.query(ChatEntry)
            .filter(ChatEntry.user_id == user_key)
            .order_by(ChatEntry.id)
            .all()
        )


def get_chat_log(db: Session = Depends(get_db)) -> ChatLog:
    return ChatLog(db)
