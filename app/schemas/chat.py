from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

class ChatCreate(BaseModel):
    user_id: Optional[Union[int, str]] = None
    chat: Optional[str] = None
    response: Optional[str] = None

class ChatQuery(BaseModel):
    user_id: Optional[Union[int, str]] = None

class ChatOut(BaseModel):
    id: int
    user_id: str
    chat: str
    response: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)

class ChatEntryResponse(BaseModel):
    success: bool = True
    data: ChatOut

class ChatListResponse(BaseModel):
    success: bool = True
    data: list[ChatOut]
