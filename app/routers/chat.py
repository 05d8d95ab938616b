from fastapi import APIRouter, Depends

from app.schemas.chat import ChatCreate, ChatEntryResponse, ChatListResponse, ChatOut, ChatQuery
from app.services.chat_log import ChatLog, get_chat_log


router = APIRouter(prefix="/api/auth", tags=["Chat"])


@router.post("/chat", response_model=ChatEntryResponse)
def record_chat(body: ChatCreate, chat_log: ChatLog = Depends(get_chat_log)):
    entry = chat_log.record(body.user_id, body.chat, body.response)
    return ChatEntryResponse(data=ChatOut.model_validate(entry))


# POST 是前端既有的呼叫方式
@router.post("/get-chat", response_model=ChatListResponse)
def get_chat(body: ChatQuery, chat_log: ChatLog = Depends(get_chat_log)):
    entries = chat_log.list_for_user(body.user_id)
    return ChatListResponse(data=[ChatOut.model_validate(e) for e in entries])
