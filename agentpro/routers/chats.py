from typing import Dict, List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from agentpro.container import get_messaging_store, get_read_receipts, get_roster
from agentpro.errors import NotFoundError
from agentpro.models.api.chats import (
    ChatResponse,
    ChatSummaryResponse,
    SendMessageRequest,
    StartChatRequest,
    UnreadCountResponse,
)
from agentpro.models.domain import Chat, Message, Role
from agentpro.services.messaging_store import MessagingStore
from agentpro.services.player_roster_service import PlayerRosterService
from agentpro.services.read_receipt_scheduler import ReadReceiptScheduler

router = APIRouter()


def _summary(chat: Chat, role: Optional[Role] = None) -> ChatSummaryResponse:
    return ChatSummaryResponse(
        id=chat.id,
        player_id=chat.player_id,
        player_name=chat.player_name,
        player_avatar=chat.player_avatar,
        last_message=chat.last_message,
        last_message_time=chat.last_message_time,
        message_count=len(chat.messages),
        unread_for_agent=chat.unread_for_agent,
        unread_for_player=chat.unread_for_player,
        unread=chat.unread_for(role) if role is not None else None,
    )


def _detail(chat: Chat) -> ChatResponse:
    return ChatResponse(**_summary(chat).model_dump(), messages=list(chat.messages))


def _get_chat_or_404(store: MessagingStore, chat_id: UUID) -> Chat:
    chat = store.get_chat(chat_id)
    if not chat:
        raise HTTPException(status_code=404, detail="Chat not found")
    return chat


@router.get("", response_model=List[ChatSummaryResponse])
async def list_chats(
    limit: Optional[int] = Query(
        50, description="Maximum number of chats to return", ge=1, le=1000
    ),
    offset: int = Query(0, description="Number of chats to skip", ge=0),
    role: Optional[Role] = Query(None, description="Side to report unread for"),
    store: MessagingStore = Depends(get_messaging_store),
) -> List[ChatSummaryResponse]:
    """
    List conversations, most recently started first.

    Query parameters:
    - limit: Maximum number of chats to return (default: 50, max: 1000)
    - offset: Number of chats to skip (default: 0)
    - role: 'agent' or 'player'; fills ``unread`` for that side
    """
    chats = store.list_chats(limit=limit, offset=offset)
    return [_summary(chat, role) for chat in chats]


@router.post("", response_model=ChatResponse)
async def start_chat(
    request: StartChatRequest,
    store: MessagingStore = Depends(get_messaging_store),
    roster: PlayerRosterService = Depends(get_roster),
) -> ChatResponse:
    """Open (or reopen) the conversation with a roster player."""
    try:
        player = roster.get_player(request.player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)
    return _detail(store.start_chat(player))


@router.get("/unread", response_model=UnreadCountResponse)
async def get_unread_count(
    role: Role = Query(..., description="Side whose badge count to compute"),
    store: MessagingStore = Depends(get_messaging_store),
) -> UnreadCountResponse:
    return UnreadCountResponse(role=role, total_unread=store.total_unread(role))


@router.post("/read-all", response_model=UnreadCountResponse)
async def mark_all_as_read(
    role: Role = Query(..., description="Side marking everything as read"),
    store: MessagingStore = Depends(get_messaging_store),
) -> UnreadCountResponse:
    store.mark_all_as_read(role)
    return UnreadCountResponse(role=role, total_unread=store.total_unread(role))


@router.get("/{chat_id}", response_model=ChatResponse)
async def get_chat(
    chat_id: UUID, store: MessagingStore = Depends(get_messaging_store)
) -> ChatResponse:
    return _detail(_get_chat_or_404(store, chat_id))


@router.post("/{chat_id}/messages", response_model=Message)
async def send_message(
    chat_id: UUID,
    request: SendMessageRequest,
    store: MessagingStore = Depends(get_messaging_store),
) -> Message:
    """Post a message; the other side's unread count goes up by one."""
    _get_chat_or_404(store, chat_id)
    message = store.send_message(request.text, request.sender, chat_id)
    if message is None:
        raise HTTPException(status_code=400, detail="Message text must not be blank")
    return message


@router.post("/{chat_id}/read", response_model=ChatSummaryResponse)
async def mark_chat_as_read(
    chat_id: UUID,
    role: Role = Query(..., description="Side that read the chat"),
    store: MessagingStore = Depends(get_messaging_store),
) -> ChatSummaryResponse:
    chat = _get_chat_or_404(store, chat_id)
    store.mark_chat_as_read(chat_id, role)
    return _summary(chat)


@router.post("/{chat_id}/view", status_code=202)
async def open_chat_view(
    chat_id: UUID,
    role: Role = Query(..., description="Side viewing the chat"),
    store: MessagingStore = Depends(get_messaging_store),
    read_receipts: ReadReceiptScheduler = Depends(get_read_receipts),
) -> Dict[str, Union[str, bool]]:
    """The chat became visible: mark it read once the debounce delay elapses."""
    _get_chat_or_404(store, chat_id)
    read_receipts.schedule(chat_id, role)
    return {"chat_id": str(chat_id), "pending": True}


@router.delete("/{chat_id}/view")
async def close_chat_view(
    chat_id: UUID,
    read_receipts: ReadReceiptScheduler = Depends(get_read_receipts),
) -> Dict[str, Union[str, bool]]:
    """The chat went away before the delay: keep it unread."""
    cancelled = read_receipts.cancel(chat_id)
    return {"chat_id": str(chat_id), "cancelled": cancelled}
