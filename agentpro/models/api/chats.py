from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from agentpro.models.domain import Message, Role


class StartChatRequest(BaseModel):
    """Request model for opening a conversation with a roster player."""

    player_id: UUID


class SendMessageRequest(BaseModel):
    """Request model for posting a message to a chat."""

    text: str = Field(..., min_length=1, description="Message content")
    sender: Role = Field(..., description="Role of the author")


class ChatSummaryResponse(BaseModel):
    """Response model for a row of the conversation list."""

    id: UUID
    player_id: UUID
    player_name: str
    player_avatar: str
    last_message: str
    last_message_time: datetime
    message_count: int
    unread_for_agent: int
    unread_for_player: int
    unread: Optional[int] = None  # For the requesting side, when given

    model_config = ConfigDict(from_attributes=True)


class ChatResponse(ChatSummaryResponse):
    """Response model for a conversation with its messages."""

    messages: List[Message]


class UnreadCountResponse(BaseModel):
    """Response model for badge counts."""

    role: Role
    total_unread: int
