from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .role import Role


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    id: UUID = Field(default_factory=uuid4)
    text: str = Field(..., min_length=1)
    sender: Role
    timestamp: datetime = Field(default_factory=utcnow)
    # Informational only; unread counts live on the chat
    is_read: bool = False
    attachment_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Chat(BaseModel):
    """Conversation between the agent and one player.

    ``last_message``/``last_message_time`` mirror the last entry of
    ``messages``. The unread counters are maintained by the messaging store,
    one per side.
    """

    id: UUID = Field(default_factory=uuid4)
    player_id: UUID
    player_name: str
    player_avatar: str
    messages: List[Message] = Field(default_factory=list)
    last_message: str = ""
    last_message_time: datetime = Field(default_factory=utcnow)
    unread_for_agent: int = Field(default=0, ge=0)
    unread_for_player: int = Field(default=0, ge=0)

    model_config = ConfigDict(validate_assignment=True)

    def unread_for(self, role: Role) -> int:
        return self.unread_for_agent if role == Role.AGENT else self.unread_for_player
