from typing import Optional
from uuid import UUID

from agentpro.models.domain import Chat
from agentpro.repositories.base_repository import BaseRepository


class ChatRepository(BaseRepository[Chat]):
    """Repository for conversations, newest-started first."""

    def get_by_player_id(self, player_id: UUID) -> Optional[Chat]:
        """Find the conversation held with a player."""
        for chat in self.get_all():
            if chat.player_id == player_id:
                return chat
        return None
