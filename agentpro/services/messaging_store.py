import logging
from typing import List, Optional
from uuid import UUID

from agentpro.events import EventBus, MessageSent
from agentpro.models.domain import Chat, Message, PlayerProfile, Role
from agentpro.repositories.chat_repository import ChatRepository

logger = logging.getLogger(__name__)


class MessagingStore:
    """Owns the conversations and their per-side unread counters.

    Mutations never raise: an unknown chat id is a no-op, since callers may
    hold a stale id. Each side's unread counter counts messages from the
    other side and is only changed here.
    """

    def __init__(self, chat_repo: ChatRepository, events: EventBus):
        self.chat_repo = chat_repo
        self.events = events

    def start_chat(self, player: PlayerProfile) -> Chat:
        """Get the chat held with ``player``, creating it at the front if new."""
        existing = self.chat_repo.get_by_player_id(player.id)
        if existing:
            return existing

        chat = Chat(
            player_id=player.id,
            player_name=player.name,
            player_avatar=player.avatar,
        )
        self.chat_repo.insert_front(chat)
        logger.info(f"Started chat {chat.id} with {player.name}")
        return chat

    def send_message(self, text: str, sender: Role, chat_id: UUID) -> Optional[Message]:
        """Append a message and bump the recipient's unread counter.

        Returns the new message, or None when the chat does not exist or the
        text is blank.
        """
        chat = self.chat_repo.get_by_id(chat_id)
        if chat is None:
            logger.debug(f"Dropping message for unknown chat {chat_id}")
            return None
        if not text or not text.strip():
            return None

        sender = Role(sender)
        message = Message(text=text, sender=sender)
        chat.messages.append(message)
        chat.last_message = message.text
        chat.last_message_time = message.timestamp

        self._bump(chat, sender.other)

        self.events.publish(
            MessageSent(chat_id=chat.id, player_name=chat.player_name, message=message)
        )
        return message

    def mark_chat_as_read(self, chat_id: UUID, role: Role) -> None:
        chat = self.chat_repo.get_by_id(chat_id)
        if chat is None:
            return
        self._clear(chat, role)

    def mark_all_as_read(self, role: Role) -> None:
        for chat in self.chat_repo.get_all():
            self._clear(chat, role)

    def total_unread(self, role: Role) -> int:
        """Badge count for ``role`` across every chat."""
        return sum(chat.unread_for(role) for chat in self.chat_repo.get_all())

    def get_chat(self, chat_id: UUID) -> Optional[Chat]:
        return self.chat_repo.get_by_id(chat_id)

    def get_chat_for_player(self, player_id: UUID) -> Optional[Chat]:
        return self.chat_repo.get_by_player_id(player_id)

    def list_chats(self, limit: Optional[int] = None, offset: int = 0) -> List[Chat]:
        """Chats, most recently started first."""
        return self.chat_repo.get_all(limit=limit, offset=offset)

    @staticmethod
    def _bump(chat: Chat, recipient: Role) -> None:
        if recipient == Role.AGENT:
            chat.unread_for_agent += 1
        else:
            chat.unread_for_player += 1

    @staticmethod
    def _clear(chat: Chat, role: Role) -> None:
        if role == Role.AGENT:
            chat.unread_for_agent = 0
        else:
            chat.unread_for_player = 0
