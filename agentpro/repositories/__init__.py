# In-memory repositories
from .base_repository import BaseRepository
from .chat_repository import ChatRepository
from .credential_repository import CredentialRepository
from .player_repository import PlayerRepository

__all__ = [
    "BaseRepository",
    "ChatRepository",
    "CredentialRepository",
    "PlayerRepository",
]
