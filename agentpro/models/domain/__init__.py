# In-memory domain models
from .messaging import Chat, Message
from .profiles import AgentProfile, Document, PlayerProfile, PlayerStats
from .records import AgentRecord, PlayerRecord, UserRecord, user_record_adapter
from .role import ContractStatus, DocumentCategory, Role
from .session import Session

__all__ = [
    "AgentProfile",
    "AgentRecord",
    "Chat",
    "ContractStatus",
    "Document",
    "DocumentCategory",
    "Message",
    "PlayerProfile",
    "PlayerRecord",
    "PlayerStats",
    "Role",
    "Session",
    "UserRecord",
    "user_record_adapter",
]
