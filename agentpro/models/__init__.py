# Export all models
from .api import (
    ChatResponse,
    ChatSummaryResponse,
    ContractReminderRequest,
    CreatePlayerRequest,
    LoginRequest,
    PerformanceAlertRequest,
    RegisterAgentRequest,
    RegisterPlayerRequest,
    RosterSummaryResponse,
    ScheduledNotificationsResponse,
    SelectRoleRequest,
    SendMessageRequest,
    SessionStateResponse,
    StartChatRequest,
    UnreadCountResponse,
    UpdatePlayerRequest,
)
from .domain import (
    AgentProfile,
    AgentRecord,
    Chat,
    ContractStatus,
    Document,
    DocumentCategory,
    Message,
    PlayerProfile,
    PlayerRecord,
    PlayerStats,
    Role,
    Session,
    UserRecord,
)

__all__ = [
    # API models
    "ChatResponse",
    "ChatSummaryResponse",
    "ContractReminderRequest",
    "CreatePlayerRequest",
    "LoginRequest",
    "PerformanceAlertRequest",
    "RegisterAgentRequest",
    "RegisterPlayerRequest",
    "RosterSummaryResponse",
    "ScheduledNotificationsResponse",
    "SelectRoleRequest",
    "SendMessageRequest",
    "SessionStateResponse",
    "StartChatRequest",
    "UnreadCountResponse",
    "UpdatePlayerRequest",
    # Domain models
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
]
