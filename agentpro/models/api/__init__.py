# API models for request/response contracts
from .chats import (
    ChatResponse,
    ChatSummaryResponse,
    SendMessageRequest,
    StartChatRequest,
    UnreadCountResponse,
)
from .players import (
    ContractReminderRequest,
    CreatePlayerRequest,
    PerformanceAlertRequest,
    RosterSummaryResponse,
    ScheduledNotificationsResponse,
    UpdatePlayerRequest,
)
from .session import (
    LoginRequest,
    RegisterAgentRequest,
    RegisterPlayerRequest,
    SelectRoleRequest,
    SessionStateResponse,
)

__all__ = [
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
]
