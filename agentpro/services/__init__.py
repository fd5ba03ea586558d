from .messaging_store import MessagingStore
from .notification_service import NotificationService
from .player_roster_service import PlayerRosterService
from .read_receipt_scheduler import ReadReceiptScheduler
from .session_manager import AuthState, SessionManager

__all__ = [
    "AuthState",
    "MessagingStore",
    "NotificationService",
    "PlayerRosterService",
    "ReadReceiptScheduler",
    "SessionManager",
]
