from abc import ABC, abstractmethod
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class NotificationCategory(str, Enum):
    MESSAGE = "message"
    CONTRACT_REMINDER = "contract_reminder"
    PERFORMANCE = "performance"
    MARKET_UPDATE = "market_update"


class Notification(BaseModel):
    """A local alert to show after ``delay_seconds``.

    Scheduling a notification whose id is already pending replaces it.
    """

    id: str = Field(default_factory=lambda: f"message-{uuid4()}")
    title: str
    body: str
    delay_seconds: float = Field(default=1.0, ge=0)
    category: NotificationCategory = NotificationCategory.MESSAGE


class BaseNotificationClient(ABC):
    """Abstract base class for notification dispatchers."""

    @abstractmethod
    async def schedule(self, notification: Notification) -> str:
        """Schedule a notification for delivery.

        Returns:
            The identifier of the scheduled notification.
        """

    @abstractmethod
    def cancel(self, notification_id: str) -> bool:
        """Cancel a pending notification. Returns False if none was pending."""

    @abstractmethod
    async def close(self) -> None:
        """Release resources and drop anything still pending."""
