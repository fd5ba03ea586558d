import asyncio
import logging
from collections import deque
from typing import Deque, Dict

from agentpro.clients.base_notification_client import (
    BaseNotificationClient,
    Notification,
)

logger = logging.getLogger(__name__)


class LocalNotificationClient(BaseNotificationClient):
    """Delivers notifications on the running event loop after their delay.

    Only the most recent ``max_delivered`` deliveries are kept.
    """

    def __init__(self, max_delivered: int = 100) -> None:
        self.pending: Dict[str, asyncio.TimerHandle] = {}
        self.delivered: Deque[Notification] = deque(maxlen=max_delivered)

    async def schedule(self, notification: Notification) -> str:
        loop = asyncio.get_running_loop()
        self.cancel(notification.id)
        self.pending[notification.id] = loop.call_later(
            notification.delay_seconds, self._deliver, notification
        )
        return notification.id

    def cancel(self, notification_id: str) -> bool:
        handle = self.pending.pop(notification_id, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def cancel_all(self) -> None:
        for notification_id in list(self.pending):
            self.cancel(notification_id)

    async def close(self) -> None:
        self.cancel_all()

    def _deliver(self, notification: Notification) -> None:
        self.pending.pop(notification.id, None)
        self.delivered.append(notification)
        logger.info(f"Notification: {notification.title} - {notification.body}")
