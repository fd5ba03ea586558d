from typing import Optional

import httpx

from agentpro.clients.base_notification_client import (
    BaseNotificationClient,
    Notification,
)


class WebhookNotificationClient(BaseNotificationClient):
    """Hands notifications to an external dispatcher over HTTP using httpx.

    The dispatcher owns the delay; nothing is held locally once posted, so
    cancellation is not supported.
    """

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def schedule(self, notification: Notification) -> str:
        """Post the notification to the dispatcher."""
        payload = {
            "id": notification.id,
            "title": notification.title,
            "body": notification.body,
            "delay_seconds": notification.delay_seconds,
            "category": notification.category.value,
        }

        response = await self._get_client().post(self.url, json=payload)
        response.raise_for_status()
        return notification.id

    def cancel(self, notification_id: str) -> bool:
        return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client
