from .base_notification_client import (
    BaseNotificationClient,
    Notification,
    NotificationCategory,
)
from .local_notification_client import LocalNotificationClient
from .webhook_notification_client import WebhookNotificationClient

__all__ = [
    "BaseNotificationClient",
    "LocalNotificationClient",
    "Notification",
    "NotificationCategory",
    "WebhookNotificationClient",
]
