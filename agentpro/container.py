"""Service construction and teardown."""

import logging
from typing import Optional

from fastapi import Request

from agentpro.clients.base_notification_client import BaseNotificationClient
from agentpro.clients.local_notification_client import LocalNotificationClient
from agentpro.clients.webhook_notification_client import WebhookNotificationClient
from agentpro.config import Settings
from agentpro.events import EventBus
from agentpro.repositories.chat_repository import ChatRepository
from agentpro.repositories.credential_repository import CredentialRepository
from agentpro.repositories.player_repository import PlayerRepository
from agentpro.seed import load_sample_data
from agentpro.services.messaging_store import MessagingStore
from agentpro.services.notification_service import NotificationService
from agentpro.services.player_roster_service import PlayerRosterService
from agentpro.services.read_receipt_scheduler import ReadReceiptScheduler
from agentpro.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


class AppContainer:
    """Owns one instance of every service for the lifetime of the app."""

    def __init__(
        self,
        settings: Settings,
        notification_client: Optional[BaseNotificationClient] = None,
    ):
        self.settings = settings
        self.events = EventBus()

        self.credentials = CredentialRepository()
        self.player_repo = PlayerRepository()
        self.chat_repo = ChatRepository()
        if settings.seed_data:
            load_sample_data(self.credentials, self.player_repo, self.chat_repo)

        self.session_manager = SessionManager(
            self.credentials,
            login_delay=settings.login_delay_seconds,
            register_delay=settings.register_delay_seconds,
        )
        self.messaging_store = MessagingStore(self.chat_repo, self.events)
        self.read_receipts = ReadReceiptScheduler(
            self.messaging_store, delay=settings.read_receipt_delay_seconds
        )
        self.roster = PlayerRosterService(
            self.player_repo,
            cache_ttl=settings.player_cache_ttl_seconds,
            events=self.events,
        )

        self.notifications = NotificationService(
            notification_client or self._build_notification_client(settings),
            delay_seconds=settings.notification_delay_seconds,
        )
        self.notifications.attach(self.events)

    async def close(self) -> None:
        """Cancel pending work and release clients."""
        await self.read_receipts.cancel_all()
        self.notifications.detach(self.events)
        await self.notifications.close()
        self.events.clear()
        logger.info("Services shut down")

    @staticmethod
    def _build_notification_client(settings: Settings) -> BaseNotificationClient:
        if settings.notification_backend == "webhook":
            return WebhookNotificationClient(str(settings.notification_webhook_url))
        return LocalNotificationClient()


def get_container(request: Request) -> AppContainer:
    """Dependency to get the app's service container."""
    return request.app.state.container


def get_session_manager(request: Request) -> SessionManager:
    return get_container(request).session_manager


def get_messaging_store(request: Request) -> MessagingStore:
    return get_container(request).messaging_store


def get_read_receipts(request: Request) -> ReadReceiptScheduler:
    return get_container(request).read_receipts


def get_roster(request: Request) -> PlayerRosterService:
    return get_container(request).roster


def get_notifications(request: Request) -> NotificationService:
    return get_container(request).notifications
