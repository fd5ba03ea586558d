import asyncio
import logging
from typing import List, Set
from uuid import uuid4

from agentpro.clients.base_notification_client import (
    BaseNotificationClient,
    Notification,
    NotificationCategory,
)
from agentpro.events import EventBus, MarketValueChanged, MessageSent
from agentpro.models.domain import PlayerProfile
from agentpro.services.player_roster_service import parse_market_value

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Days before expiry at which a renewal reminder fires
CONTRACT_REMINDERS = (
    (30, "⚠️ Contract renewal coming up"),
    (14, "🔔 Contract renewal is urgent"),
    (7, "🚨 Contract expires in a week"),
    (1, "🔥 URGENT: contract expires tomorrow!"),
)


class NotificationService:
    """Turns domain events into local alerts, fire-and-forget.

    Message and market value alerts follow the event bus. Contract reminders
    and performance alerts are scheduled directly on the same client.
    """

    def __init__(self, client: BaseNotificationClient, delay_seconds: float = 1.0):
        self.client = client
        self.delay_seconds = delay_seconds
        self._tasks: Set["asyncio.Task[None]"] = set()

    def attach(self, events: EventBus) -> None:
        events.subscribe(MessageSent, self.on_message_sent)
        events.subscribe(MarketValueChanged, self.on_market_value_changed)

    def detach(self, events: EventBus) -> None:
        events.unsubscribe(MessageSent, self.on_message_sent)
        events.unsubscribe(MarketValueChanged, self.on_market_value_changed)

    def on_message_sent(self, event: MessageSent) -> None:
        self._spawn(self.build_notification(event))

    def on_market_value_changed(self, event: MarketValueChanged) -> None:
        self._spawn(self.build_market_value_alert(event))

    def build_notification(self, event: MessageSent) -> Notification:
        sender = event.message.sender.display_name
        return Notification(
            title="New message",
            body=f"{sender}: {event.message.text}",
            delay_seconds=self.delay_seconds,
        )

    def build_market_value_alert(self, event: MarketValueChanged) -> Notification:
        """One alert per player; a newer change replaces a pending one."""
        increase = parse_market_value(event.new_value) > parse_market_value(
            event.old_value
        )
        emoji = "📈" if increase else "📉"
        return Notification(
            id=f"market-value-{event.player_id}",
            title=f"{emoji} Market value updated",
            body=f"{event.player_name}: {event.old_value} → {event.new_value}",
            delay_seconds=self.delay_seconds,
            category=NotificationCategory.MARKET_UPDATE,
        )

    def build_contract_reminders(
        self, player: PlayerProfile, days_until_expiry: int
    ) -> List[Notification]:
        """Reminders for every threshold still ahead of the expiry date."""
        return [
            Notification(
                id=f"contract-{player.id}-{days}",
                title=title,
                body=f"{player.name}'s contract expires in {days} day(s)",
                delay_seconds=(days_until_expiry - days) * SECONDS_PER_DAY,
                category=NotificationCategory.CONTRACT_REMINDER,
            )
            for days, title in CONTRACT_REMINDERS
            if days_until_expiry > days
        ]

    async def schedule_contract_reminders(
        self, player: PlayerProfile, days_until_expiry: int
    ) -> List[str]:
        """Schedule the staggered renewal reminders for a player's contract."""
        scheduled = []
        for notification in self.build_contract_reminders(player, days_until_expiry):
            scheduled.append(await self.client.schedule(notification))
        logger.info(
            f"Scheduled {len(scheduled)} contract reminders for {player.name} "
            f"({days_until_expiry} days left)"
        )
        return scheduled

    async def schedule_performance_alert(
        self, player: PlayerProfile, achievement: str
    ) -> str:
        notification = Notification(
            id=f"performance-{uuid4()}",
            title="⚽ Outstanding performance!",
            body=f"{player.name}: {achievement}",
            delay_seconds=self.delay_seconds,
            category=NotificationCategory.PERFORMANCE,
        )
        return await self.client.schedule(notification)

    async def close(self) -> None:
        """Cancel in-flight dispatches and close the client."""
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        await self.client.close()

    def _spawn(self, notification: Notification) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No event loop; dropping notification {notification.id}")
            return

        task = loop.create_task(self._dispatch(notification))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _dispatch(self, notification: Notification) -> None:
        try:
            await self.client.schedule(notification)
        except Exception as e:
            logger.error(f"Failed to schedule notification {notification.id}: {e}")
