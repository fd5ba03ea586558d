import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from agentpro.clients.base_notification_client import (
    BaseNotificationClient,
    Notification,
    NotificationCategory,
)
from agentpro.clients.local_notification_client import LocalNotificationClient
from agentpro.events import EventBus, MarketValueChanged, MessageSent
from agentpro.models.domain import Message, PlayerProfile, Role
from agentpro.services.messaging_store import MessagingStore
from agentpro.models.api.players import UpdatePlayerRequest
from agentpro.repositories.player_repository import PlayerRepository
from agentpro.services.notification_service import (
    SECONDS_PER_DAY,
    NotificationService,
)
from agentpro.services.player_roster_service import PlayerRosterService


class TestNotificationService:
    """Unit tests for NotificationService."""

    @pytest.fixture
    def mock_client(self) -> MagicMock:
        client = MagicMock(spec=BaseNotificationClient)
        client.schedule = AsyncMock(return_value="message-1")
        client.close = AsyncMock()
        return client

    @pytest.fixture
    def service(self, mock_client: MagicMock, events: EventBus) -> NotificationService:
        service = NotificationService(mock_client, delay_seconds=1.0)
        service.attach(events)
        return service

    def test_build_notification_from_agent(self, player: PlayerProfile) -> None:
        """Title and body follow the sender's display name."""
        service = NotificationService(LocalNotificationClient(), delay_seconds=1.0)
        event = _event(player, "Contract ready", Role.AGENT)

        notification = service.build_notification(event)

        assert notification.title == "New message"
        assert notification.body == "Agent: Contract ready"
        assert notification.delay_seconds == 1.0
        assert notification.id.startswith("message-")

    def test_build_notification_from_player(self, player: PlayerProfile) -> None:
        service = NotificationService(LocalNotificationClient(), delay_seconds=1.0)

        notification = service.build_notification(_event(player, "Hi", Role.PLAYER))

        assert notification.body == "Player: Hi"

    def test_notification_ids_are_unique(self, player: PlayerProfile) -> None:
        service = NotificationService(LocalNotificationClient())
        event = _event(player, "Hi", Role.PLAYER)

        assert service.build_notification(event).id != (
            service.build_notification(event).id
        )

    @pytest.mark.asyncio
    async def test_send_message_schedules_notification(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        store: MessagingStore,
        player: PlayerProfile,
    ) -> None:
        """Sending through the store dispatches exactly one notification."""
        chat = store.start_chat(player)

        store.send_message("hello", Role.AGENT, chat.id)
        await asyncio.sleep(0)

        mock_client.schedule.assert_awaited_once()
        notification = mock_client.schedule.call_args[0][0]
        assert isinstance(notification, Notification)
        assert notification.body == "Agent: hello"

    @pytest.mark.asyncio
    async def test_client_failure_is_swallowed(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        store: MessagingStore,
        player: PlayerProfile,
    ) -> None:
        """A failing dispatcher does not affect the message send."""
        mock_client.schedule.side_effect = RuntimeError("denied")
        chat = store.start_chat(player)

        message = store.send_message("hello", Role.AGENT, chat.id)
        await asyncio.sleep(0)

        assert message is not None
        assert chat.messages == [message]

    def test_without_event_loop_is_dropped(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        store: MessagingStore,
        player: PlayerProfile,
    ) -> None:
        """Outside a running loop the notification is dropped, not raised."""
        chat = store.start_chat(player)

        assert store.send_message("hello", Role.AGENT, chat.id) is not None
        mock_client.schedule.assert_not_called()

    @pytest.mark.asyncio
    async def test_detach_stops_dispatch(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        events: EventBus,
        store: MessagingStore,
        player: PlayerProfile,
    ) -> None:
        service.detach(events)
        chat = store.start_chat(player)

        store.send_message("hello", Role.AGENT, chat.id)
        await asyncio.sleep(0)

        mock_client.schedule.assert_not_called()

    @pytest.mark.asyncio
    async def test_close_closes_client(
        self, service: NotificationService, mock_client: MagicMock
    ) -> None:
        await service.close()

        mock_client.close.assert_awaited_once()


class TestPlayerAlerts:
    """Unit tests for market value, contract and performance alerts."""

    @pytest.fixture
    def mock_client(self) -> MagicMock:
        client = MagicMock(spec=BaseNotificationClient)
        client.schedule = AsyncMock(side_effect=lambda n: n.id)
        client.close = AsyncMock()
        return client

    @pytest.fixture
    def service(self, mock_client: MagicMock, events: EventBus) -> NotificationService:
        service = NotificationService(mock_client, delay_seconds=1.0)
        service.attach(events)
        return service

    @pytest.fixture
    def roster(self, events: EventBus, player: PlayerProfile) -> PlayerRosterService:
        repo = PlayerRepository()
        repo.create(player)
        return PlayerRosterService(repo, events=events)

    def test_market_value_increase(self, player: PlayerProfile) -> None:
        """A higher value is flagged as a rise; the id is stable per player."""
        service = NotificationService(LocalNotificationClient(), delay_seconds=1.0)

        notification = service.build_market_value_alert(
            _market_event(player, "12M €", "15M €")
        )

        assert notification.id == f"market-value-{player.id}"
        assert notification.title == "📈 Market value updated"
        assert notification.body == "Lucas Silva: 12M € → 15M €"
        assert notification.category is NotificationCategory.MARKET_UPDATE
        assert notification.delay_seconds == 1.0

    def test_market_value_decrease(self, player: PlayerProfile) -> None:
        service = NotificationService(LocalNotificationClient())

        notification = service.build_market_value_alert(
            _market_event(player, "12M €", "800K €")
        )

        assert notification.title == "📉 Market value updated"

    @pytest.mark.asyncio
    async def test_update_player_schedules_market_alert(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        roster: PlayerRosterService,
        player: PlayerProfile,
    ) -> None:
        """Editing the market value through the roster raises one alert."""
        roster.update_player(player.id, UpdatePlayerRequest(market_value="15M €"))
        await asyncio.sleep(0)

        mock_client.schedule.assert_awaited_once()
        notification = mock_client.schedule.call_args[0][0]
        assert notification.category is NotificationCategory.MARKET_UPDATE
        assert notification.body == "Lucas Silva: 12M € → 15M €"

    @pytest.mark.asyncio
    async def test_update_without_value_change_is_silent(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        roster: PlayerRosterService,
        player: PlayerProfile,
    ) -> None:
        roster.update_player(player.id, UpdatePlayerRequest(club="OGC Nice"))
        await asyncio.sleep(0)

        mock_client.schedule.assert_not_called()

    @pytest.mark.asyncio
    async def test_detach_stops_market_alerts(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        events: EventBus,
        roster: PlayerRosterService,
        player: PlayerProfile,
    ) -> None:
        service.detach(events)

        roster.update_player(player.id, UpdatePlayerRequest(market_value="15M €"))
        await asyncio.sleep(0)

        mock_client.schedule.assert_not_called()

    def test_contract_reminders_all_thresholds(self, player: PlayerProfile) -> None:
        """Each reminder fires its threshold's number of days before expiry."""
        service = NotificationService(LocalNotificationClient())

        reminders = service.build_contract_reminders(player, 40)

        assert [r.id for r in reminders] == [
            f"contract-{player.id}-{days}" for days in (30, 14, 7, 1)
        ]
        assert [r.delay_seconds for r in reminders] == [
            days * SECONDS_PER_DAY for days in (10, 26, 33, 39)
        ]
        assert reminders[0].body == "Lucas Silva's contract expires in 30 day(s)"
        assert reminders[-1].title == "🔥 URGENT: contract expires tomorrow!"
        assert all(
            r.category is NotificationCategory.CONTRACT_REMINDER for r in reminders
        )

    def test_contract_reminders_skip_passed_thresholds(
        self, player: PlayerProfile
    ) -> None:
        service = NotificationService(LocalNotificationClient())

        assert [r.id for r in service.build_contract_reminders(player, 10)] == [
            f"contract-{player.id}-7",
            f"contract-{player.id}-1",
        ]
        assert service.build_contract_reminders(player, 1) == []

    @pytest.mark.asyncio
    async def test_schedule_contract_reminders(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        player: PlayerProfile,
    ) -> None:
        scheduled = await service.schedule_contract_reminders(player, 20)

        assert scheduled == [f"contract-{player.id}-{days}" for days in (14, 7, 1)]
        assert mock_client.schedule.await_count == 3

    @pytest.mark.asyncio
    async def test_schedule_performance_alert(
        self,
        service: NotificationService,
        mock_client: MagicMock,
        player: PlayerProfile,
    ) -> None:
        notification_id = await service.schedule_performance_alert(
            player, "Hat-trick against Lyon"
        )

        assert notification_id.startswith("performance-")
        notification = mock_client.schedule.call_args[0][0]
        assert notification.title == "⚽ Outstanding performance!"
        assert notification.body == "Lucas Silva: Hat-trick against Lyon"
        assert notification.category is NotificationCategory.PERFORMANCE


def _event(player: PlayerProfile, text: str, sender: Role) -> MessageSent:
    return MessageSent(
        chat_id=player.id,
        player_name=player.name,
        message=Message(text=text, sender=sender),
    )


def _market_event(player: PlayerProfile, old: str, new: str) -> MarketValueChanged:
    return MarketValueChanged(
        player_id=player.id, player_name=player.name, old_value=old, new_value=new
    )
