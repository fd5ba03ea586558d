from typing import List
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from agentpro.events import EventBus, MarketValueChanged, MessageSent
from agentpro.models.domain import Message, Role


@pytest.fixture
def event() -> MessageSent:
    return MessageSent(
        chat_id=uuid4(),
        player_name="Lucas Silva",
        message=Message(text="hi", sender=Role.PLAYER),
    )


class TestEventBus:
    """Unit tests for the in-process event bus."""

    def test_publish_reaches_subscribers_in_order(
        self, events: EventBus, event: MessageSent
    ) -> None:
        calls: List[str] = []
        events.subscribe(MessageSent, lambda e: calls.append("first"))
        events.subscribe(MessageSent, lambda e: calls.append("second"))

        events.publish(event)

        assert calls == ["first", "second"]

    def test_failing_handler_is_isolated(
        self, events: EventBus, event: MessageSent
    ) -> None:
        """A raising handler does not stop the others or the publisher."""
        after = MagicMock()
        events.subscribe(MessageSent, MagicMock(side_effect=RuntimeError("boom")))
        events.subscribe(MessageSent, after)

        events.publish(event)

        after.assert_called_once_with(event)

    def test_unsubscribe(self, events: EventBus, event: MessageSent) -> None:
        handler = MagicMock()
        events.subscribe(MessageSent, handler)
        events.unsubscribe(MessageSent, handler)
        events.unsubscribe(MessageSent, handler)

        events.publish(event)

        handler.assert_not_called()

    def test_clear(self, events: EventBus, event: MessageSent) -> None:
        handler = MagicMock()
        events.subscribe(MessageSent, handler)
        events.clear()

        events.publish(event)

        handler.assert_not_called()

    def test_event_is_immutable(self, event: MessageSent) -> None:
        with pytest.raises(ValueError):
            event.player_name = "Someone else"  # type: ignore[misc]

    def test_handlers_are_keyed_by_event_type(
        self, events: EventBus, event: MessageSent
    ) -> None:
        """A subscriber only receives the event class it subscribed to."""
        handler = MagicMock()
        events.subscribe(MarketValueChanged, handler)

        events.publish(event)
        handler.assert_not_called()

        change = MarketValueChanged(
            player_id=uuid4(),
            player_name="Lucas Silva",
            old_value="12M €",
            new_value="15M €",
        )
        events.publish(change)
        handler.assert_called_once_with(change)
