"""In-process event bus used to decouple the stores from side effects."""

import logging
from typing import Callable, Dict, List, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from agentpro.models.domain import Message

logger = logging.getLogger(__name__)

EventType = TypeVar("EventType", bound=BaseModel)
Handler = Callable[[EventType], None]


class MessageSent(BaseModel):
    """Emitted after a message has been appended to a chat."""

    chat_id: UUID
    player_name: str
    message: Message

    model_config = ConfigDict(frozen=True)


class MarketValueChanged(BaseModel):
    """Emitted when a roster player's displayed market value is edited."""

    player_id: UUID
    player_name: str
    old_value: str
    new_value: str

    model_config = ConfigDict(frozen=True)


class EventBus:
    """Synchronous publish/subscribe keyed by event class.

    A handler that raises is logged and skipped; remaining handlers still run
    and the publisher never sees the error.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[BaseModel], List[Callable]] = {}

    def subscribe(self, event_type: Type[EventType], handler: Handler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Type[EventType], handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: BaseModel) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Handler {handler!r} failed for {type(event).__name__}"
                )

    def clear(self) -> None:
        self._handlers.clear()
