import asyncio
import logging
from typing import Dict, Optional
from uuid import UUID

from agentpro.models.domain import Role
from agentpro.services.messaging_store import MessagingStore

logger = logging.getLogger(__name__)


class ReadReceiptScheduler:
    """Marks a chat read after it has stayed open for ``delay`` seconds.

    One pending task per chat id. Scheduling again replaces the pending task;
    ``cancel`` guarantees the chat is not marked by that task.
    """

    def __init__(self, store: MessagingStore, delay: float = 0.4):
        self.store = store
        self.delay = delay
        self._tasks: Dict[UUID, "asyncio.Task[None]"] = {}

    def schedule(
        self, chat_id: UUID, role: Role, delay: Optional[float] = None
    ) -> "asyncio.Task[None]":
        """Start the delayed mark-as-read for a chat view that just appeared."""
        self.cancel(chat_id)
        wait = self.delay if delay is None else delay
        task = asyncio.get_running_loop().create_task(
            self._mark_after(chat_id, role, wait)
        )
        self._tasks[chat_id] = task
        task.add_done_callback(lambda t: self._forget(chat_id, t))
        return task

    def cancel(self, chat_id: UUID) -> bool:
        """Cancel the pending mark-as-read for a chat view that went away."""
        task = self._tasks.pop(chat_id, None)
        if task is None or task.done():
            return False
        task.cancel()
        logger.debug(f"Cancelled read receipt for chat {chat_id}")
        return True

    def is_pending(self, chat_id: UUID) -> bool:
        task = self._tasks.get(chat_id)
        return task is not None and not task.done()

    async def cancel_all(self) -> None:
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _mark_after(self, chat_id: UUID, role: Role, delay: float) -> None:
        await asyncio.sleep(delay)
        self.store.mark_chat_as_read(chat_id, role)

    def _forget(self, chat_id: UUID, task: "asyncio.Task[None]") -> None:
        if self._tasks.get(chat_id) is task:
            del self._tasks[chat_id]
