import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from agentpro.errors import AuthError
from agentpro.models.domain import UserRecord, user_record_adapter

logger = logging.getLogger(__name__)


class CredentialRepository:
    """Mock account backend keyed by email.

    Records are kept in their raw wire shape and validated into
    ``AgentRecord``/``PlayerRecord`` on the way out, so an unreadable record
    surfaces as an ``AuthError`` at lookup time.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}

    async def lookup(self, email: str) -> Optional[UserRecord]:
        """Return the record for ``email`` or None when no account exists."""
        raw = self._records.get(self._normalize(email))
        if raw is None:
            return None
        return self._parse(raw)

    async def save(self, record: UserRecord) -> UserRecord:
        """Create or overwrite the record for the record's email."""
        self._records[self._normalize(record.email)] = record.model_dump(mode="json")
        return record

    def put_raw(self, email: str, data: Dict[str, Any]) -> None:
        """Store an unvalidated record as the backend would hold it."""
        self._records[self._normalize(email)] = dict(data)

    def __contains__(self, email: str) -> bool:
        return self._normalize(email) in self._records

    def _parse(self, raw: Dict[str, Any]) -> UserRecord:
        try:
            return user_record_adapter.validate_python(raw)
        except ValidationError as e:
            logger.error(f"Unreadable account record for {raw.get('email')!r}: {e}")
            raise AuthError("Unable to read account data.") from e

    @staticmethod
    def _normalize(email: str) -> str:
        return email.strip().lower()
