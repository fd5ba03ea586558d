from typing import Any, Generator
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agentpro.config import Settings
from agentpro.events import EventBus
from agentpro.main import create_app
from agentpro.models.domain import ContractStatus, PlayerProfile
from agentpro.repositories.chat_repository import ChatRepository
from agentpro.repositories.credential_repository import CredentialRepository
from agentpro.services.messaging_store import MessagingStore
from agentpro.services.session_manager import SessionManager


@pytest.fixture
def settings() -> Settings:
    """Settings with the artificial delays turned off."""
    return Settings(
        login_delay_seconds=0,
        register_delay_seconds=0,
        read_receipt_delay_seconds=0.05,
        notification_delay_seconds=0,
    )


@pytest.fixture
def credentials() -> CredentialRepository:
    return CredentialRepository()


@pytest.fixture
def session_manager(credentials: CredentialRepository) -> SessionManager:
    """SessionManager with no simulated latency."""
    return SessionManager(credentials, login_delay=0, register_delay=0)


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def store(events: EventBus) -> MessagingStore:
    """Empty MessagingStore."""
    return MessagingStore(ChatRepository(), events)


@pytest.fixture
def player() -> PlayerProfile:
    """A roster player."""
    return PlayerProfile(
        id=uuid4(),
        name="Lucas Silva",
        email="lucas.silva@email.com",
        position="Attacking midfielder",
        age=24,
        club="AS Monaco",
        contract_status=ContractStatus.UNDER_CONTRACT,
        market_value="12M €",
        invite_code="LSV24",
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, Any, None]:
    """Create a test client for a freshly seeded app."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
