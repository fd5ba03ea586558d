"""Hand-authored sample records loaded at startup."""

from datetime import datetime, timedelta, timezone
from typing import List
from uuid import UUID

from agentpro.models.domain import (
    AgentRecord,
    Chat,
    ContractStatus,
    Document,
    DocumentCategory,
    Message,
    PlayerProfile,
    PlayerRecord,
    PlayerStats,
    Role,
)
from agentpro.repositories.chat_repository import ChatRepository
from agentpro.repositories.credential_repository import CredentialRepository
from agentpro.repositories.player_repository import PlayerRepository

DEMO_PLAYER_ID = UUID("6f1c2a52-3d0e-4c55-9a0b-6a7c1f0e2b11")
LUCAS_SILVA_ID = UUID("0b8f5d3e-7a21-4e5f-8c64-2d9a1b7e4c01")
KARIM_BEN_ALI_ID = UUID("9e2c7a14-5b36-4f08-a1d2-3c4b5e6f7a02")


def sample_documents(now: datetime) -> List[Document]:
    return [
        Document(
            name="Main contract 2024",
            category=DocumentCategory.CONTRACT,
            upload_date=now - timedelta(days=30),
            size="2.4 MB",
            url="contract_2024.pdf",
        )
    ]


def sample_players(now: datetime) -> List[PlayerProfile]:
    return [
        PlayerProfile(
            id=LUCAS_SILVA_ID,
            name="Lucas Silva",
            email="lucas.silva@email.com",
            position="Attacking midfielder",
            age=24,
            club="AS Monaco",
            contract_status=ContractStatus.UNDER_CONTRACT,
            market_value="12M €",
            invite_code="LSV24",
            documents=sample_documents(now),
        ),
        PlayerProfile(
            id=KARIM_BEN_ALI_ID,
            name="Karim Ben Ali",
            email="karim.benali@email.com",
            position="Striker",
            age=22,
            club="Free agent",
            contract_status=ContractStatus.FREE,
            market_value="8M €",
            invite_code="KBA22",
            documents=sample_documents(now),
        ),
    ]


def seed_credentials(credentials: CredentialRepository) -> None:
    credentials.put_raw(
        "agent@test.com",
        AgentRecord(
            id="agent123",
            name="Agent Test",
            email="agent@test.com",
            agency="Test Agency",
        ).model_dump(mode="json"),
    )
    credentials.put_raw(
        "player@test.com",
        PlayerRecord(
            id=DEMO_PLAYER_ID,
            name="Test Player",
            email="player@test.com",
            position="Striker",
            age=25,
            club="Test FC",
            contract_status=ContractStatus.UNDER_CONTRACT,
            market_value="5M €",
            invite_code="TEST01",
        ).model_dump(mode="json"),
    )


def seed_players(player_repo: PlayerRepository, now: datetime) -> None:
    for player in sample_players(now):
        player_repo.create(player)

    player_repo.add_stats(
        PlayerStats(
            player_id=LUCAS_SILVA_ID,
            goals=9,
            assists=11,
            minutes_played=2430,
            matches_played=30,
            average_rating=7.4,
            season="2024-2025",
        )
    )
    player_repo.add_stats(
        PlayerStats(
            player_id=KARIM_BEN_ALI_ID,
            goals=14,
            assists=4,
            minutes_played=1980,
            matches_played=26,
            average_rating=7.1,
            season="2024-2025",
        )
    )


def seed_chats(chat_repo: ChatRepository, now: datetime) -> None:
    sent_at = now - timedelta(hours=1)
    message = Message(
        text="Hello, I received the contract offer.",
        sender=Role.PLAYER,
        timestamp=sent_at,
    )
    chat_repo.create(
        Chat(
            player_id=LUCAS_SILVA_ID,
            player_name="Lucas Silva",
            player_avatar="👤",
            messages=[message],
            last_message=message.text,
            last_message_time=sent_at,
            unread_for_agent=1,
            unread_for_player=0,
        )
    )


def load_sample_data(
    credentials: CredentialRepository,
    player_repo: PlayerRepository,
    chat_repo: ChatRepository,
) -> None:
    now = datetime.now(timezone.utc)
    seed_credentials(credentials)
    seed_players(player_repo, now)
    seed_chats(chat_repo, now)
