from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .role import ContractStatus, DocumentCategory


class Document(BaseModel):
    """A file stored against a player (contract, medical record, ...)."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: DocumentCategory
    upload_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    size: str  # Display string, e.g. '2.4 MB'
    url: str

    model_config = ConfigDict(frozen=True)


class AgentProfile(BaseModel):
    """Signed-in agent identity."""

    id: str
    name: str
    email: str
    agency: str

    model_config = ConfigDict(frozen=True)


class PlayerProfile(BaseModel):
    """A player, either signed in or on an agent's roster."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    position: str
    age: int = Field(..., ge=0)
    club: str
    contract_status: ContractStatus
    market_value: str  # Display string, e.g. '12M €'
    avatar: str = "👤"
    invite_code: str = ""
    documents: List[Document] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class PlayerStats(BaseModel):
    """Season performance figures for one player."""

    id: UUID = Field(default_factory=uuid4)
    player_id: UUID
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    minutes_played: int = Field(default=0, ge=0)
    matches_played: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0)
    season: str
