from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from agentpro.models.domain import ContractStatus


class CreatePlayerRequest(BaseModel):
    """Request model for adding a player to the roster."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    club: str = "Free agent"
    contract_status: ContractStatus = ContractStatus.FREE
    market_value: str = "0 €"
    avatar: str = "👤"


class UpdatePlayerRequest(BaseModel):
    """Request model for editing a roster player. Omitted fields are kept."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=0)
    club: Optional[str] = None
    contract_status: Optional[ContractStatus] = None
    market_value: Optional[str] = None
    avatar: Optional[str] = None


class ContractReminderRequest(BaseModel):
    """Request model for scheduling contract renewal reminders."""

    days_until_expiry: int = Field(..., ge=0)


class PerformanceAlertRequest(BaseModel):
    """Request model for announcing a player's achievement."""

    achievement: str = Field(..., min_length=1)


class ScheduledNotificationsResponse(BaseModel):
    """Response model listing the identifiers of scheduled notifications."""

    notification_ids: List[str]


class RosterSummaryResponse(BaseModel):
    """Response model for roster statistics."""

    player_count: int
    total_market_value: float  # Millions
    average_age: float
    contract_status_counts: Dict[ContractStatus, int]
