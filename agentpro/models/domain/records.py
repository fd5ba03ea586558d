from typing import Annotated, Literal, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .role import ContractStatus


class AgentRecord(BaseModel):
    """Stored credential record for an agent account."""

    role: Literal["agent"] = "agent"
    id: str
    name: str
    email: str
    agency: str = "Agency"

    model_config = ConfigDict(frozen=True)


class PlayerRecord(BaseModel):
    """Stored credential record for a player account."""

    role: Literal["player"] = "player"
    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    position: str = "Position"
    age: int = Field(default=20, ge=0)
    club: str = "Free agent"
    contract_status: ContractStatus = ContractStatus.FREE
    market_value: str = "0 €"
    avatar: str = "👤"
    invite_code: str = ""

    model_config = ConfigDict(frozen=True)


UserRecord = Annotated[Union[AgentRecord, PlayerRecord], Field(discriminator="role")]

user_record_adapter: TypeAdapter[UserRecord] = TypeAdapter(UserRecord)
