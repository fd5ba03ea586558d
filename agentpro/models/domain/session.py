from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .profiles import AgentProfile, PlayerProfile
from .role import Role


class Session(BaseModel):
    """Authenticated identity and role for the current usage period.

    Exactly one of ``agent``/``player`` is populated, matching ``role``.
    """

    role: Role
    agent: Optional[AgentProfile] = None
    player: Optional[PlayerProfile] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_identity_matches_role(self) -> "Session":
        if self.role is Role.AGENT:
            if self.agent is None or self.player is not None:
                raise ValueError("An agent session must carry only an agent profile")
        elif self.player is None or self.agent is not None:
            raise ValueError("A player session must carry only a player profile")
        return self

    @property
    def display_name(self) -> str:
        profile = self.agent if self.role is Role.AGENT else self.player
        return profile.name if profile else ""
