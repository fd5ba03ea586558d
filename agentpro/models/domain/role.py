from enum import Enum


class Role(str, Enum):
    """Which side of the product is acting."""

    AGENT = "agent"
    PLAYER = "player"

    @property
    def display_name(self) -> str:
        return "Agent" if self == Role.AGENT else "Player"

    @property
    def other(self) -> "Role":
        return Role.PLAYER if self == Role.AGENT else Role.AGENT


class ContractStatus(str, Enum):
    UNDER_CONTRACT = "under_contract"
    NEGOTIATING = "negotiating"
    FREE = "free"


class DocumentCategory(str, Enum):
    CONTRACT = "contract"
    MEDICAL = "medical"
    IDENTITY = "identity"
    PERFORMANCE = "performance"
