import logging
import random
import re
import string
from typing import Dict, List, Optional
from uuid import UUID

from agentpro.cache import TTLCache
from agentpro.errors import NotFoundError
from agentpro.events import EventBus, MarketValueChanged
from agentpro.models.api.players import (
    CreatePlayerRequest,
    RosterSummaryResponse,
    UpdatePlayerRequest,
)
from agentpro.models.domain import (
    ContractStatus,
    Document,
    DocumentCategory,
    PlayerProfile,
    PlayerStats,
)
from agentpro.repositories.player_repository import PlayerRepository

logger = logging.getLogger(__name__)

_MARKET_VALUE = re.compile(r"(\d+(?:[.,]\d+)?)\s*([kKmM])?")
_ROSTER_KEY = "roster"


def parse_market_value(display: str) -> float:
    """Market value in millions from a display string like '12M €' or '800K €'."""
    match = _MARKET_VALUE.search(display or "")
    if not match:
        return 0.0
    amount = float(match.group(1).replace(",", "."))
    unit = (match.group(2) or "").upper()
    if unit == "K":
        return amount / 1000
    if unit == "M":
        return amount
    return amount / 1_000_000


class PlayerRosterService:
    """Service for browsing and managing the agent's roster."""

    def __init__(
        self,
        player_repo: PlayerRepository,
        cache_ttl: float = 300.0,
        events: Optional[EventBus] = None,
    ):
        self.player_repo = player_repo
        self.cache = TTLCache(ttl=cache_ttl)
        self.events = events or EventBus()

    def list_players(self, force_refresh: bool = False) -> List[PlayerProfile]:
        """
        List roster players:

        1. Serve from cache while it is fresh
        2. Otherwise reload from the repository and refill the cache
        """
        if not force_refresh and _ROSTER_KEY in self.cache:
            return list(self.cache[_ROSTER_KEY])

        players = self.player_repo.get_all()
        self.cache[_ROSTER_KEY] = players
        return list(players)

    def get_player(self, player_id: UUID) -> PlayerProfile:
        player = self.player_repo.get_by_id(player_id)
        if not player:
            raise NotFoundError(f"Player with ID {player_id} not found")
        return player

    def add_player(self, request: CreatePlayerRequest) -> PlayerProfile:
        self._check_email_free(request.email)
        player = PlayerProfile(
            name=request.name,
            email=request.email,
            position=request.position,
            age=request.age,
            club=request.club,
            contract_status=request.contract_status,
            market_value=request.market_value,
            avatar=request.avatar,
            invite_code=self._invite_code(request.name, request.age),
        )
        self.player_repo.create(player)
        self.cache.pop(_ROSTER_KEY)
        logger.info(f"Added {player.name} to the roster")
        return player

    def update_player(
        self, player_id: UUID, request: UpdatePlayerRequest
    ) -> PlayerProfile:
        """
        Edit a roster player in place:

        1. Apply the fields set on the request, keeping id and position in the roster
        2. Drop the cached roster
        3. Publish MarketValueChanged when the displayed value changed
        """
        current = self.get_player(player_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in changes and changes["email"].lower() != current.email.lower():
            self._check_email_free(changes["email"])

        updated = current.model_copy(update=changes)
        self.player_repo.update(updated)
        self.cache.pop(_ROSTER_KEY)
        logger.info(f"Updated {updated.name}: {sorted(changes)}")

        if updated.market_value != current.market_value:
            self.events.publish(
                MarketValueChanged(
                    player_id=updated.id,
                    player_name=updated.name,
                    old_value=current.market_value,
                    new_value=updated.market_value,
                )
            )
        return updated

    def delete_player(self, player_id: UUID) -> None:
        """Remove a player and their statistics from the roster."""
        player = self.get_player(player_id)
        self.player_repo.delete(player_id)
        self.cache.pop(_ROSTER_KEY)
        logger.info(f"Removed {player.name} from the roster")

    def search(self, query: str) -> List[PlayerProfile]:
        """Case-insensitive match on name, club or position."""
        players = self.list_players()
        needle = (query or "").strip().lower()
        if not needle:
            return players
        return [
            p
            for p in players
            if needle in p.name.lower()
            or needle in p.club.lower()
            or needle in p.position.lower()
        ]

    def filter_by_status(self, status: ContractStatus) -> List[PlayerProfile]:
        return [p for p in self.list_players() if p.contract_status == status]

    def summary(self) -> RosterSummaryResponse:
        players = self.list_players()
        counts: Dict[ContractStatus, int] = {status: 0 for status in ContractStatus}
        for player in players:
            counts[player.contract_status] += 1

        average_age = sum(p.age for p in players) / len(players) if players else 0.0
        return RosterSummaryResponse(
            player_count=len(players),
            total_market_value=sum(parse_market_value(p.market_value) for p in players),
            average_age=average_age,
            contract_status_counts=counts,
        )

    def get_documents(
        self, player_id: UUID, category: Optional[DocumentCategory] = None
    ) -> List[Document]:
        documents = self.get_player(player_id).documents
        if category is None:
            return list(documents)
        return [d for d in documents if d.category == category]

    def get_stats(self, player_id: UUID) -> List[PlayerStats]:
        self.get_player(player_id)
        return self.player_repo.get_stats(player_id)

    def _check_email_free(self, email: str) -> None:
        if self.player_repo.get_by_email(email) is not None:
            raise ValueError(f"A player with email {email} is already on the roster")

    @staticmethod
    def _invite_code(name: str, age: int) -> str:
        initials = "".join(part[0] for part in name.split() if part)[:3].upper()
        suffix = "".join(random.choices(string.digits, k=2))
        return f"{initials or 'PLR'}{age:02d}{suffix}"
