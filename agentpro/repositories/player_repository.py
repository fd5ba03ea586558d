from typing import Dict, List, Optional
from uuid import UUID

from agentpro.models.domain import PlayerProfile, PlayerStats
from agentpro.repositories.base_repository import BaseRepository


class PlayerRepository(BaseRepository[PlayerProfile]):
    """Repository for the agent's player roster and season statistics."""

    def __init__(self) -> None:
        super().__init__()
        self._stats: Dict[UUID, List[PlayerStats]] = {}

    def get_by_email(self, email: str) -> Optional[PlayerProfile]:
        """Get a roster player by email (case-insensitive)."""
        wanted = email.strip().lower()
        for player in self.get_all():
            if player.email.lower() == wanted:
                return player
        return None

    def delete(self, id: UUID) -> bool:
        """Delete a player together with their season statistics."""
        self._stats.pop(id, None)
        return super().delete(id)

    def add_stats(self, stats: PlayerStats) -> PlayerStats:
        self._stats.setdefault(stats.player_id, []).append(stats)
        return stats

    def get_stats(self, player_id: UUID) -> List[PlayerStats]:
        """Get every recorded season for a player, oldest first."""
        return list(self._stats.get(player_id, []))
