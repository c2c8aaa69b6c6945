"""
Team data models for the team roster system.
"""

from dataclasses import dataclass, field
from typing import List

from .player import Player


@dataclass(frozen=True)
class Team:
    """A team players can be assigned to."""
    id: int
    name: str


@dataclass(frozen=True)
class TeamWithPlayers:
    """Read-only view of a team together with its current players.

    Built on demand from the store and never persisted, so it always
    reflects the snapshot it was created from.
    """
    team: Team
    players: List[Player] = field(default_factory=list)

    @property
    def total_points(self) -> int:
        return sum(player.points for player in self.players)

    @property
    def player_count(self) -> int:
        return len(self.players)
