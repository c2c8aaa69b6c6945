"""
Snapshot of the complete persisted roster state.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .player import Player
from .team import Team
from .training import Training

ENTITY_KINDS = ('players', 'teams', 'trainings')


@dataclass
class RosterSnapshot:
    """All players, teams and trainings plus the id high-water marks."""
    players: List[Player] = field(default_factory=list)
    teams: List[Team] = field(default_factory=list)
    trainings: List[Training] = field(default_factory=list)
    next_ids: Dict[str, int] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.players or self.teams or self.trainings)
