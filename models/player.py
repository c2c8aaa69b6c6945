"""
Player data model for the team roster system.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    """A club member with accumulated points and training attendance."""
    id: int
    name: str
    points: int = 0
    team_id: Optional[int] = None
    trainings_attended: int = 0

    @property
    def has_team(self) -> bool:
        return self.team_id is not None
