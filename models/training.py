"""
Training session data model for the team roster system.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping


@dataclass(frozen=True)
class Training:
    """Record of one training session: who attended and who got points.

    Attendance and points are independent. A player may be awarded points
    without attending, and the other way around.
    """
    id: int
    date: str
    team_id: int
    attended_player_ids: FrozenSet[int] = frozenset()
    points_awarded: Mapping[int, int] = field(default_factory=dict)
    notes: str = ""

    def __post_init__(self):
        # Records are immutable once created, including their collections
        object.__setattr__(self, 'attended_player_ids', frozenset(self.attended_player_ids))
        object.__setattr__(self, 'points_awarded', MappingProxyType(dict(self.points_awarded)))

    @property
    def attendee_count(self) -> int:
        return len(self.attended_player_ids)

    @property
    def total_points_awarded(self) -> int:
        return sum(self.points_awarded.values())
