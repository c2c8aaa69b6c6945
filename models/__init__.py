"""
Models package for the team roster system.

This package contains all data models and dataclasses used throughout the system.
"""

from .player import Player
from .team import Team, TeamWithPlayers
from .training import Training
from .snapshot import RosterSnapshot, ENTITY_KINDS

__all__ = ['Player', 'Team', 'TeamWithPlayers', 'Training', 'RosterSnapshot', 'ENTITY_KINDS']
