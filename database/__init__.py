"""
Database package for the team roster system.
"""

from .json_codec import JsonCodec
from .database_manager import DatabaseManager
from .player_manager import PlayerManager
from .team_manager import TeamManager
from .training_manager import TrainingManager

__all__ = ['JsonCodec', 'DatabaseManager', 'PlayerManager', 'TeamManager', 'TrainingManager']
