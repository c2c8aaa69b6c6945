#!/usr/bin/env python3
"""
Team Roster Database Module

This module is the single entry point to the roster store. It keeps the
players, teams and training records of a club in one JSON document and
persists every change before returning to the caller.

Create one RosterDatabase at startup and pass it to whatever needs it.
"""

import logging
from typing import Dict, Any, Iterable, List, Mapping, Optional

from database.database_manager import DatabaseManager
from database.player_manager import PlayerManager
from database.team_manager import TeamManager
from database.training_manager import TrainingManager
from models import Player, Team, TeamWithPlayers, Training

logger = logging.getLogger(__name__)


class RosterDatabase:
    """JSON-backed store for players, teams and training sessions."""

    def __init__(self, data_file: Optional[str] = None, config_file: Optional[str] = "config.yaml"):
        self.db_manager = DatabaseManager(data_file, config_file)
        self.player_manager = PlayerManager(self.db_manager)
        self.team_manager = TeamManager(self.db_manager, self.player_manager)
        self.training_manager = TrainingManager(self.db_manager)

    @property
    def data_file(self) -> str:
        return self.db_manager.data_file

    @property
    def config(self) -> Dict[str, Any]:
        return self.db_manager.config

    def reload(self) -> None:
        """Discard in-memory state and read the data file again."""
        logger.debug(f"Reloading roster data from {self.data_file}")
        self.db_manager.init_database()

    def get_database_stats(self) -> Dict[str, Any]:
        return self.db_manager.get_database_stats()

    # Players

    def add_player(self, name: str, points: int = 0, team_id: Optional[int] = None) -> Player:
        return self.player_manager.add_player(name, points, team_id)

    def get_all_players(self) -> List[Player]:
        return self.player_manager.get_all_players()

    def get_player_by_id(self, player_id: int) -> Optional[Player]:
        return self.player_manager.get_player_by_id(player_id)

    def get_players_by_team(self, team_id: int) -> List[Player]:
        return self.player_manager.get_players_by_team(team_id)

    def get_players_without_team(self) -> List[Player]:
        return self.player_manager.get_players_without_team()

    def get_players_sorted_by_name(self, team_id: Optional[int] = None) -> List[Player]:
        return self.player_manager.get_players_sorted_by_name(team_id)

    def update_player_points(self, player_id: int, new_points: int) -> None:
        self.player_manager.update_player_points(player_id, new_points)

    def update_player_stats(self, player_id: int, new_points: Optional[int] = None,
                            new_trainings_attended: Optional[int] = None) -> None:
        self.player_manager.update_player_stats(player_id, new_points, new_trainings_attended)

    def update_player(self, player_id: int, **changes) -> Optional[Player]:
        """Edit a player record; see PlayerManager.update_player for the accepted fields."""
        return self.player_manager.update_player(player_id, **changes)

    def assign_player_to_team(self, player_id: int, team_id: Optional[int] = None) -> None:
        self.player_manager.assign_player_to_team(player_id, team_id)

    def increment_trainings_attended(self, player_id: int) -> None:
        self.player_manager.increment_trainings_attended(player_id)

    def delete_player(self, player_id: int) -> None:
        self.player_manager.delete_player(player_id)

    # Teams

    def add_team(self, name: str) -> Team:
        return self.team_manager.add_team(name)

    def get_all_teams(self) -> List[Team]:
        return self.team_manager.get_all_teams()

    def get_team_by_id(self, team_id: int) -> Optional[Team]:
        return self.team_manager.get_team_by_id(team_id)

    def get_team_with_players(self, team_id: int) -> Optional[TeamWithPlayers]:
        return self.team_manager.get_team_with_players(team_id)

    def delete_team(self, team_id: int) -> None:
        self.team_manager.delete_team(team_id)

    # Trainings

    def record_training_session(self, team_id: int, attended_player_ids: Iterable[int],
                                points_awarded: Mapping[int, int], date: Optional[str] = None,
                                notes: str = "") -> Training:
        return self.training_manager.record_training_session(
            team_id, attended_player_ids, points_awarded, date, notes
        )

    def delete_training(self, training_id: int) -> None:
        self.training_manager.delete_training(training_id)

    def get_all_trainings(self) -> List[Training]:
        return self.training_manager.get_all_trainings()

    def get_trainings_by_team(self, team_id: int) -> List[Training]:
        return self.training_manager.get_trainings_by_team(team_id)

    def get_training_by_id(self, training_id: int) -> Optional[Training]:
        return self.training_manager.get_training_by_id(training_id)

    def get_training_summary(self, training_id: int) -> Optional[Dict[str, Any]]:
        return self.training_manager.get_training_summary(training_id)
