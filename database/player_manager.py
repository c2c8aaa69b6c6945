"""
Player management for the team roster system.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from models import Player
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

# Marks "argument not given" where None is a meaningful value (no team)
_UNCHANGED = object()


class PlayerManager:
    """Manages player-related roster operations."""

    def __init__(self, database_manager):
        self.db_manager = database_manager

    @property
    def _players(self) -> List[Player]:
        return self.db_manager.snapshot.players

    def add_player(self, name: str, points: int = 0, team_id: Optional[int] = None) -> Player:
        """Create a player with the next free id and persist it."""
        if team_id is not None and not self._team_exists(team_id):
            # Team references are soft; they are not enforced
            logger.warning(f"Adding player {name} to unknown team {team_id}")

        player = Player(
            id=self.db_manager.next_id('players'),
            name=name,
            points=points,
            team_id=team_id
        )
        self._players.append(player)
        self.db_manager.commit()
        logger.info(f"Added new player {player.name} (id {player.id})")
        return player

    def get_all_players(self) -> List[Player]:
        """Get all players in insertion order."""
        return list(self._players)

    def get_player_by_id(self, player_id: int) -> Optional[Player]:
        """Get a player by id, or None if there is no such player."""
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    def get_players_by_team(self, team_id: int) -> List[Player]:
        """Get all players assigned to a team."""
        return [player for player in self._players if player.team_id == team_id]

    def get_players_without_team(self) -> List[Player]:
        """Get all players that are not assigned to any team."""
        return [player for player in self._players if not player.has_team]

    def get_players_sorted_by_name(self, team_id: Optional[int] = None) -> List[Player]:
        """Get players ordered by name, case-insensitively; optionally only one team."""
        players = self.get_players_by_team(team_id) if team_id is not None else self.get_all_players()
        return sorted(players, key=lambda p: TextUtils.sort_key(p.name))

    def update_player_points(self, player_id: int, new_points: int) -> None:
        """Replace a player's points. Unknown ids are ignored."""
        self.update_player_stats(player_id, new_points=new_points)

    def update_player_stats(self, player_id: int, new_points: Optional[int] = None,
                            new_trainings_attended: Optional[int] = None) -> None:
        """Replace points and/or trainings attended; omitted values are kept."""
        changes = {}
        if new_points is not None:
            changes['points'] = new_points
        if new_trainings_attended is not None:
            changes['trainings_attended'] = new_trainings_attended
        self._replace_player(player_id, **changes)

    def update_player(self, player_id: int, name: Optional[str] = None, points: Optional[int] = None,
                      team_id=_UNCHANGED, trainings_attended: Optional[int] = None) -> Optional[Player]:
        """
        Edit a full player record.
        Passing team_id=None removes the player from its team.
        Returns the updated player, or None if the id is unknown.
        """
        changes = {}
        if name is not None:
            changes['name'] = name
        if points is not None:
            changes['points'] = points
        if team_id is not _UNCHANGED:
            changes['team_id'] = team_id
        if trainings_attended is not None:
            changes['trainings_attended'] = trainings_attended
        return self._replace_player(player_id, **changes)

    def assign_player_to_team(self, player_id: int, team_id: Optional[int] = None) -> None:
        """Set or clear a player's team. The team is not required to exist."""
        if team_id is not None and not self._team_exists(team_id):
            logger.warning(f"Assigning player {player_id} to unknown team {team_id}")
        self._replace_player(player_id, team_id=team_id)

    def increment_trainings_attended(self, player_id: int) -> None:
        """Count one more attended training for a player."""
        player = self.get_player_by_id(player_id)
        if player is None:
            logger.debug(f"Player {player_id} not found, nothing to increment")
            return
        self._replace_player(player_id, trainings_attended=player.trainings_attended + 1)

    def delete_player(self, player_id: int) -> None:
        """
        Delete a player permanently.
        Training records keep referring to the deleted id.
        """
        remaining = [player for player in self._players if player.id != player_id]
        if len(remaining) == len(self._players):
            logger.debug(f"Player {player_id} not found, nothing to delete")
            return
        self.db_manager.snapshot.players = remaining
        self.db_manager.commit()
        logger.info(f"Deleted player {player_id}")

    def _replace_player(self, player_id: int, **changes) -> Optional[Player]:
        """Swap in an updated copy of a player and persist. Returns None if not found."""
        for index, player in enumerate(self._players):
            if player.id == player_id:
                updated = replace(player, **changes)
                self._players[index] = updated
                self.db_manager.commit()
                logger.debug(f"Updated player {player_id}: {changes}")
                return updated
        logger.debug(f"Player {player_id} not found, nothing to update")
        return None

    def _team_exists(self, team_id: int) -> bool:
        return any(team.id == team_id for team in self.db_manager.snapshot.teams)
