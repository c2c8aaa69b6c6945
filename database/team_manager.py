"""
Team management for the team roster system.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from models import Team, TeamWithPlayers

logger = logging.getLogger(__name__)


class TeamManager:
    """Manages team-related roster operations."""

    def __init__(self, database_manager, player_manager):
        self.db_manager = database_manager
        self.player_manager = player_manager

    def add_team(self, name: str) -> Team:
        """Create a team with the next free id and persist it."""
        team = Team(id=self.db_manager.next_id('teams'), name=name)
        self.db_manager.snapshot.teams.append(team)
        self.db_manager.commit()
        logger.info(f"Added new team {team.name} (id {team.id})")
        return team

    def get_all_teams(self) -> List[Team]:
        """Get all teams in insertion order."""
        return list(self.db_manager.snapshot.teams)

    def get_team_by_id(self, team_id: int) -> Optional[Team]:
        """Get a team by id, or None if there is no such team."""
        for team in self.db_manager.snapshot.teams:
            if team.id == team_id:
                return team
        return None

    def get_team_with_players(self, team_id: int) -> Optional[TeamWithPlayers]:
        """Compose a team with its current players; None if the team does not exist."""
        team = self.get_team_by_id(team_id)
        if team is None:
            return None
        return TeamWithPlayers(team=team, players=self.player_manager.get_players_by_team(team_id))

    def delete_team(self, team_id: int) -> None:
        """
        Delete a team and detach its players.
        Players are kept without a team; trainings keep the old team id.
        """
        snapshot = self.db_manager.snapshot
        remaining = [team for team in snapshot.teams if team.id != team_id]
        if len(remaining) == len(snapshot.teams):
            logger.debug(f"Team {team_id} not found, nothing to delete")
            return

        detached = 0
        for index, player in enumerate(snapshot.players):
            if player.team_id == team_id:
                snapshot.players[index] = replace(player, team_id=None)
                detached += 1

        snapshot.teams = remaining
        self.db_manager.commit()
        logger.info(f"Deleted team {team_id} and detached {detached} players")
