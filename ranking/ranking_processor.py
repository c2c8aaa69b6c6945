"""
Ranking and statistics processor for the team roster system.
"""

import logging
from typing import Dict, List, Optional, Any, Callable

from models import Player

logger = logging.getLogger(__name__)

LEADERBOARD_KINDS = ('top_scorers', 'best_attendance', 'win_rate', 'average_points')


class RankingProcessor:
    """Computes leaderboards and derived statistics from the roster store.

    The processor keeps no state of its own. Every call reads the store
    afresh, so results always match the current roster.
    """

    def __init__(self, roster_database):
        self.db = roster_database

    # Team statistics

    def get_team_total_points(self, team_id: int) -> int:
        """Sum of the points of all players in a team."""
        return sum(p.points for p in self.db.get_players_by_team(team_id))

    def get_team_attendance_rate(self, team_id: int) -> float:
        """
        Average attendees per training as a percentage of the team size.
        Returns 0.0 for a team without trainings or without players.
        """
        trainings = self.db.get_trainings_by_team(team_id)
        player_count = len(self.db.get_players_by_team(team_id))
        if not trainings or player_count == 0:
            return 0.0

        average_attendees = sum(t.attendee_count for t in trainings) / len(trainings)
        return average_attendees / player_count * 100

    def get_team_average_points_per_training(self, team_id: int) -> float:
        """Current team points divided by the number of team trainings; 0.0 without trainings."""
        training_count = len(self.db.get_trainings_by_team(team_id))
        if training_count == 0:
            return 0.0
        return self.get_team_total_points(team_id) / training_count

    def get_team_statistics(self, team_id: int) -> Dict[str, Any]:
        """Get the dashboard figures for a team, or an empty dict for an unknown team."""
        team_view = self.db.get_team_with_players(team_id)
        if team_view is None:
            return {}

        trainings = self.db.get_trainings_by_team(team_id)
        top_scorers = self.get_top_scorers(limit=1, team_id=team_id)

        return {
            'team_id': team_id,
            'team_name': team_view.team.name,
            'player_count': team_view.player_count,
            'total_points': team_view.total_points,
            'training_count': len(trainings),
            'last_training_date': trainings[0].date if trainings else None,
            'attendance_rate': round(self.get_team_attendance_rate(team_id), 2),
            'average_points_per_training': round(self.get_team_average_points_per_training(team_id), 2),
            'top_scorer': top_scorers[0].name if top_scorers else None
        }

    # Player statistics

    def get_player_win_rate(self, player_id: int) -> Optional[float]:
        """Points per attended training as a percentage; None without trainings."""
        player = self.db.get_player_by_id(player_id)
        if player is None or player.trainings_attended <= 0:
            return None
        return self._points_per_training(player) * 100

    def get_player_average_points(self, player_id: int) -> Optional[float]:
        """Points per attended training; None without trainings."""
        player = self.db.get_player_by_id(player_id)
        if player is None or player.trainings_attended <= 0:
            return None
        return self._points_per_training(player)

    def get_player_points_rank(self, player_id: int) -> Optional[int]:
        """1-based position of a player in their team ordered by points."""
        return self._team_position(player_id, lambda p: p.points)

    def get_player_attendance_rank(self, player_id: int) -> Optional[int]:
        """1-based position of a player in their team ordered by trainings attended."""
        return self._team_position(player_id, lambda p: p.trainings_attended)

    def get_player_vs_team_average(self, player_id: int) -> Optional[float]:
        """
        Player points minus the mean points of their team.
        Returns None for unknown or teamless players.
        """
        player = self.db.get_player_by_id(player_id)
        if player is None or player.team_id is None:
            return None
        teammates = self.db.get_players_by_team(player.team_id)
        if not teammates:
            return None
        team_average = sum(p.points for p in teammates) / len(teammates)
        return player.points - team_average

    def get_player_statistics(self, player_id: int) -> Dict[str, Any]:
        """Get all per-player figures, or an empty dict for an unknown player."""
        player = self.db.get_player_by_id(player_id)
        if player is None:
            return {}

        team = self.db.get_team_by_id(player.team_id) if player.team_id is not None else None
        average_points = self.get_player_average_points(player_id)
        win_rate = self.get_player_win_rate(player_id)
        vs_team = self.get_player_vs_team_average(player_id)

        return {
            'player_id': player.id,
            'name': player.name,
            'team_name': team.name if team else None,
            'points': player.points,
            'trainings_attended': player.trainings_attended,
            'average_points': round(average_points, 2) if average_points is not None else None,
            'win_rate': round(win_rate, 2) if win_rate is not None else None,
            'points_rank': self.get_player_points_rank(player_id),
            'attendance_rank': self.get_player_attendance_rank(player_id),
            'vs_team_average': round(vs_team, 2) if vs_team is not None else None
        }

    def get_overall_statistics(self) -> Dict[str, Any]:
        """Get overall club statistics."""
        players = self.db.get_all_players()
        trainings = self.db.get_all_trainings()

        total_players = len(players)
        total_points = sum(p.points for p in players)
        avg_points = total_points / total_players if total_players > 0 else 0

        return {
            'total_players': total_players,
            'total_teams': len(self.db.get_all_teams()),
            'players_without_team': len(self.db.get_players_without_team()),
            'total_trainings': len(trainings),
            'total_points': total_points,
            'average_points': round(avg_points, 2),
            'total_trainings_attended': sum(p.trainings_attended for p in players)
        }

    # Leaderboards

    def get_top_scorers(self, limit: Optional[int] = None, team_id: Optional[int] = None) -> List[Player]:
        """Most points first; equal points go to the player with fewer trainings."""
        players = self._candidates(team_id)
        players.sort(key=lambda p: (-p.points, p.trainings_attended, p.id))
        return self._limit(players, limit)

    def get_best_attendance(self, limit: Optional[int] = None, team_id: Optional[int] = None) -> List[Player]:
        """Most trainings attended first; equal attendance goes to more points."""
        players = self._candidates(team_id)
        players.sort(key=lambda p: (-p.trainings_attended, -p.points, p.id))
        return self._limit(players, limit)

    def get_win_rate_ranking(self, limit: Optional[int] = None, team_id: Optional[int] = None) -> List[Player]:
        """
        Highest points per training first, only players who attended a training.
        Ties go to more trainings, then more points.
        """
        players = [p for p in self._candidates(team_id) if p.trainings_attended > 0]
        players.sort(key=lambda p: (-self._points_per_training(p), -p.trainings_attended, -p.points, p.id))
        return self._limit(players, limit)

    def get_average_points_ranking(self, limit: Optional[int] = None,
                                   team_id: Optional[int] = None) -> List[Player]:
        """Average points per training leaderboard; same order as the win rate."""
        return self.get_win_rate_ranking(limit, team_id)

    def get_leaderboard(self, kind: str, limit: Optional[int] = None,
                        team_id: Optional[int] = None) -> List[Player]:
        """Get a leaderboard by name (one of LEADERBOARD_KINDS)."""
        leaderboards: Dict[str, Callable[..., List[Player]]] = {
            'top_scorers': self.get_top_scorers,
            'best_attendance': self.get_best_attendance,
            'win_rate': self.get_win_rate_ranking,
            'average_points': self.get_average_points_ranking
        }
        if kind not in leaderboards:
            raise ValueError(f"Unknown leaderboard '{kind}', expected one of {', '.join(LEADERBOARD_KINDS)}")
        return leaderboards[kind](limit=limit, team_id=team_id)

    def _candidates(self, team_id: Optional[int]) -> List[Player]:
        if team_id is None:
            return self.db.get_all_players()
        return self.db.get_players_by_team(team_id)

    def _team_position(self, player_id: int, key: Callable[[Player], int]) -> Optional[int]:
        player = self.db.get_player_by_id(player_id)
        if player is None or player.team_id is None:
            return None
        # sorted() is stable, so equal values keep store order
        ordered = sorted(self.db.get_players_by_team(player.team_id), key=key, reverse=True)
        for position, teammate in enumerate(ordered, 1):
            if teammate.id == player_id:
                return position
        return None

    @staticmethod
    def _points_per_training(player: Player) -> float:
        return player.points / player.trainings_attended

    @staticmethod
    def _limit(players: List[Player], limit: Optional[int]) -> List[Player]:
        if limit is None:
            return players
        return players[:max(0, limit)]
