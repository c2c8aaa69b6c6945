"""
Report generator for the team roster system.
"""

import os
import pandas as pd
import logging
from typing import Dict, Optional

from ranking.ranking_processor import RankingProcessor, LEADERBOARD_KINDS
from utils.date_utils import DateUtils
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generates CSV reports from the roster store."""

    def __init__(self, roster_database, ranking_processor: Optional[RankingProcessor] = None):
        self.db = roster_database
        self.ranking_processor = ranking_processor or RankingProcessor(roster_database)

    def generate_team_report(self, team_id: int, output_file: str) -> int:
        """
        Generate a roster report for one team, players in name order.
        Returns the number of players in the report.
        """
        team = self.db.get_team_by_id(team_id)
        if team is None:
            logger.warning(f"Team {team_id} not found for report generation")
            return 0

        players = self.db.get_players_sorted_by_name(team_id)
        if not players:
            logger.warning(f"No players found in team {team.name}")
            return 0

        data = []
        for player in players:
            average_points = self.ranking_processor.get_player_average_points(player.id)
            data.append({
                'ID': player.id,
                'Name': player.name,
                'Team': team.name,
                'Points': player.points,
                'Trainings': player.trainings_attended,
                'Points per Training': round(average_points, 2) if average_points is not None else '',
                'Points Rank': self.ranking_processor.get_player_points_rank(player.id),
                'Attendance Rank': self.ranking_processor.get_player_attendance_rank(player.id),
                'vs Team Average': round(self.ranking_processor.get_player_vs_team_average(player.id), 2)
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated team report for {team.name} with {len(players)} players: {output_file}")
        return len(players)

    def generate_leaderboard_report(self, kind: str, output_file: str, team_id: Optional[int] = None,
                                    limit: Optional[int] = None) -> int:
        """
        Export one leaderboard to CSV.
        Returns the number of ranked players.
        """
        ranking = self.ranking_processor.get_leaderboard(kind, limit=limit, team_id=team_id)

        if not ranking:
            logger.warning(f"No players found for leaderboard {kind}")
            return 0

        team_names = {team.id: team.name for team in self.db.get_all_teams()}
        data = []
        for i, player in enumerate(ranking, 1):
            row = {
                'Rank': i,
                'ID': player.id,
                'Name': player.name,
                'Team': team_names.get(player.team_id, ''),
                'Points': player.points,
                'Trainings': player.trainings_attended
            }
            if kind == 'win_rate':
                row['Win Rate %'] = round(self.ranking_processor.get_player_win_rate(player.id), 2)
            elif kind == 'average_points':
                row['Points per Training'] = round(self.ranking_processor.get_player_average_points(player.id), 2)
            data.append(row)

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Exported {kind} leaderboard with {len(ranking)} players to {output_file}")
        return len(ranking)

    def generate_training_history_report(self, output_file: str, team_id: Optional[int] = None) -> int:
        """
        Export training sessions, most recent first.
        Returns the number of trainings exported.
        """
        if team_id is None:
            trainings = self.db.get_all_trainings()
        else:
            trainings = self.db.get_trainings_by_team(team_id)

        if not trainings:
            logger.warning("No trainings found for history report")
            return 0

        team_names = {team.id: team.name for team in self.db.get_all_teams()}
        data = []
        for training in trainings:
            summary = self.db.get_training_summary(training.id)
            data.append({
                'ID': training.id,
                'Date': training.date,
                'Formatted Date': DateUtils.format_date(training.date),
                'Team': team_names.get(training.team_id, f'Deleted team {training.team_id}'),
                'Attendees': training.attendee_count,
                'Attendee Names': ', '.join(summary['attendee_names']),
                'Points Awarded': training.total_points_awarded,
                'Notes': training.notes
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated training history report with {len(trainings)} trainings: {output_file}")
        return len(trainings)

    def generate_statistics_report(self, output_file: str) -> int:
        """Generate a per-team statistics report."""
        teams = self.db.get_all_teams()
        if not teams:
            logger.warning("No teams found for statistics report")
            return 0

        data = []
        for team in teams:
            stats = self.ranking_processor.get_team_statistics(team.id)
            data.append({
                'Team': stats['team_name'],
                'Players': stats['player_count'],
                'Total Points': stats['total_points'],
                'Trainings': stats['training_count'],
                'Last Training': stats['last_training_date'] or '',
                'Attendance Rate %': stats['attendance_rate'],
                'Points per Training': stats['average_points_per_training'],
                'Top Scorer': stats['top_scorer'] or ''
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated statistics report: {output_file}")
        return len(data)

    def generate_all_reports(self, output_directory: str = "reports", limit: Optional[int] = None) -> Dict[str, int]:
        """Generate all available reports in the specified directory."""
        os.makedirs(output_directory, exist_ok=True)

        report_results = {}

        for kind in LEADERBOARD_KINDS:
            leaderboard_report = os.path.join(output_directory, f"leaderboard_{kind}.csv")
            report_results[f'leaderboard_{kind}'] = self.generate_leaderboard_report(
                kind, leaderboard_report, limit=limit
            )

        for team in self.db.get_all_teams():
            safe_team_name = TextUtils.safe_filename(team.name)
            team_report = os.path.join(output_directory, f"team_{team.id}_{safe_team_name}_report.csv")
            report_results[f'team_{team.id}'] = self.generate_team_report(team.id, team_report)

        history_report = os.path.join(output_directory, "training_history_report.csv")
        report_results['training_history'] = self.generate_training_history_report(history_report)

        stats_report = os.path.join(output_directory, "statistics_report.csv")
        report_results['statistics'] = self.generate_statistics_report(stats_report)

        logger.info(f"Generated all reports in directory: {output_directory}")
        return report_results
