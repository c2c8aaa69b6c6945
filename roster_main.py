"""
Main application for the team roster system.

Loads the roster, logs club statistics and writes the CSV reports.
"""

import logging
import sys

from config.config_manager import ConfigManager
from ranking.ranking_processor import RankingProcessor
from reports.report_generator import ReportGenerator
from roster_database import RosterDatabase

logger = logging.getLogger(__name__)


def main(config_file: str = "config.yaml") -> None:
    """Main application entry point."""
    config = ConfigManager.load_config(config_file)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        logger.info("Starting team roster system...")

        roster = RosterDatabase(config_file=config_file)
        ranking_processor = RankingProcessor(roster)
        report_generator = ReportGenerator(roster, ranking_processor)

        stats = roster.get_database_stats()
        logger.info(f"Roster statistics: {stats}")

        overall_stats = ranking_processor.get_overall_statistics()
        logger.info(f"Club statistics: {overall_stats}")

        for team in roster.get_all_teams():
            logger.info(f"Team statistics: {ranking_processor.get_team_statistics(team.id)}")

        logger.info("Generating reports...")
        report_results = report_generator.generate_all_reports(
            config.get('report_dir', 'reports'),
            limit=config.get('leaderboard_size')
        )
        logger.info(f"Generated reports: {report_results}")

        logger.info("Team roster system completed successfully")

    except Exception as e:
        logger.exception(f"Error in team roster system: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
