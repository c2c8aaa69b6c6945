"""
Training session management for the team roster system.
"""

import logging
from dataclasses import replace
from typing import Dict, Any, Iterable, List, Mapping, Optional

from models import Training
from utils.date_utils import DateUtils

logger = logging.getLogger(__name__)


class TrainingManager:
    """Records training sessions and keeps player stats in step with them."""

    def __init__(self, database_manager):
        self.db_manager = database_manager

    def record_training_session(self, team_id: int, attended_player_ids: Iterable[int],
                                points_awarded: Mapping[int, int], date: Optional[str] = None,
                                notes: str = "") -> Training:
        """
        Record a training session and apply it to player stats.
        Attending players get one more training; awarded points are added
        whether or not the player attended. The date defaults to today.
        """
        if date is None:
            date = DateUtils.today_iso()
        elif not DateUtils.is_iso_date(date):
            logger.warning(f"Training date '{date}' is not a YYYY-MM-DD date; history ordering may be off")
        attended = frozenset(attended_player_ids)
        awarded = dict(points_awarded)
        snapshot = self.db_manager.snapshot

        for index, player in enumerate(snapshot.players):
            changes = {}
            if player.id in attended:
                changes['trainings_attended'] = player.trainings_attended + 1
            if player.id in awarded:
                changes['points'] = player.points + awarded[player.id]
            if changes:
                snapshot.players[index] = replace(player, **changes)

        training = Training(
            id=self.db_manager.next_id('trainings'),
            date=date,
            team_id=team_id,
            attended_player_ids=attended,
            points_awarded=awarded,
            notes=notes or ""
        )
        snapshot.trainings.append(training)
        self.db_manager.commit()
        logger.info(f"Recorded training {training.id} for team {team_id} on {date}: "
                    f"{len(attended)} attended, {training.total_points_awarded} points awarded")
        return training

    def delete_training(self, training_id: int) -> None:
        """
        Delete a training and subtract its effects from the current player stats.

        The recorded amounts are subtracted from whatever the players have now,
        floored at 0. Players deleted in the meantime are skipped.
        """
        training = self.get_training_by_id(training_id)
        if training is None:
            logger.debug(f"Training {training_id} not found, nothing to delete")
            return

        snapshot = self.db_manager.snapshot
        for index, player in enumerate(snapshot.players):
            changes = {}
            if player.id in training.attended_player_ids:
                changes['trainings_attended'] = max(0, player.trainings_attended - 1)
            if player.id in training.points_awarded:
                changes['points'] = max(0, player.points - training.points_awarded[player.id])
            if changes:
                snapshot.players[index] = replace(player, **changes)

        snapshot.trainings = [t for t in snapshot.trainings if t.id != training_id]
        self.db_manager.commit()
        logger.info(f"Deleted training {training_id} and reverted its player stats")

    def get_all_trainings(self) -> List[Training]:
        """Get all trainings, most recent date first."""
        return self._sorted_by_date(self.db_manager.snapshot.trainings)

    def get_trainings_by_team(self, team_id: int) -> List[Training]:
        """Get a team's trainings, most recent date first."""
        return self._sorted_by_date(t for t in self.db_manager.snapshot.trainings if t.team_id == team_id)

    def get_training_by_id(self, training_id: int) -> Optional[Training]:
        """Get a training by id, or None if there is no such training."""
        for training in self.db_manager.snapshot.trainings:
            if training.id == training_id:
                return training
        return None

    def get_training_summary(self, training_id: int) -> Optional[Dict[str, Any]]:
        """Get a display summary of a training, or None if it does not exist."""
        training = self.get_training_by_id(training_id)
        if training is None:
            return None

        names_by_id = {player.id: player.name for player in self.db_manager.snapshot.players}
        attendee_names = sorted(names_by_id[pid] for pid in training.attended_player_ids if pid in names_by_id)
        points_by_name = {
            names_by_id[pid]: points for pid, points in sorted(training.points_awarded.items()) if pid in names_by_id
        }

        return {
            'id': training.id,
            'date': training.date,
            'formatted_date': DateUtils.format_date(training.date),
            'team_id': training.team_id,
            'attendee_count': training.attendee_count,
            'attendee_names': attendee_names,
            'total_points_awarded': training.total_points_awarded,
            'points_by_player': points_by_name,
            'notes': training.notes
        }

    @staticmethod
    def _sorted_by_date(trainings: Iterable[Training]) -> List[Training]:
        # ISO dates sort correctly as strings
        return sorted(trainings, key=lambda t: t.date, reverse=True)
