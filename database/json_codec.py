"""
JSON persistence for the team roster system.

The whole roster lives in a single JSON document. Every save rewrites the
complete document, and a document that cannot be read is never partially
trusted: loading falls back to an empty roster instead.
"""

import os
import json
import logging
from typing import Dict, Any, List

from models import Player, Team, Training, RosterSnapshot, ENTITY_KINDS

logger = logging.getLogger(__name__)


class JsonCodec:
    """Reads and writes the roster snapshot as one JSON document."""

    def __init__(self, data_file: str):
        self.data_file = data_file

    def load(self) -> RosterSnapshot:
        """Load the snapshot from disk, or an empty one if that is not possible."""
        if not os.path.exists(self.data_file):
            logger.info(f"No roster data at {self.data_file}, starting with an empty roster")
            return RosterSnapshot()

        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                document = json.load(f)
            snapshot = self.from_document(document)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Error loading roster data from {self.data_file}: {e}")
            return RosterSnapshot()

        logger.info(f"Loaded {len(snapshot.players)} players, {len(snapshot.teams)} teams "
                    f"and {len(snapshot.trainings)} trainings from {self.data_file}")
        return snapshot

    def save(self, snapshot: RosterSnapshot) -> bool:
        """
        Write the full snapshot to disk.
        Returns False if the document could not be written.
        """
        tmp_file = self.data_file + ".tmp"
        try:
            content = self.dumps(snapshot)
            directory = os.path.dirname(self.data_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            # The last good save stays in place until the new document is fully written
            with open(tmp_file, 'w', encoding='utf-8') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_file, self.data_file)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving roster data to {self.data_file}: {e}")
            if os.path.exists(tmp_file):
                os.remove(tmp_file)
            return False

        logger.debug(f"Saved roster data to {self.data_file}")
        return True

    @staticmethod
    def dumps(snapshot: RosterSnapshot) -> str:
        """Serialize a snapshot to the exact text written to disk."""
        return json.dumps(JsonCodec.to_document(snapshot), indent=2, ensure_ascii=False) + "\n"

    @staticmethod
    def to_document(snapshot: RosterSnapshot) -> Dict[str, Any]:
        """Convert a snapshot to a JSON-compatible document."""
        document = {
            'players': [JsonCodec._player_to_dict(p) for p in snapshot.players],
            'teams': [{'id': t.id, 'name': t.name} for t in snapshot.teams],
            'trainings': [JsonCodec._training_to_dict(t) for t in snapshot.trainings],
        }
        next_ids = {kind: int(snapshot.next_ids[kind]) for kind in ENTITY_KINDS if kind in snapshot.next_ids}
        if next_ids:
            document['nextIds'] = next_ids
        return document

    @staticmethod
    def from_document(document: Dict[str, Any]) -> RosterSnapshot:
        """
        Build a snapshot from a parsed document.
        Missing top-level lists (older files) are treated as empty. Values of
        the wrong JSON type raise TypeError instead of being converted.
        """
        if not isinstance(document, dict):
            raise TypeError(f"expected a JSON object, got {type(document).__name__}")

        players = [JsonCodec._player_from_dict(d) for d in JsonCodec._list_field(document, 'players')]
        teams = [
            Team(id=JsonCodec._int(d['id'], 'id'), name=JsonCodec._str(d['name'], 'name'))
            for d in JsonCodec._list_field(document, 'teams')
        ]
        trainings = [JsonCodec._training_from_dict(d) for d in JsonCodec._list_field(document, 'trainings')]

        next_ids = {}
        for kind, value in (document.get('nextIds') or {}).items():
            if kind in ENTITY_KINDS:
                next_ids[kind] = JsonCodec._int(value, 'nextIds')

        return RosterSnapshot(players=players, teams=teams, trainings=trainings, next_ids=next_ids)

    @staticmethod
    def _list_field(document: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        value = document.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise TypeError(f"'{key}' must be a list")
        return value

    @staticmethod
    def _int(value: Any, label: str) -> int:
        # bool is an int subclass but never a valid id or count
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"'{label}' must be an integer, got {value!r}")
        return value

    @staticmethod
    def _str(value: Any, label: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"'{label}' must be a string, got {value!r}")
        return value

    @staticmethod
    def _player_to_dict(player: Player) -> Dict[str, Any]:
        data = {'id': player.id, 'name': player.name, 'points': player.points}
        if player.team_id is not None:
            data['teamId'] = player.team_id
        if player.trainings_attended != 0:
            data['trainingsAttended'] = player.trainings_attended
        return data

    @staticmethod
    def _player_from_dict(data: Dict[str, Any]) -> Player:
        team_id = data.get('teamId')
        return Player(
            id=JsonCodec._int(data['id'], 'id'),
            name=JsonCodec._str(data['name'], 'name'),
            points=JsonCodec._int(data.get('points', 0), 'points'),
            team_id=JsonCodec._int(team_id, 'teamId') if team_id is not None else None,
            trainings_attended=JsonCodec._int(data.get('trainingsAttended', 0), 'trainingsAttended')
        )

    @staticmethod
    def _training_to_dict(training: Training) -> Dict[str, Any]:
        data = {
            'id': training.id,
            'date': training.date,
            'teamId': training.team_id,
            'attendedPlayerIds': sorted(training.attended_player_ids),
        }
        if training.points_awarded:
            # JSON object keys are strings
            data['pointsAwarded'] = {
                str(player_id): points for player_id, points in sorted(training.points_awarded.items())
            }
        if training.notes:
            data['notes'] = training.notes
        return data

    @staticmethod
    def _training_from_dict(data: Dict[str, Any]) -> Training:
        points_awarded = data.get('pointsAwarded') or {}
        return Training(
            id=JsonCodec._int(data['id'], 'id'),
            date=JsonCodec._str(data['date'], 'date'),
            team_id=JsonCodec._int(data['teamId'], 'teamId'),
            attended_player_ids=frozenset(
                JsonCodec._int(pid, 'attendedPlayerIds') for pid in data.get('attendedPlayerIds') or []
            ),
            points_awarded={
                int(pid): JsonCodec._int(points, 'pointsAwarded') for pid, points in points_awarded.items()
            },
            notes=JsonCodec._str(data.get('notes') or "", 'notes')
        )
