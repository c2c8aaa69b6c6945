#!/usr/bin/env python3
"""
Tests for the JSON persistence layer.

This test file focuses on:
- Loading missing, malformed and older documents
- Omitting fields that are at their default value
- Stable output when a document is loaded and saved again
- Write failures that must not reach the caller
"""

import unittest
import tempfile
import os
import json
import shutil
from unittest.mock import patch

from database.json_codec import JsonCodec
from models import Player, Team, Training, RosterSnapshot


class TestJsonCodec(unittest.TestCase):
    """Test cases for JsonCodec."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.data_file = os.path.join(self.test_dir, "roster", "roster_data.json")
        self.codec = JsonCodec(self.data_file)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def _write_raw(self, content):
        os.makedirs(os.path.dirname(self.data_file), exist_ok=True)
        with open(self.data_file, 'w', encoding='utf-8') as f:
            f.write(content)

    def _sample_snapshot(self):
        return RosterSnapshot(
            players=[
                Player(id=1, name="Ann", points=3, team_id=1, trainings_attended=1),
                Player(id=2, name="Bö", points=0)
            ],
            teams=[Team(id=1, name="Reds")],
            trainings=[
                Training(id=1, date="2026-02-01", team_id=1, attended_player_ids=frozenset({1}),
                         points_awarded={1: 3}, notes="Sprint drills"),
                Training(id=2, date="2026-02-08", team_id=1)
            ]
        )

    def test_load_missing_file_returns_empty_snapshot(self):
        """A missing file behaves like a fresh install."""
        snapshot = self.codec.load()

        self.assertEqual(snapshot.players, [])
        self.assertEqual(snapshot.teams, [])
        self.assertEqual(snapshot.trainings, [])
        self.assertTrue(snapshot.is_empty())

    def test_load_malformed_file_returns_empty_snapshot(self):
        """Invalid JSON is logged and ignored."""
        self._write_raw("{ not json")

        with self.assertLogs('database.json_codec', level='ERROR'):
            snapshot = self.codec.load()

        self.assertTrue(snapshot.is_empty())

    def test_load_wrong_shape_is_not_partially_trusted(self):
        """A document with one bad record is discarded completely."""
        self._write_raw(json.dumps({
            'players': [{'id': 1, 'name': 'Ann', 'points': 2}, {'name': 'No id'}],
            'teams': [{'id': 1, 'name': 'Reds'}]
        }))

        with self.assertLogs('database.json_codec', level='ERROR'):
            snapshot = self.codec.load()

        self.assertTrue(snapshot.is_empty())

    def test_load_wrongly_typed_values_is_not_partially_trusted(self):
        """Values of the wrong JSON type are rejected rather than converted."""
        for player in ({'id': 1, 'name': 42, 'points': 0},
                       {'id': 1, 'name': 'Ann', 'points': 3.7},
                       {'id': '1', 'name': 'Ann', 'points': 0},
                       {'id': 1, 'name': 'Ann', 'points': True}):
            with self.subTest(player=player):
                self._write_raw(json.dumps({'players': [player]}))

                with self.assertLogs('database.json_codec', level='ERROR'):
                    snapshot = self.codec.load()

                self.assertTrue(snapshot.is_empty())

    def test_load_non_object_document(self):
        """A JSON list at the top level is rejected."""
        self._write_raw("[1, 2, 3]")

        with self.assertLogs('database.json_codec', level='ERROR'):
            snapshot = self.codec.load()

        self.assertTrue(snapshot.is_empty())

    def test_load_older_document_without_trainings(self):
        """Missing top-level lists default to empty."""
        self._write_raw(json.dumps({
            'players': [{'id': 4, 'name': 'Ann', 'points': 7}],
            'teams': [{'id': 2, 'name': 'Blues'}]
        }))

        snapshot = self.codec.load()

        self.assertEqual(snapshot.players, [Player(id=4, name='Ann', points=7)])
        self.assertEqual(snapshot.teams, [Team(id=2, name='Blues')])
        self.assertEqual(snapshot.trainings, [])

    def test_defaults_restored_on_load(self):
        """Omitted optional fields come back with their default values."""
        self._write_raw(json.dumps({
            'players': [{'id': 1, 'name': 'Ann', 'points': 0}],
            'trainings': [{'id': 1, 'date': '2026-01-15', 'teamId': 3, 'attendedPlayerIds': []}]
        }))

        snapshot = self.codec.load()
        player = snapshot.players[0]
        training = snapshot.trainings[0]

        self.assertIsNone(player.team_id)
        self.assertEqual(player.trainings_attended, 0)
        self.assertEqual(training.points_awarded, {})
        self.assertEqual(training.notes, "")
        self.assertEqual(training.attended_player_ids, frozenset())

    def test_default_fields_are_omitted(self):
        """Fields at their default value are left out of the document."""
        document = JsonCodec.to_document(self._sample_snapshot())

        bare_player = document['players'][1]
        self.assertNotIn('teamId', bare_player)
        self.assertNotIn('trainingsAttended', bare_player)

        bare_training = document['trainings'][1]
        self.assertNotIn('pointsAwarded', bare_training)
        self.assertNotIn('notes', bare_training)
        self.assertEqual(bare_training['attendedPlayerIds'], [])

    def test_points_awarded_keys_are_strings_in_document(self):
        """Player ids become JSON object keys and are parsed back to integers."""
        document = JsonCodec.to_document(self._sample_snapshot())
        self.assertEqual(document['trainings'][0]['pointsAwarded'], {'1': 3})

        snapshot = JsonCodec.from_document(document)
        self.assertEqual(snapshot.trainings[0].points_awarded, {1: 3})

    def test_save_and_load_preserve_every_field(self):
        """Saving then loading gives back the same entities."""
        original = self._sample_snapshot()

        self.assertTrue(self.codec.save(original))
        loaded = self.codec.load()

        self.assertEqual(loaded.players, original.players)
        self.assertEqual(loaded.teams, original.teams)
        self.assertEqual(loaded.trainings, original.trainings)

    def test_resave_is_byte_stable(self):
        """Loading a saved document and saving it again changes nothing."""
        self.codec.save(self._sample_snapshot())
        with open(self.data_file, 'rb') as f:
            first = f.read()

        self.codec.save(self.codec.load())
        with open(self.data_file, 'rb') as f:
            second = f.read()

        self.codec.save(self.codec.load())
        with open(self.data_file, 'rb') as f:
            third = f.read()

        self.assertEqual(first, second)
        self.assertEqual(second, third)

    def test_save_creates_parent_directory(self):
        """The data directory is created on first save."""
        self.assertFalse(os.path.exists(os.path.dirname(self.data_file)))

        self.assertTrue(self.codec.save(RosterSnapshot()))

        with open(self.data_file, encoding='utf-8') as f:
            self.assertEqual(json.load(f), {'players': [], 'teams': [], 'trainings': []})

    def test_save_failure_is_logged_not_raised(self):
        """An I/O error during save returns False instead of raising."""
        with patch('builtins.open', side_effect=OSError("disk full")):
            with self.assertLogs('database.json_codec', level='ERROR') as logs:
                result = self.codec.save(self._sample_snapshot())

        self.assertFalse(result)
        self.assertIn("disk full", "\n".join(logs.output))

    def test_failed_write_keeps_previous_document(self):
        """A write that fails part way leaves the last good save loadable."""
        original = self._sample_snapshot()
        self.assertTrue(self.codec.save(original))

        changed = RosterSnapshot(players=original.players + [Player(id=3, name="Dan")], teams=original.teams)
        with patch('database.json_codec.os.fsync', side_effect=OSError("disk full")):
            with self.assertLogs('database.json_codec', level='ERROR'):
                self.assertFalse(self.codec.save(changed))

        loaded = JsonCodec(self.data_file).load()
        self.assertEqual(loaded.players, original.players)
        self.assertEqual(loaded.trainings, original.trainings)
        self.assertEqual(os.listdir(os.path.dirname(self.data_file)), [os.path.basename(self.data_file)])

    def test_next_ids_round_trip(self):
        """Id high-water marks survive a save and load."""
        snapshot = RosterSnapshot(next_ids={'players': 5, 'teams': 2})
        self.codec.save(snapshot)

        loaded = self.codec.load()

        self.assertEqual(loaded.next_ids, {'players': 5, 'teams': 2})


if __name__ == '__main__':
    unittest.main()
