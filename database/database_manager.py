"""
Core data management for the team roster system.
"""

import logging
from typing import Dict, Any, Optional, Sequence

from config.config_manager import ConfigManager
from models import RosterSnapshot
from .json_codec import JsonCodec

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the in-memory roster snapshot and writes it through to disk."""

    def __init__(self, data_file: Optional[str] = None, config_file: Optional[str] = "config.yaml"):
        self.config = ConfigManager.load_config(config_file)
        if data_file is None:
            data_file = ConfigManager.resolve_data_file(self.config)
        self.data_file = data_file
        self.codec = JsonCodec(data_file)
        self.snapshot = RosterSnapshot()
        self.init_database()

    def init_database(self) -> None:
        """Load the roster snapshot from the data file."""
        self.snapshot = self.codec.load()
        if self.snapshot.is_empty():
            logger.info("Starting with an empty roster")
        logger.info("Roster data initialized successfully")

    def commit(self) -> bool:
        """
        Persist the current snapshot.
        A failed write is logged by the codec; the in-memory snapshot stays authoritative.
        """
        saved = self.codec.save(self.snapshot)
        if not saved:
            logger.warning("Roster changes are only held in memory until the next successful save")
        return saved

    def next_id(self, kind: str) -> int:
        """
        Reserve the next id for an entity kind ('players', 'teams' or 'trainings').
        Ids are max existing id + 1 and never go below an id handed out before.
        """
        records: Sequence = getattr(self.snapshot, kind)
        candidate = max((record.id for record in records), default=0) + 1
        candidate = max(candidate, self.snapshot.next_ids.get(kind, 1))
        self.snapshot.next_ids[kind] = candidate + 1
        return candidate

    def get_database_stats(self) -> Dict[str, Any]:
        """Get basic roster statistics."""
        return {
            'players': len(self.snapshot.players),
            'teams': len(self.snapshot.teams),
            'trainings': len(self.snapshot.trainings),
            'data_file': self.data_file
        }
