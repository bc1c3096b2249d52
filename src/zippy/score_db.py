"""
score_db.py: Durable key/value storage for the high score.

Storage failures never reach the game: reads fall back to a default and
writes are dropped after logging.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreDatabase:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        self.conn: Optional[sqlite3.Connection] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Score storage unavailable (%s): %s", db_file, e)
            self.close()

    @property
    def available(self) -> bool:
        return self.conn is not None

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_value(self, key: str, default: int = 0) -> int:
        if self.conn is None:
            return default
        try:
            row = self.conn.execute(
                "SELECT value FROM Settings WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read %r: %s", key, e)
            return default
        if row is None or row[0] is None:
            return default
        return int(row[0])

    def set_value(self, key: str, value: int) -> bool:
        """Stores value under key. Returns False if the write was discarded."""
        if self.conn is None:
            return False
        try:
            self.conn.execute(
                "INSERT INTO Settings (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, int(value)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not write %r: %s", key, e)
            return False
        return True

    def get_high_score(self) -> int:
        return self.get_value(HIGH_SCORE_KEY, 0)

    def update_high_score(self, score: int) -> bool:
        """Stores score only if it beats the stored high score."""
        if self.conn is None:
            return False
        try:
            self.conn.execute(
                "INSERT INTO Settings (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = MAX(value, excluded.value)",
                (HIGH_SCORE_KEY, int(score)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save high score %d: %s", score, e)
            return False
        return True

    def close(self):
        if self.conn is not None:
            try:
                self.conn.close()
            except sqlite3.Error as e:
                logger.warning("Error closing score storage: %s", e)
            self.conn = None
