"""
score_store.py: SQLite persistence for the best score.
"""

import logging
import sqlite3

logger = logging.getLogger(__name__)

DB_FILE = "flappy_scores.db"


class SqliteScoreStore:
    """Keeps a single best-score row in an SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table and its single row if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.cur.execute("INSERT OR IGNORE INTO Scores (id, best) VALUES (1, 0)")
        self.conn.commit()

    def read_best(self) -> int:
        self.cur.execute("SELECT best FROM Scores WHERE id = 1")
        row = self.cur.fetchone()
        return int(row[0]) if row else 0

    def write_best(self, score: int):
        """Raises the stored best to score. Repeated or lower writes change nothing."""
        self.cur.execute("UPDATE Scores SET best = MAX(best, ?) WHERE id = 1", (score,))
        self.conn.commit()
        logger.debug("Stored best score %d", score)

    def close(self):
        self.conn.close()
