import logging
import sqlite3
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


class Storage:
    """
    Persistent key-value defaults store backed by SQLite.
    Shared by the bookmark service (key presence only) and the sample text.
    """
    def __init__(self, db_path="data/defaults.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Initialize SQLite database with the defaults table."""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS defaults (
                key TEXT PRIMARY KEY,
                value TEXT,
                last_modified TEXT
            )
        ''')
        conn.commit()
        conn.close()

    def keys_with_prefix(self, prefix):
        """Return the keys starting with `prefix` (literal match, no wildcards)."""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute(
            "SELECT key FROM defaults WHERE substr(key, 1, ?) = ?",
            (len(prefix), prefix)
        )
        rows = cursor.fetchall()
        conn.close()
        return [row[0] for row in rows]

    def get_value(self, key, default=None):
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM defaults WHERE key = ?", (key,))
        row = cursor.fetchone()
        conn.close()
        if row is None or row[0] is None:
            return default
        return row[0]

    def set_value(self, key, value):
        """Insert or overwrite a single key."""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        modified = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        cursor.execute('''
            INSERT INTO defaults (key, value, last_modified)
            VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value=excluded.value,
                last_modified=excluded.last_modified
        ''', (key, value, modified))
        conn.commit()
        conn.close()

    def add_keys(self, keys):
        """Write value-less entries; only their presence is meaningful."""
        keys = list(keys)
        if not keys:
            return
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        modified = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        cursor.executemany('''
            INSERT INTO defaults (key, value, last_modified)
            VALUES (?, NULL, ?)
            ON CONFLICT(key) DO UPDATE SET
                value=NULL,
                last_modified=excluded.last_modified
        ''', [(key, modified) for key in keys])
        conn.commit()
        conn.close()

    def remove_keys(self, keys):
        keys = list(keys)
        if not keys:
            return
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()
        cursor.executemany("DELETE FROM defaults WHERE key = ?", [(key,) for key in keys])
        conn.commit()
        conn.close()
