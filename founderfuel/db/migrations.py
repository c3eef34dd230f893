"""Database initialisation and migration helpers.

``init_db(conn)`` is idempotent and safe to call on an existing database.  It
applies ``schema.sql`` and then any pending entries of ``MIGRATIONS``, which
are tracked in a version table.
"""

from __future__ import annotations

import logging
import sqlite3

from founderfuel.config import settings

logger = logging.getLogger(__name__)

# (version, sql) pairs applied in order on top of schema.sql.
MIGRATIONS: list[tuple[int, str]] = [
    # (1, "ALTER TABLE critique_results ADD COLUMN model TEXT;"),
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def init_db(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes, then run pending migrations.

    Every DDL statement in ``schema.sql`` uses ``IF NOT EXISTS`` so calling
    this multiple times on the same database is safe.

    Args:
        conn: An open, configured SQLite connection.
    """
    sql = settings.schema_path.read_text(encoding="utf-8")
    # executescript() issues an implicit COMMIT first, which is fine for a
    # DDL-only script.
    conn.executescript(sql)
    _ensure_version_table(conn)
    migrate(conn)


def _ensure_version_table(conn: sqlite3.Connection) -> None:
    """Create the internal schema-version tracking table if absent."""
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_version (
                version    INTEGER PRIMARY KEY,
                applied_at TEXT DEFAULT (datetime('now'))
            )
            """
        )


def current_version(conn: sqlite3.Connection) -> int:
    """Return the highest applied migration version (0 if none applied)."""
    row = conn.execute(
        "SELECT COALESCE(MAX(version), 0) FROM schema_version"
    ).fetchone()
    return row[0] if row else 0


def migrate(conn: sqlite3.Connection) -> None:
    """Apply every migration in ``MIGRATIONS`` newer than :func:`current_version`."""
    applied = current_version(conn)
    for version, sql in MIGRATIONS:
        if version > applied:
            logger.info("Applying schema migration %d", version)
            with conn:
                conn.execute(sql)
                conn.execute(
                    "INSERT INTO schema_version(version) VALUES (?)", (version,)
                )
