"""SQLite connection factory.

Usage::

    from founderfuel.db.connection import get_connection

    conn = get_connection()
    try:
        ...
    finally:
        conn.close()

The API opens one connection at startup and shares it across request
threads (``check_same_thread=False``); writes go through :func:`transaction`
and reads through :func:`reading`.
"""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from founderfuel.config import settings


def get_connection(db_path: Optional[Union[Path, str]] = None) -> sqlite3.Connection:
    """Open and configure a SQLite connection.

    Steps performed on every new connection:
    1. Enable ``PRAGMA foreign_keys = ON``.
    2. Switch to WAL journal mode for concurrent readers.

    Args:
        db_path: Override the DB path.  Defaults to ``settings.db_path``.
            Pass ``":memory:"`` for a throwaway database.

    Returns:
        A configured :class:`sqlite3.Connection` with ``row_factory`` set to
        :class:`sqlite3.Row` so columns can be accessed by name.
    """
    path = db_path or settings.db_path

    # Create parent directory if needed (no-op for `:memory:`)
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row

    # PRAGMAs
    conn.execute("PRAGMA foreign_keys = ON")
    conn.execute("PRAGMA journal_mode = WAL")

    return conn


# One process-wide lock guards the shared connection: a transaction holds it
# from first statement to commit, and readers wait for it so they never see
# another thread's uncommitted rows.
_conn_lock = threading.RLock()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run the enclosed statements as one transaction.

    Commits on normal exit, rolls back if the block raises.
    """
    with _conn_lock, conn:
        yield conn


@contextmanager
def reading(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Hold the connection lock for a read outside any open transaction."""
    with _conn_lock:
        yield conn
