"""Database layer package.

Public re-exports so callers can write::

    from founderfuel.db import get_connection, init_db
"""

from founderfuel.db.connection import get_connection, reading, transaction
from founderfuel.db.migrations import init_db

__all__ = ["get_connection", "init_db", "reading", "transaction"]
