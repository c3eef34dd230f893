"""Persistence for ``repurpose_results``."""

from __future__ import annotations

import sqlite3

from founderfuel.db.connection import reading
from founderfuel.db.models import RepurposeResult, new_id, utc_timestamp
from founderfuel.llm.schemas import RepurposedContent


def _row_to_result(row: sqlite3.Row) -> RepurposeResult:
    return RepurposeResult(
        id=row["id"],
        url=row["url"],
        title=row["title"],
        twitter_thread=row["twitter_thread"],
        linkedin_post=row["linkedin_post"],
        newsletter=row["newsletter"],
        created_at=row["created_at"],
    )


def insert_repurpose(
    conn: sqlite3.Connection, url: str, title: str, content: RepurposedContent
) -> RepurposeResult:
    """Insert a result without committing; the caller owns the transaction."""
    result = RepurposeResult(
        id=new_id(),
        url=url,
        title=title,
        twitter_thread=content.twitter_thread,
        linkedin_post=content.linkedin_post,
        newsletter=content.newsletter,
        created_at=utc_timestamp(),
    )
    conn.execute(
        """
        INSERT INTO repurpose_results (
            id, url, title, twitter_thread, linkedin_post, newsletter, created_at
        )
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (
            result.id,
            result.url,
            result.title,
            result.twitter_thread,
            result.linkedin_post,
            result.newsletter,
            result.created_at,
        ),
    )
    return result


def list_repurposes(conn: sqlite3.Connection, limit: int = 20) -> list[RepurposeResult]:
    """Return up to *limit* results, newest first."""
    with reading(conn):
        rows = conn.execute(
            "SELECT * FROM repurpose_results ORDER BY created_at DESC, rowid DESC LIMIT ?",
            (limit,),
        ).fetchall()
    return [_row_to_result(r) for r in rows]
