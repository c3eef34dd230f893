"""Persistence for ``extraction_records``."""

from __future__ import annotations

import sqlite3

from founderfuel.db.connection import reading, transaction
from founderfuel.db.models import ExtractionRecord, new_id, utc_timestamp
from founderfuel.scraper.models import PageContent


def _row_to_record(row: sqlite3.Row) -> ExtractionRecord:
    return ExtractionRecord(
        id=row["id"],
        url=row["url"],
        title=row["title"],
        description=row["description"],
        body_text=row["body_text"],
        scraped_at=row["scraped_at"],
    )


def insert_extraction(
    conn: sqlite3.Connection, url: str, page: PageContent
) -> ExtractionRecord:
    """Insert a record without committing; the caller owns the transaction."""
    record = ExtractionRecord(
        id=new_id(),
        url=url,
        title=page.title,
        description=page.description,
        body_text=page.body_text,
        scraped_at=utc_timestamp(),
    )
    conn.execute(
        """
        INSERT INTO extraction_records (id, url, title, description, body_text, scraped_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            record.id,
            record.url,
            record.title,
            record.description,
            record.body_text,
            record.scraped_at,
        ),
    )
    return record


def create_extraction(
    conn: sqlite3.Connection, url: str, page: PageContent
) -> ExtractionRecord:
    """Insert and commit an extraction record, returning it with its id."""
    with transaction(conn):
        return insert_extraction(conn, url, page)


def list_extractions(conn: sqlite3.Connection, limit: int = 20) -> list[ExtractionRecord]:
    """Return up to *limit* records, newest first."""
    with reading(conn):
        rows = conn.execute(
            "SELECT * FROM extraction_records ORDER BY scraped_at DESC, rowid DESC LIMIT ?",
            (limit,),
        ).fetchall()
    return [_row_to_record(r) for r in rows]
