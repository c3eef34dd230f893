"""Persistence for ``critique_results``."""

from __future__ import annotations

import sqlite3

from founderfuel.db.connection import reading
from founderfuel.db.models import CritiqueResult, new_id, utc_timestamp
from founderfuel.llm.schemas import CritiqueScores


def _row_to_result(row: sqlite3.Row) -> CritiqueResult:
    return CritiqueResult(
        id=row["id"],
        url=row["url"],
        headline_score=row["headline_score"],
        value_score=row["value_score"],
        cta_score=row["cta_score"],
        trust_score=row["trust_score"],
        overall_score=row["overall_score"],
        feedback=row["feedback"],
        analyzed_at=row["analyzed_at"],
    )


def insert_critique(
    conn: sqlite3.Connection, url: str, scores: CritiqueScores
) -> CritiqueResult:
    """Insert a critique without committing; the caller owns the transaction."""
    result = CritiqueResult(
        id=new_id(),
        url=url,
        headline_score=scores.headline_score,
        value_score=scores.value_score,
        cta_score=scores.cta_score,
        trust_score=scores.trust_score,
        overall_score=scores.overall_score,
        feedback=scores.feedback,
        analyzed_at=utc_timestamp(),
    )
    conn.execute(
        """
        INSERT INTO critique_results (
            id, url, headline_score, value_score, cta_score, trust_score,
            overall_score, feedback, analyzed_at
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            result.id,
            result.url,
            result.headline_score,
            result.value_score,
            result.cta_score,
            result.trust_score,
            result.overall_score,
            result.feedback,
            result.analyzed_at,
        ),
    )
    return result


def list_critiques(conn: sqlite3.Connection, limit: int = 20) -> list[CritiqueResult]:
    """Return up to *limit* critiques, newest first."""
    with reading(conn):
        rows = conn.execute(
            "SELECT * FROM critique_results ORDER BY analyzed_at DESC, rowid DESC LIMIT ?",
            (limit,),
        ).fetchall()
    return [_row_to_result(r) for r in rows]
