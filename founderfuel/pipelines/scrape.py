"""Standalone scrape pipeline: validate → fetch → extract → persist, no LLM."""

from __future__ import annotations

import sqlite3

from founderfuel.config import settings
from founderfuel.db.extractions import create_extraction, list_extractions
from founderfuel.db.models import ExtractionRecord
from founderfuel.pipelines.stages import Stage, done, scrape_page, stage

_RUN = "scrape"


def scrape_url(conn: sqlite3.Connection, url: str) -> ExtractionRecord:
    """Fetch *url*, extract its content and persist an extraction record."""
    page = scrape_page(_RUN, url)

    with stage(_RUN, Stage.PERSISTING, url):
        record = create_extraction(conn, url, page)

    done(_RUN, url, record.id)
    return record


def scrape_history(conn: sqlite3.Connection, limit: int | None = None) -> list[ExtractionRecord]:
    """Most recent extraction records first, ``settings.history_limit`` by default."""
    return list_extractions(conn, limit or settings.history_limit)
