"""Landing-page critique pipeline.

``analyze_url`` runs one critique from a raw URL to a persisted result:

    validate → fetch → extract → prompt → generate → parse → persist

The extraction record and the critique are written in the same transaction
at the end, so a failure at any earlier stage leaves the database untouched.
"""

from __future__ import annotations

import sqlite3

from founderfuel.config import settings
from founderfuel.db.connection import transaction
from founderfuel.db.critiques import insert_critique, list_critiques
from founderfuel.db.extractions import insert_extraction
from founderfuel.db.models import CritiqueResult
from founderfuel.llm.gateway import critique_params, generate
from founderfuel.llm.parser import parse_critique
from founderfuel.llm.prompts import Task, build_prompt
from founderfuel.pipelines.stages import Stage, done, scrape_page, stage

_RUN = "analyze"


def analyze_url(conn: sqlite3.Connection, url: str) -> CritiqueResult:
    """Score the landing page at *url* and persist the critique.

    Args:
        conn: Open, initialised DB connection.
        url: The page to critique.  Must be ``http`` or ``https``.

    Returns:
        The newly created :class:`~founderfuel.db.models.CritiqueResult`.

    Raises:
        PipelineError: Any classified failure, tagged with the stage that
            raised it.  Nothing is persisted in that case.
    """
    page = scrape_page(_RUN, url)

    with stage(_RUN, Stage.PROMPTING, url):
        prompt = build_prompt(Task.CRITIQUE, url, page)
    with stage(_RUN, Stage.GENERATING, url):
        raw = generate(prompt, critique_params())
    with stage(_RUN, Stage.PARSING, url):
        scores = parse_critique(raw)

    with stage(_RUN, Stage.PERSISTING, url), transaction(conn):
        insert_extraction(conn, url, page)
        result = insert_critique(conn, url, scores)

    done(_RUN, url, result.id)
    return result


def critique_history(conn: sqlite3.Connection, limit: int | None = None) -> list[CritiqueResult]:
    """Most recent critiques first, ``settings.history_limit`` by default."""
    return list_critiques(conn, limit or settings.history_limit)
