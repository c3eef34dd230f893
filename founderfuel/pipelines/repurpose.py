"""Blog-post repurposing pipeline.

``repurpose_url`` turns the post at a URL into a Twitter/X thread, a
LinkedIn post and a newsletter snippet:

    validate → fetch → extract → prompt → generate → parse → persist
"""

from __future__ import annotations

import sqlite3

from founderfuel.config import settings
from founderfuel.db.connection import transaction
from founderfuel.db.extractions import insert_extraction
from founderfuel.db.models import RepurposeResult
from founderfuel.db.repurposes import insert_repurpose, list_repurposes
from founderfuel.llm.gateway import generate, repurpose_params
from founderfuel.llm.parser import parse_repurpose
from founderfuel.llm.prompts import Task, build_prompt
from founderfuel.pipelines.stages import Stage, done, scrape_page, stage

_RUN = "repurpose"


def repurpose_url(conn: sqlite3.Connection, url: str) -> RepurposeResult:
    """Generate social and newsletter copy from the post at *url* and persist it.

    The stored ``title`` is the page title found during extraction.  Nothing
    is persisted if any stage fails.
    """
    page = scrape_page(_RUN, url)

    with stage(_RUN, Stage.PROMPTING, url):
        prompt = build_prompt(Task.REPURPOSE, url, page)
    with stage(_RUN, Stage.GENERATING, url):
        raw = generate(prompt, repurpose_params())
    with stage(_RUN, Stage.PARSING, url):
        content = parse_repurpose(raw)

    with stage(_RUN, Stage.PERSISTING, url), transaction(conn):
        insert_extraction(conn, url, page)
        result = insert_repurpose(conn, url, page.title, content)

    done(_RUN, url, result.id)
    return result


def repurpose_history(conn: sqlite3.Connection, limit: int | None = None) -> list[RepurposeResult]:
    """Most recent results first, ``settings.history_limit`` by default."""
    return list_repurposes(conn, limit or settings.history_limit)
