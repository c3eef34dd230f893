"""Stage bookkeeping shared by every pipeline run.

A run walks ``Validating → Fetching → Extracting → Prompting → Generating →
Parsing → Persisting → Done``.  If a stage raises a
:class:`~founderfuel.errors.PipelineError`, the error is tagged with that
stage and re-raised unchanged; the run is then ``Failed(stage, cause)``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

from founderfuel.errors import PipelineError
from founderfuel.scraper import extract_content, fetch_url, validate_url
from founderfuel.scraper.models import PageContent

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    VALIDATING = "validating"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    PROMPTING = "prompting"
    GENERATING = "generating"
    PARSING = "parsing"
    PERSISTING = "persisting"
    DONE = "done"


@contextmanager
def stage(run: str, current: Stage, url: str) -> Iterator[None]:
    """Mark *current* as the active stage of pipeline *run* for *url*."""
    logger.debug("[%s] %s %s", run, current.value, url)
    try:
        yield
    except PipelineError as exc:
        exc.stage = current.value
        logger.warning("[%s] failed while %s %s: %s", run, current.value, url, exc.message)
        raise


def scrape_page(run: str, url: str) -> PageContent:
    """Validating → Fetching → Extracting, common to all pipelines."""
    with stage(run, Stage.VALIDATING, url):
        validate_url(url)
    with stage(run, Stage.FETCHING, url):
        raw = fetch_url(url)
    with stage(run, Stage.EXTRACTING, url):
        return extract_content(raw.html)


def done(run: str, url: str, record_id: str) -> None:
    logger.info("[%s] done %s -> %s", run, url, record_id)
