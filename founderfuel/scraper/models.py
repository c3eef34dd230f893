"""Data models for the scraper stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class PageContent:
    """Normalised content extracted from a page's HTML.

    Lives only as long as the pipeline run that produced it; the persisted
    form is :class:`~founderfuel.db.models.ExtractionRecord`.
    """

    title: str
    description: str
    body_text: str
