"""Dataclass models representing DB rows.

These are plain Python objects – not ORM models.  The DB layer serialises /
deserialises to and from these types.  Records are never updated once
written, hence ``frozen=True``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class ExtractionRecord:
    id: str
    url: str
    title: str
    description: str
    body_text: str
    scraped_at: str


@dataclass(frozen=True)
class CritiqueResult:
    id: str
    url: str
    headline_score: int
    value_score: int
    cta_score: int
    trust_score: int
    overall_score: int
    feedback: str
    analyzed_at: str


@dataclass(frozen=True)
class RepurposeResult:
    id: str
    url: str
    title: str
    twitter_thread: str
    linkedin_post: str
    newsletter: str
    created_at: str


def new_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with microseconds (sorts lexically)."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")
