"""Scrape endpoints.

Routes
------
POST /api/scrape     Body: {"url": "https://..."}   → scrape_url
GET  /api/history    ?limit=20                      → scrape_history
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from founderfuel.api.routers.common import UrlRequest, history_limit
from founderfuel.db.models import ExtractionRecord
from founderfuel.pipelines.scrape import scrape_history, scrape_url

router = APIRouter()


def _record_dict(record: ExtractionRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "url": record.url,
        "title": record.title,
        "description": record.description,
        "bodyText": record.body_text,
        "scrapedAt": record.scraped_at,
    }


@router.post("/scrape", response_model=dict[str, Any])
def scrape_endpoint(body: UrlRequest, request: Request) -> dict[str, Any]:
    """Fetch a page, extract its content and store the extraction."""
    conn = request.app.state.db
    return _record_dict(scrape_url(conn, body.url))


@router.get("/history", response_model=list[dict[str, Any]])
def scrape_history_endpoint(
    request: Request, limit: int = Depends(history_limit)
) -> list[dict[str, Any]]:
    """Past extractions, newest first."""
    conn = request.app.state.db
    return [_record_dict(r) for r in scrape_history(conn, limit)]
