"""Content repurposing endpoints.

Routes
------
POST /api/repurpose           Body: {"url": "https://..."}   → repurpose_url
GET  /api/repurpose/history   ?limit=20                      → repurpose_history
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from founderfuel.api.routers.common import UrlRequest, history_limit
from founderfuel.db.models import RepurposeResult
from founderfuel.pipelines.repurpose import repurpose_history, repurpose_url

router = APIRouter()


def _repurpose_dict(result: RepurposeResult) -> dict[str, Any]:
    return {
        "id": result.id,
        "url": result.url,
        "title": result.title,
        "twitterThread": result.twitter_thread,
        "linkedinPost": result.linkedin_post,
        "newsletter": result.newsletter,
        "createdAt": result.created_at,
    }


@router.post("/repurpose", response_model=dict[str, Any])
def repurpose_endpoint(body: UrlRequest, request: Request) -> dict[str, Any]:
    """Turn a blog post into a thread, a LinkedIn post and a newsletter snippet."""
    conn = request.app.state.db
    return _repurpose_dict(repurpose_url(conn, body.url))


@router.get("/repurpose/history", response_model=list[dict[str, Any]])
def repurpose_history_endpoint(
    request: Request, limit: int = Depends(history_limit)
) -> list[dict[str, Any]]:
    """Past repurpose results, newest first."""
    conn = request.app.state.db
    return [_repurpose_dict(r) for r in repurpose_history(conn, limit)]
