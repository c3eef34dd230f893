"""Landing-page analysis endpoints.

Routes
------
POST /api/analyze     Body: {"url": "https://..."}   → analyze_url
GET  /api/analyses    ?limit=20                      → critique_history
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from founderfuel.api.routers.common import UrlRequest, history_limit
from founderfuel.db.models import CritiqueResult
from founderfuel.pipelines.analysis import analyze_url, critique_history

router = APIRouter()


def _critique_dict(result: CritiqueResult) -> dict[str, Any]:
    return {
        "id": result.id,
        "url": result.url,
        "headlineScore": result.headline_score,
        "valueScore": result.value_score,
        "ctaScore": result.cta_score,
        "trustScore": result.trust_score,
        "overallScore": result.overall_score,
        "feedback": result.feedback,
        "analyzedAt": result.analyzed_at,
    }


@router.post("/analyze", response_model=dict[str, Any])
def analyze_endpoint(body: UrlRequest, request: Request) -> dict[str, Any]:
    """Score a landing page and return the stored critique."""
    conn = request.app.state.db
    return _critique_dict(analyze_url(conn, body.url))


@router.get("/analyses", response_model=list[dict[str, Any]])
def analyses_endpoint(
    request: Request, limit: int = Depends(history_limit)
) -> list[dict[str, Any]]:
    """Past critiques, newest first."""
    conn = request.app.state.db
    return [_critique_dict(r) for r in critique_history(conn, limit)]
