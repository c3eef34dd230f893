"""Request schemas and query helpers shared by the routers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictStr

from founderfuel.config import settings


class UrlRequest(BaseModel):
    url: StrictStr


def history_limit(limit: Optional[str] = None) -> int:
    """``?limit=`` query dependency; missing, non-numeric or < 1 means the default."""
    try:
        value = int(limit) if limit is not None else 0
    except ValueError:
        value = 0
    return value if value > 0 else settings.history_limit
