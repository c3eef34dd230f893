"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from founderfuel.api import app

    uvicorn founderfuel.api:app --reload
"""

from founderfuel.api.app import app

__all__ = ["app"]
