"""HTTP fetcher: one GET per page, failures classified by status code."""

from __future__ import annotations

import logging

import httpx

from founderfuel.config import settings
from founderfuel.errors import BlockedError, FetchError, FetchTimeoutError
from founderfuel.scraper.models import RawPage

logger = logging.getLogger(__name__)

# Statuses that mean the site is refusing scrapers, not that it is broken.
_BLOCKED_STATUSES = frozenset({403, 429})


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml",
    }


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    A single attempt is made; nothing is retried.  *url* is expected to have
    passed :func:`~founderfuel.scraper.validator.validate_url` already.

    Raises:
        BlockedError: The server answered 403 or 429.
        FetchTimeoutError: No complete response within ``settings.request_timeout``.
        FetchError: Any other non-2xx status or transport failure.
    """
    logger.info("Fetching %s", url)

    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(url, settings.request_timeout) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    status = response.status_code
    if status in _BLOCKED_STATUSES:
        logger.warning("Blocked by %s (HTTP %d)", url, status)
        raise BlockedError(url, status)

    if not response.is_success:
        raise FetchError(f"HTTP {status}: {response.reason_phrase}", status_code=status)

    logger.debug("Fetched %s (HTTP %d, %d chars)", url, status, len(response.text))
    return RawPage(url=url, html=response.text, status_code=status)
