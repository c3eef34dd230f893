"""Content extraction: turns raw HTML into a :class:`PageContent`."""

from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup

from founderfuel.scraper.models import PageContent

BODY_TEXT_LIMIT = 5000
NO_TITLE = "No title found"
NO_DESCRIPTION = "No description found"

# Subtrees whose text is never page content.
_NON_CONTENT_TAGS = ["script", "style", "noscript", "iframe"]

_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _extract_title(soup: BeautifulSoup) -> str:
    """Return the trimmed text of the first ``<title>``, or the fallback."""
    tag = soup.find("title")
    title = tag.get_text().strip() if tag else ""
    return title or NO_TITLE


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = tag.get("content")
    if not isinstance(content, str):
        return None
    return content.strip() or None


def _extract_description(soup: BeautifulSoup) -> str:
    """``<meta name="description">``, then ``og:description``, then the fallback."""
    return (
        _meta_content(soup, name="description")
        or _meta_content(soup, property="og:description")
        or NO_DESCRIPTION
    )


def _extract_body_text(soup: BeautifulSoup) -> str:
    """Visible body text, whitespace-collapsed and capped at ``BODY_TEXT_LIMIT``.

    Mutates *soup*: non-content subtrees are removed first.
    """
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()

    container = soup.body
    if container is None:
        # Fragment without <body>: use the whole document minus the <head>.
        for tag in soup(["head", "title"]):
            tag.decompose()
        container = soup

    text = _WHITESPACE.sub(" ", container.get_text()).strip()
    return text[:BODY_TEXT_LIMIT]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(html: str) -> PageContent:
    """Extract title, description and body text from *html*.

    Uses BeautifulSoup's lenient ``html.parser`` so broken markup degrades to
    the fallback values instead of raising.  No network access.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    # Title and description first: body extraction strips tags from the tree.
    title = _extract_title(soup)
    description = _extract_description(soup)
    body_text = _extract_body_text(soup)

    return PageContent(title=title, description=description, body_text=body_text)
