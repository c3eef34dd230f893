"""Scraper package — URL validation, web fetch & content extraction."""

from founderfuel.scraper.extractor import extract_content
from founderfuel.scraper.fetcher import fetch_url
from founderfuel.scraper.models import PageContent, RawPage
from founderfuel.scraper.validator import validate_url

__all__ = ["validate_url", "fetch_url", "extract_content", "RawPage", "PageContent"]
