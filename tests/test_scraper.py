"""Tests for the scraper stages — URL validation, fetch and content extraction.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` tests.
- Extraction is a pure function of the HTML string and needs no mocking.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from founderfuel.errors import (
    BlockedError,
    ErrorKind,
    FetchError,
    FetchTimeoutError,
    InvalidUrlError,
)
from founderfuel.scraper.extractor import (
    BODY_TEXT_LIMIT,
    NO_DESCRIPTION,
    NO_TITLE,
    extract_content,
)
from founderfuel.scraper.fetcher import fetch_url
from founderfuel.scraper.models import PageContent, RawPage
from founderfuel.scraper.validator import validate_url


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_LANDING_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>  Acme Rockets — Launch Faster  </title>
  <meta name="description" content=" Rockets for busy founders. ">
  <meta property="og:description" content="OG fallback text">
  <style>.hero { color: red; }</style>
</head>
<body>
  <h1>Launch   your startup
      into orbit</h1>
  <p>Trusted by 10,000 teams.</p>
  <script>alert(1)</script>
  <noscript>Please enable JavaScript</noscript>
  <iframe src="https://ads.example.com">Ad frame text</iframe>
  <a href="/signup">Start free trial</a>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# validate_url
# ---------------------------------------------------------------------------

class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://example.com/path?q=1", "HTTPS://Example.com/"],
    )
    def test_accepts_http_and_https(self, url: str) -> None:
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "ftp://x",
            "not a url",
            "",
            "javascript:alert(1)",
            "file:///etc/passwd",
            "mailto:founder@example.com",
            "https://",
            "http://example.com:99999/",
        ],
    )
    def test_rejects_everything_else(self, url: str) -> None:
        with pytest.raises(InvalidUrlError) as excinfo:
            validate_url(url)
        assert excinfo.value.url == url
        assert excinfo.value.kind is ErrorKind.INVALID_URL

    @pytest.mark.parametrize(
        "url",
        [
            "http://exa mple.com/",
            "https://exa%20mple.com/",
            "http://exa<mple.com/",
            "http://exa|mple.com/",
        ],
    )
    def test_rejects_hosts_with_forbidden_characters(self, url: str) -> None:
        with pytest.raises(InvalidUrlError):
            validate_url(url)

    @pytest.mark.parametrize(
        "url",
        ["http://localhost:4000/", "http://[::1]:8080/path", "https://sub-domain.example.co.uk/"],
    )
    def test_accepts_ordinary_hosts(self, url: str) -> None:
        assert validate_url(url) == url

    def test_message_names_the_input(self) -> None:
        with pytest.raises(InvalidUrlError, match="Invalid URL format: ftp://x"):
            validate_url("ftp://x")


# ---------------------------------------------------------------------------
# fetch_url
# ---------------------------------------------------------------------------

class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://example.com/landing").mock(
                return_value=httpx.Response(200, text=_LANDING_HTML)
            )
            raw = fetch_url("https://example.com/landing")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/landing"
        assert raw.status_code == 200
        assert "<title>" in raw.html

    def test_sends_bot_user_agent_and_accept_header(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text="<html></html>")
            )
            fetch_url("https://example.com/")

        headers = route.calls.last.request.headers
        assert "FounderFuel" in headers["User-Agent"]
        assert headers["Accept"].startswith("text/html")

    @pytest.mark.parametrize("status", [403, 429])
    def test_blocking_statuses_raise_blocked_error(self, status: int) -> None:
        with respx.mock:
            respx.get("https://example.com/").mock(return_value=httpx.Response(status))
            with pytest.raises(BlockedError) as excinfo:
                fetch_url("https://example.com/")

        assert excinfo.value.status_code == status
        assert excinfo.value.url == "https://example.com/"
        assert excinfo.value.kind is ErrorKind.BLOCKED

    def test_server_error_raises_generic_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/").mock(return_value=httpx.Response(500))
            with pytest.raises(FetchError) as excinfo:
                fetch_url("https://example.com/")

        assert not isinstance(excinfo.value, BlockedError)
        assert excinfo.value.status_code == 500
        assert excinfo.value.message == "HTTP 500: Internal Server Error"
        assert excinfo.value.kind is ErrorKind.FETCH_FAILED

    def test_not_found_is_not_a_block(self) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(return_value=httpx.Response(404))
            with pytest.raises(FetchError) as excinfo:
                fetch_url("https://example.com/missing")

        assert excinfo.value.kind is ErrorKind.FETCH_FAILED
        assert excinfo.value.status_code == 404

    def test_timeout_raises_fetch_timeout_error(self) -> None:
        with respx.mock:
            respx.get("https://slow.example.com/").mock(
                side_effect=httpx.ReadTimeout("timed out")
            )
            with pytest.raises(FetchTimeoutError) as excinfo:
                fetch_url("https://slow.example.com/")

        assert excinfo.value.kind is ErrorKind.FETCH_TIMEOUT
        assert "timed out" in excinfo.value.message

    def test_connection_error_raises_fetch_error_without_status(self) -> None:
        with respx.mock:
            respx.get("https://down.example.com/").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with pytest.raises(FetchError) as excinfo:
                fetch_url("https://down.example.com/")

        assert excinfo.value.status_code is None
        assert excinfo.value.kind is ErrorKind.FETCH_FAILED

    def test_single_attempt_only(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(return_value=httpx.Response(503))
            with pytest.raises(FetchError):
                fetch_url("https://example.com/")

        assert route.call_count == 1


# ---------------------------------------------------------------------------
# extract_content
# ---------------------------------------------------------------------------

class TestExtractTitle:
    def test_extracts_trimmed_title(self) -> None:
        assert extract_content(_LANDING_HTML).title == "Acme Rockets — Launch Faster"

    def test_missing_title_uses_fallback(self) -> None:
        assert extract_content("<html><body>hi</body></html>").title == NO_TITLE
        assert NO_TITLE == "No title found"

    def test_blank_title_uses_fallback(self) -> None:
        html = "<html><head><title>   </title></head><body></body></html>"
        assert extract_content(html).title == NO_TITLE

    def test_first_title_wins(self) -> None:
        html = "<html><head><title>First</title><title>Second</title></head></html>"
        assert extract_content(html).title == "First"


class TestExtractDescription:
    def test_meta_description_preferred(self) -> None:
        assert extract_content(_LANDING_HTML).description == "Rockets for busy founders."

    def test_falls_back_to_og_description(self) -> None:
        html = (
            '<html><head><meta property="og:description" content="From OG">'
            "</head><body></body></html>"
        )
        assert extract_content(html).description == "From OG"

    def test_empty_meta_description_falls_through(self) -> None:
        html = (
            '<html><head><meta name="description" content="  ">'
            '<meta property="og:description" content="From OG"></head></html>'
        )
        assert extract_content(html).description == "From OG"

    def test_missing_description_uses_fallback(self) -> None:
        assert extract_content("<html></html>").description == NO_DESCRIPTION
        assert NO_DESCRIPTION == "No description found"


class TestExtractBodyText:
    def test_strips_non_content_subtrees(self) -> None:
        text = extract_content(_LANDING_HTML).body_text
        assert "alert(1)" not in text
        assert "enable JavaScript" not in text
        assert "Ad frame text" not in text
        assert "color: red" not in text

    def test_keeps_visible_text(self) -> None:
        text = extract_content(_LANDING_HTML).body_text
        assert "Trusted by 10,000 teams." in text
        assert "Start free trial" in text

    def test_whitespace_runs_collapse(self) -> None:
        text = extract_content(_LANDING_HTML).body_text
        assert "Launch your startup into orbit" in text
        assert "  " not in text
        assert "\n" not in text
        assert text == text.strip()

    def test_truncated_to_limit(self) -> None:
        html = "<html><body><p>" + ("word " * 3000) + "</p></body></html>"
        text = extract_content(html).body_text
        assert len(text) == BODY_TEXT_LIMIT == 5000

    def test_fragment_without_body(self) -> None:
        page = extract_content("<p>Just   a fragment</p>")
        assert page.body_text == "Just a fragment"
        assert page.title == NO_TITLE


class TestExtractContent:
    def test_returns_page_content(self) -> None:
        page = extract_content(_LANDING_HTML)
        assert isinstance(page, PageContent)

    @pytest.mark.parametrize(
        "html",
        [
            "",
            "<html",
            "<<<>>>",
            "<div><p>unclosed <b>tags",
            "<html><head><title>Broken</head><body><p>x</body>",
            "\x00\x01 binary-ish",
        ],
    )
    def test_malformed_html_does_not_raise(self, html: str) -> None:
        page = extract_content(html)
        assert isinstance(page.title, str)
        assert isinstance(page.body_text, str)
        assert page.description == NO_DESCRIPTION
