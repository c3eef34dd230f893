"""Tests for the founderfuel CLI."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from founderfuel.db import get_connection, init_db, transaction
from founderfuel.db.critiques import insert_critique
from founderfuel.db.extractions import create_extraction
from founderfuel.errors import BlockedError
from founderfuel.llm.schemas import CritiqueScores
from founderfuel.scraper.models import PageContent, RawPage

runner = CliRunner()

_HTML = (
    "<html><head><title>Acme</title></head>"
    "<body><p>Launch faster with Acme.</p></body></html>"
)


@pytest.fixture
def clean_db(tmp_path, monkeypatch):
    """Point the workspace at a fresh directory for each test."""
    monkeypatch.setattr("founderfuel.config.settings.workspace_dir", tmp_path)
    monkeypatch.setattr("cli.main.setup_logging", lambda level: None)
    return tmp_path / "founderfuel.db"


@pytest.fixture
def site(monkeypatch):
    monkeypatch.setattr(
        "founderfuel.pipelines.stages.fetch_url",
        lambda url: RawPage(url=url, html=_HTML, status_code=200),
    )


def test_db_init_creates_database(clean_db):
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0
    assert "Database ready" in result.output
    assert clean_db.exists()


def test_scrape_prints_extraction(clean_db, site):
    result = runner.invoke(app, ["scrape", "--url", "https://acme.test/"])
    assert result.exit_code == 0
    assert "Title       : Acme" in result.output
    assert "Launch faster with Acme." in result.output


def test_analyze_prints_scores(clean_db, site, monkeypatch):
    answer = json.dumps(
        {
            "headlineScore": 8,
            "valueScore": 7,
            "ctaScore": 6,
            "trustScore": 5,
            "feedback": "Add testimonials.",
        }
    )
    monkeypatch.setattr("founderfuel.pipelines.analysis.generate", lambda prompt, params: answer)

    result = runner.invoke(app, ["analyze", "--url", "https://acme.test/"])
    assert result.exit_code == 0
    assert "Headline : 8/10" in result.output
    assert "Overall  : 7/10" in result.output
    assert "Add testimonials." in result.output


def test_repurpose_prints_all_sections(clean_db, site, monkeypatch):
    answer = json.dumps(
        {
            "twitterThread": "1/ Ship it",
            "linkedinPost": "Shipping matters.",
            "newsletter": "This week we shipped.",
        }
    )
    monkeypatch.setattr("founderfuel.pipelines.repurpose.generate", lambda prompt, params: answer)

    result = runner.invoke(app, ["repurpose", "--url", "https://acme.test/"])
    assert result.exit_code == 0
    for text in ("Twitter thread", "LinkedIn post", "Newsletter", "1/ Ship it"):
        assert text in result.output


def test_invalid_url_exits_with_error(clean_db):
    result = runner.invoke(app, ["analyze", "--url", "ftp://acme.test/"])
    assert result.exit_code == 1
    assert "Invalid URL" in result.output


def test_blocked_site_exits_with_error(clean_db, monkeypatch):
    def blocked(url):
        raise BlockedError(url, 403)

    monkeypatch.setattr("founderfuel.pipelines.stages.fetch_url", blocked)

    result = runner.invoke(app, ["scrape", "--url", "https://acme.test/"])
    assert result.exit_code == 1
    assert "Scraping Blocked" in result.output


def test_malformed_output_prints_raw_answer(clean_db, site, monkeypatch):
    monkeypatch.setattr(
        "founderfuel.pipelines.analysis.generate", lambda prompt, params: "Looks great!"
    )

    result = runner.invoke(app, ["analyze", "--url", "https://acme.test/"])
    assert result.exit_code == 1
    assert "Malformed Model Response" in result.output
    assert "Looks great!" in result.output


def test_history_empty(clean_db):
    result = runner.invoke(app, ["history"])
    assert result.exit_code == 0
    assert "No analyses found." in result.output


def test_history_lists_records(clean_db):
    conn = get_connection()
    init_db(conn)
    create_extraction(
        conn,
        "https://acme.test/",
        PageContent(title="Acme", description="d", body_text="b"),
    )
    scores = CritiqueScores.model_validate(
        {
            "headlineScore": 6,
            "valueScore": 6,
            "ctaScore": 6,
            "trustScore": 6,
            "feedback": "Fine.",
        }
    )
    with transaction(conn):
        insert_critique(conn, "https://acme.test/", scores)
    conn.close()

    result = runner.invoke(app, ["history", "analyses"])
    assert result.exit_code == 0
    assert "overall=6/10" in result.output

    result = runner.invoke(app, ["history", "scrapes", "--limit", "1"])
    assert result.exit_code == 0
    assert "'Acme'" in result.output

    result = runner.invoke(app, ["history", "repurposes"])
    assert "No repurposes found." in result.output

