"""FounderFuel CLI — entry-point for running the pipelines from a terminal.

Usage:
    founderfuel --help
    python cli/main.py --help

Commands:
    db init     create the SQLite database
    scrape      fetch a page and store the extraction
    analyze     score a landing page with the LLM
    repurpose   turn a blog post into social / newsletter copy
    history     list stored records
    serve       run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from founderfuel.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import sqlite3
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

import typer

from founderfuel.api.errors import ERROR_RESPONSES
from founderfuel.config import settings
from founderfuel.db import get_connection, init_db
from founderfuel.errors import ErrorKind, PipelineError
from founderfuel.log import setup_logging

app = typer.Typer(
    name="founderfuel",
    help="FounderFuel backend CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Scrape pages and run LLM critiques / repurposing against them."""
    setup_logging("DEBUG" if verbose else settings.log_level)


@contextmanager
def _open_db() -> Iterator[sqlite3.Connection]:
    conn = get_connection()
    try:
        init_db(conn)
        yield conn
    finally:
        conn.close()


@contextmanager
def _report_errors(command: str) -> Iterator[None]:
    """Print a classified pipeline error as one line and exit with status 1."""
    try:
        yield
    except PipelineError as exc:
        _, label = ERROR_RESPONSES[exc.kind]
        typer.echo(f"[{command}] {label}: {exc.message}", err=True)
        if exc.kind is ErrorKind.MALFORMED_OUTPUT:
            typer.echo(f"[{command}] Raw model output:\n{exc.raw}", err=True)  # type: ignore[attr-defined]
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------
db_app = typer.Typer(help="Database operations.", no_args_is_help=True)
app.add_typer(db_app, name="db")


@db_app.command("init")
def db_init() -> None:
    """Initialise the SQLite database (create tables if they do not exist)."""
    with _open_db():
        pass
    typer.echo(f"[db init] Database ready at {settings.db_path}")


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="URL to scrape."),
) -> None:
    """Scrape a URL, store the extraction and print it."""
    from founderfuel.pipelines.scrape import scrape_url

    typer.echo(f"[scrape] Fetching {url!r} …")
    with _report_errors("scrape"), _open_db() as conn:
        record = scrape_url(conn, url)

    typer.echo(f"[scrape] Stored      : {record.id}")
    typer.echo(f"[scrape] Title       : {record.title}")
    typer.echo(f"[scrape] Description : {record.description}")
    typer.echo(f"[scrape] Words       : {len(record.body_text.split())}")
    typer.echo("")
    typer.echo(record.body_text)


@app.command("analyze")
def analyze(
    url: str = typer.Option(..., help="Landing page URL to critique."),
) -> None:
    """Score a landing page (headline, value, CTA, trust) and print the feedback."""
    from founderfuel.pipelines.analysis import analyze_url

    typer.echo(f"[analyze] Analysing {url!r} …")
    with _report_errors("analyze"), _open_db() as conn:
        result = analyze_url(conn, url)

    typer.echo(f"[analyze] Stored   : {result.id}")
    typer.echo(f"  Headline : {result.headline_score}/10")
    typer.echo(f"  Value    : {result.value_score}/10")
    typer.echo(f"  CTA      : {result.cta_score}/10")
    typer.echo(f"  Trust    : {result.trust_score}/10")
    typer.echo(f"  Overall  : {result.overall_score}/10")
    typer.echo("")
    typer.echo(result.feedback)


@app.command("repurpose")
def repurpose(
    url: str = typer.Option(..., help="Blog post URL to repurpose."),
) -> None:
    """Turn a blog post into a Twitter/X thread, a LinkedIn post and a newsletter."""
    from founderfuel.pipelines.repurpose import repurpose_url

    typer.echo(f"[repurpose] Repurposing {url!r} …")
    with _report_errors("repurpose"), _open_db() as conn:
        result = repurpose_url(conn, url)

    typer.echo(f"[repurpose] Stored : {result.id}  title={result.title!r}")
    for heading, body in (
        ("Twitter thread", result.twitter_thread),
        ("LinkedIn post", result.linkedin_post),
        ("Newsletter", result.newsletter),
    ):
        typer.echo("\n" + "=" * 72)
        typer.echo(heading)
        typer.echo("=" * 72)
        typer.echo(body)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------
class HistoryKind(str, Enum):
    scrapes = "scrapes"
    analyses = "analyses"
    repurposes = "repurposes"


@app.command("history")
def history(
    kind: HistoryKind = typer.Argument(HistoryKind.analyses, help="Which records to list."),
    limit: Optional[int] = typer.Option(None, help="Maximum number of records."),
) -> None:
    """List stored records, newest first."""
    from founderfuel.pipelines import critique_history, repurpose_history, scrape_history

    with _open_db() as conn:
        if kind is HistoryKind.scrapes:
            lines = [
                f"  {r.scraped_at}  {r.id}  {r.url}  {r.title!r}"
                for r in scrape_history(conn, limit)
            ]
        elif kind is HistoryKind.analyses:
            lines = [
                f"  {r.analyzed_at}  {r.id}  {r.url}  overall={r.overall_score}/10"
                for r in critique_history(conn, limit)
            ]
        else:
            lines = [
                f"  {r.created_at}  {r.id}  {r.url}  {r.title!r}"
                for r in repurpose_history(conn, limit)
            ]

    if not lines:
        typer.echo(f"[history] No {kind.value} found.")
        return
    for line in lines:
        typer.echo(line)


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(4000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("founderfuel.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
