"""Pipelines — one end-to-end run from a URL to a persisted record."""

from founderfuel.pipelines.analysis import analyze_url, critique_history
from founderfuel.pipelines.repurpose import repurpose_history, repurpose_url
from founderfuel.pipelines.scrape import scrape_history, scrape_url
from founderfuel.pipelines.stages import Stage

__all__ = [
    "Stage",
    "scrape_url",
    "scrape_history",
    "analyze_url",
    "critique_history",
    "repurpose_url",
    "repurpose_history",
]
