"""Error taxonomy shared by the scraper, LLM and pipeline layers.

Every core failure is a :class:`PipelineError` tagged with an
:class:`ErrorKind`.  Outer layers (API, CLI) translate errors by looking the
tag up in a table rather than by walking the class hierarchy:

    InvalidUrlError              INVALID_URL      bad input
    BlockedError                 BLOCKED          origin answered 403 / 429
    FetchError                   FETCH_FAILED     any other origin failure
    FetchTimeoutError            FETCH_TIMEOUT    origin did not answer in time
    GenerationError              GENERATION       the model call itself failed
    MalformedModelResponseError  MALFORMED_OUTPUT model output broke the contract

None of these are retried anywhere in the core.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    BLOCKED = "blocked"
    FETCH_FAILED = "fetch_failed"
    FETCH_TIMEOUT = "fetch_timeout"
    GENERATION = "generation"
    MALFORMED_OUTPUT = "malformed_output"


class PipelineError(Exception):
    """Base class for all classified pipeline failures.

    ``stage`` is filled in by the pipeline that was running when the error
    surfaced; it stays ``None`` when a component is called directly.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.stage: Optional[str] = None


class InvalidUrlError(PipelineError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL format: {url}")
        self.url = url


class BlockedError(PipelineError):
    """The target site refused to serve us (403 Forbidden / 429 Too Many Requests)."""

    kind = ErrorKind.BLOCKED

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Blocked by {url} with status {status_code}")
        self.url = url
        self.status_code = status_code


class FetchError(PipelineError):
    kind = ErrorKind.FETCH_FAILED

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    kind = ErrorKind.FETCH_TIMEOUT

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"Request to {url} timed out after {timeout:g}s")
        self.url = url
        self.timeout = timeout


class GenerationError(PipelineError):
    kind = ErrorKind.GENERATION


class MalformedModelResponseError(PipelineError):
    """The model answered, but not with the payload the prompt asked for."""

    kind = ErrorKind.MALFORMED_OUTPUT

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw
