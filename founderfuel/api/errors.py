"""Translation of pipeline errors into HTTP responses.

The status and label for each error are looked up by its ``kind`` tag:

    invalid_url       400  Invalid URL
    blocked           403  Scraping Blocked          (+ statusCode)
    fetch_timeout     504  Timeout
    fetch_failed      502  Scraping Failed
    generation        502  Generation Failed
    malformed_output  502  Malformed Model Response

Request-validation failures become 400 ``Bad Request``; anything else is
logged with its traceback and answered with a generic 500.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from founderfuel.errors import ErrorKind, PipelineError

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.INVALID_URL: (400, "Invalid URL"),
    ErrorKind.BLOCKED: (403, "Scraping Blocked"),
    ErrorKind.FETCH_TIMEOUT: (504, "Timeout"),
    ErrorKind.FETCH_FAILED: (502, "Scraping Failed"),
    ErrorKind.GENERATION: (502, "Generation Failed"),
    ErrorKind.MALFORMED_OUTPUT: (502, "Malformed Model Response"),
}


def error_body(error: str, message: str, **extra: Any) -> dict[str, Any]:
    return {"error": error, "message": message, **extra}


def describe(exc: PipelineError) -> tuple[int, dict[str, Any]]:
    """Return ``(status, body)`` for *exc*."""
    status, label = ERROR_RESPONSES[exc.kind]
    extra: dict[str, Any] = {}
    if exc.kind is ErrorKind.BLOCKED:
        extra["statusCode"] = exc.status_code  # type: ignore[attr-defined]
    return status, error_body(label, exc.message, **extra)


async def _pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    status, body = describe(exc)
    logger.info(
        "%s %s -> %d (%s at stage %s)",
        request.method,
        request.url.path,
        status,
        exc.kind.value,
        exc.stage,
    )
    return JSONResponse(status_code=status, content=body)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body("Bad Request", "Request body must include a 'url' string"),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error in %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body("Internal Server Error", "An unexpected error occurred"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the handlers above to *app*."""
    app.add_exception_handler(PipelineError, _pipeline_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)
