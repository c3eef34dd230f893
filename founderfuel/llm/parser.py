"""Parsing of raw model output into validated payloads.

Two steps, always in this order:

1. :func:`strip_fences` removes a leading ```` ``` ```` (with an optional
   language tag, on its own line or not) and a trailing ```` ``` ```` if the
   model wrapped its answer in a code block.
2. The remainder is parsed with :func:`json.loads` and validated against the
   task's schema.

Anything that fails step 2 raises :class:`MalformedModelResponseError`.
There is no fallback that hunts for JSON inside prose.
"""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar

from pydantic import ValidationError

from founderfuel.errors import MalformedModelResponseError
from founderfuel.llm.schemas import CritiqueScores, RepurposedContent, _Payload

_OPENING_FENCE = re.compile(r"\A```(?:[A-Za-z][\w+-]*)?[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"(?:\r?\n)?```\Z")

P = TypeVar("P", bound=_Payload)


def strip_fences(text: str) -> str:
    """Return *text* without a surrounding Markdown code fence."""
    text = text.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def _load_object(raw: str) -> dict[str, Any]:
    body = strip_fences(raw)
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedModelResponseError(
            f"Model response is not valid JSON: {exc}", raw=raw
        ) from exc

    if not isinstance(data, dict):
        raise MalformedModelResponseError(
            f"Model response is JSON {type(data).__name__}, expected an object",
            raw=raw,
        )
    return data


def _validate(schema: type[P], raw: str) -> P:
    data = _load_object(raw)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise MalformedModelResponseError(
            f"Model response does not match the expected fields: {problems}",
            raw=raw,
        ) from exc


def parse_critique(raw: str) -> CritiqueScores:
    """Parse a critique answer; see :class:`~founderfuel.llm.schemas.CritiqueScores`."""
    return _validate(CritiqueScores, raw)


def parse_repurpose(raw: str) -> RepurposedContent:
    """Parse a repurpose answer; see :class:`~founderfuel.llm.schemas.RepurposedContent`."""
    return _validate(RepurposedContent, raw)
