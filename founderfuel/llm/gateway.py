"""Single-shot chat model invocation.

Chat providers
--------------
``ollama`` (default)
    LangChain ``ChatOllama`` against ``OLLAMA_BASE_URL`` / ``OLLAMA_CHAT_MODEL``.

``openai``
    LangChain ``ChatOpenAI`` with ``OPENAI_CHAT_MODEL``.
    Requires ``OPENAI_API_KEY`` to be set.

Set ``LLM_PROVIDER=openai`` in your ``.env`` to switch providers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from langchain_core.messages import HumanMessage

from founderfuel.config import settings
from founderfuel.errors import GenerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationParams:
    """Per-task generation settings.

    ``model`` overrides the provider's configured model name when set.
    """

    temperature: float
    model: Optional[str] = None


def critique_params() -> GenerationParams:
    """Low temperature so repeated critiques of one page score consistently."""
    return GenerationParams(temperature=settings.critique_temperature)


def repurpose_params() -> GenerationParams:
    """Higher temperature for more varied copy."""
    return GenerationParams(temperature=settings.repurpose_temperature)


# ---------------------------------------------------------------------------
# LLM helpers
# ---------------------------------------------------------------------------

def _get_llm(params: GenerationParams) -> Any:
    """Return a configured LangChain chat model based on ``settings``."""
    if settings.llm_provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=params.model or settings.openai_chat_model,
            temperature=params.temperature,
            timeout=settings.llm_timeout,
            max_retries=0,
        )

    from langchain_ollama import ChatOllama

    return ChatOllama(
        model=params.model or settings.ollama_chat_model,
        base_url=settings.ollama_base_url,
        temperature=params.temperature,
        client_kwargs={"timeout": settings.llm_timeout},
    )


def _content_text(response: Any) -> str:
    """Flatten a chat response to plain text.

    Some providers return a list of content parts instead of a string.
    """
    content = response.content if hasattr(response, "content") else response
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate(prompt: str, params: GenerationParams) -> str:
    """Invoke the chat model once with *prompt* and return its raw text.

    Raises:
        GenerationError: The call failed for any reason (network, auth,
            quota, timeout, provider misconfiguration).  The original
            exception is chained as ``__cause__``.
    """
    logger.debug(
        "Invoking %s model (temperature=%s, %d prompt chars)",
        settings.llm_provider,
        params.temperature,
        len(prompt),
    )
    try:
        llm = _get_llm(params)
        response = llm.invoke([HumanMessage(content=prompt)])
    except Exception as exc:
        raise GenerationError(f"Model call failed: {exc}") from exc

    text = _content_text(response)
    logger.debug("Model returned %d chars", len(text))
    return text
