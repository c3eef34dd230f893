"""LLM package — prompt building, model invocation and response parsing."""

from founderfuel.llm.gateway import (
    GenerationParams,
    critique_params,
    generate,
    repurpose_params,
)
from founderfuel.llm.parser import parse_critique, parse_repurpose, strip_fences
from founderfuel.llm.prompts import Task, build_prompt
from founderfuel.llm.schemas import CritiqueScores, RepurposedContent

__all__ = [
    "Task",
    "build_prompt",
    "GenerationParams",
    "critique_params",
    "repurpose_params",
    "generate",
    "strip_fences",
    "parse_critique",
    "parse_repurpose",
    "CritiqueScores",
    "RepurposedContent",
]
