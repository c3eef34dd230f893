"""Pydantic schemas for the JSON payloads the model is asked to return.

Field aliases are the camelCase names used in the prompts; attributes are
snake_case.  Validation is strict: scores must be real JSON integers in
[1, 10] and text fields must be non-blank strings.  Nothing is clamped or
coerced.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

Score = Annotated[StrictInt, Field(ge=1, le=10)]
Text = Annotated[StrictStr, Field(min_length=1)]


def round_half_up_mean(*scores: int) -> int:
    """Mean of *scores* rounded half-up (6.5 → 7, 6.25 → 6).

    Python's ``round`` rounds halves to even (``round(6.5) == 6``), so the
    rounding is done in integer arithmetic instead.
    """
    total, count = sum(scores), len(scores)
    return (2 * total + count) // (2 * count)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, frozen=True)


class CritiqueScores(_Payload):
    headline_score: Score = Field(alias="headlineScore")
    value_score: Score = Field(alias="valueScore")
    cta_score: Score = Field(alias="ctaScore")
    trust_score: Score = Field(alias="trustScore")
    feedback: Text

    @property
    def overall_score(self) -> int:
        return round_half_up_mean(
            self.headline_score, self.value_score, self.cta_score, self.trust_score
        )


class RepurposedContent(_Payload):
    twitter_thread: Text = Field(alias="twitterThread")
    linkedin_post: Text = Field(alias="linkedinPost")
    newsletter: Text
