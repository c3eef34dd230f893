"""Prompt templates for the two LLM tasks.

Each prompt embeds the page and spells out the exact JSON object the model
must answer with.  :mod:`founderfuel.llm.parser` accepts exactly that shape
and nothing looser, so the two modules change together.
"""

from __future__ import annotations

from enum import Enum

from founderfuel.scraper.models import PageContent


class Task(str, Enum):
    CRITIQUE = "critique"
    REPURPOSE = "repurpose"


# How much of the body text each task sends to the model.
CRITIQUE_BODY_LIMIT = 3000
REPURPOSE_BODY_LIMIT = 4000


_CRITIQUE_TEMPLATE = """\
You are an expert landing page analyst. Analyze this landing page and score \
it from 1 to 10 in each category.

URL: {url}
Title: {title}
Meta Description: {description}
Page Content: {body}

Respond ONLY with a single valid JSON object in exactly this format. \
No markdown, no code fences, no text before or after the JSON:
{{
  "headlineScore": <integer 1-10>,
  "valueScore": <integer 1-10>,
  "ctaScore": <integer 1-10>,
  "trustScore": <integer 1-10>,
  "feedback": "<2-3 paragraphs of specific, actionable feedback covering: \
1) what is working well, 2) what needs improvement, 3) the top 3 specific \
recommendations>"
}}

Scoring criteria:
- headlineScore: Is the headline clear and compelling, and does it \
communicate value in under 10 words?
- valueScore: Is the value proposition immediately obvious? Does it solve a \
clear problem?
- ctaScore: Are the calls to action visible, action-oriented and well placed? \
Is there a clear next step?
- trustScore: Are there testimonials, social proof, trust badges or other \
credibility signals?"""


_REPURPOSE_TEMPLATE = """\
You are an expert content repurposing specialist for founders and \
entrepreneurs. Turn the blog post below into three different content formats.

URL: {url}
BLOG TITLE: {title}
BLOG DESCRIPTION: {description}
BLOG CONTENT: {body}

Respond ONLY with a single valid JSON object in exactly this format. \
No markdown, no code fences, no text before or after the JSON:
{{
  "twitterThread": "<a Twitter/X thread of 5-7 tweets, one tweet per line, \
each starting with its number (1/, 2/, ...) and under 280 characters; open \
with a hook and keep it engaging>",
  "linkedinPost": "<a professional LinkedIn post of 300-500 words: start with \
a hook, share the key insights, add a personal perspective, end with a \
question or call to action; use line breaks for readability>",
  "newsletter": "<a newsletter snippet of 200-300 words in a conversational \
tone: highlight the key takeaway, summarise briefly and say why readers \
should care>"
}}

All three values must be non-empty strings. Escape line breaks inside the \
strings as \\n."""


def build_prompt(task: Task, url: str, page: PageContent) -> str:
    """Render the instruction string for *task* about the page at *url*."""
    if task is Task.CRITIQUE:
        template, limit = _CRITIQUE_TEMPLATE, CRITIQUE_BODY_LIMIT
    elif task is Task.REPURPOSE:
        template, limit = _REPURPOSE_TEMPLATE, REPURPOSE_BODY_LIMIT
    else:
        raise ValueError(f"Unknown task: {task!r}")

    return template.format(
        url=url,
        title=page.title,
        description=page.description,
        body=page.body_text[:limit],
    )
