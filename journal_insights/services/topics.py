"""Topic extraction: ask the generation model for the salient topics."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..models import JournalEntry
from ..utils.tasks import RetryPolicy
from .generation import GenerationService
from .prompts import BULLET, TOPIC_DETECTION_PROMPT

logger = logging.getLogger(__name__)


def build_topic_prompt(entries: Sequence[JournalEntry]) -> str:
    """Return the topic-detection prompt listing every entry's text."""
    listed = "\n".join(f"- {entry.text}" for entry in entries)
    return TOPIC_DETECTION_PROMPT.format(bullet=BULLET, entries=listed)


def parse_topics(response: str) -> List[str]:
    """Extract topic labels from the lines of *response* that start with ``•``.

    Preamble and any other non-bulleted lines are ignored.  Duplicates are
    kept as returned by the model.
    """
    topics: List[str] = []
    for line in response.splitlines():
        if not line.startswith(BULLET):
            continue
        label = line[len(BULLET):].strip()
        if label:
            topics.append(label)
    return topics


async def extract_topics(
    entries: Sequence[JournalEntry],
    generator: GenerationService,
    policy: RetryPolicy = RetryPolicy(),
) -> List[str]:
    """Return the topics found across *entries* (possibly empty)."""
    logger.info("Detecting topics from %d journal entries…", len(entries))
    prompt = build_topic_prompt(entries)
    raw_topics = await policy.call("topic extraction", lambda: generator.generate(prompt))

    topics = parse_topics(raw_topics)
    if not topics:
        logger.warning("Model response contained no bulleted topics: %.200r", raw_topics)
    logger.info("Identified topics: %s", topics)
    return topics

__all__ = ["build_topic_prompt", "parse_topics", "extract_topics"]
