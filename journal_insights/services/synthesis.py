"""Per-topic report synthesis."""

from __future__ import annotations

import logging
from typing import Sequence

from ..config import REPORT_LANGUAGE
from ..models import Category
from ..utils.tasks import RetryPolicy
from .generation import GenerationService
from .prompts import (
    CATEGORY_INSTRUCTIONS,
    CLOSING_INSTRUCTION,
    CONTEXT_WITH_ENTRIES,
    CONTEXT_WITHOUT_ENTRIES,
)

logger = logging.getLogger(__name__)


def build_report_prompt(
    topic: str,
    category: Category,
    context: Sequence[str],
    language: str = REPORT_LANGUAGE,
) -> str:
    """Compose the report prompt: context block, category questions, closing line."""
    if context:
        listed = "\n".join(f"- {text}" for text in context)
        prompt = CONTEXT_WITH_ENTRIES.format(topic=topic, entries=listed)
    else:
        prompt = CONTEXT_WITHOUT_ENTRIES.format(topic=topic)

    prompt += CATEGORY_INSTRUCTIONS[category].format(topic=topic)
    prompt += CLOSING_INSTRUCTION.format(language=language)
    return prompt


async def synthesize(
    topic: str,
    category: Category,
    context: Sequence[str],
    generator: GenerationService,
    policy: RetryPolicy = RetryPolicy(),
    language: str = REPORT_LANGUAGE,
) -> str:
    """Generate the report for *topic* and return the model's text as-is."""
    logger.info(
        "Synthesizing %s report for topic '%s' from %d entries", category.value, topic, len(context)
    )
    prompt = build_report_prompt(topic, category, context, language)
    return await policy.call(f"report synthesis for '{topic}'", lambda: generator.generate(prompt))

__all__ = ["build_report_prompt", "synthesize"]
