"""End-to-end journal analysis: topics, retrieval, classification, reports."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Sequence

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import AnalysisConfig, REPORT_LANGUAGE
from ..models import AnalysisResult, JournalEntry
from ..services.categories import classify
from ..services.embeddings import EmbeddingService, create_embedding_service
from ..services.generation import GenerationService, create_generation_service
from ..services.journal_loader import read_journal_entries
from ..services.similarity import select_relevant
from ..services.synthesis import synthesize
from ..services.topics import extract_topics
from ..utils.tasks import RetryPolicy

logger = logging.getLogger(__name__)


class AnalysisState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    EMBEDDING = "embedding"
    RETRIEVING = "retrieving"
    CLASSIFYING = "classifying"
    SYNTHESIZING = "synthesizing"
    DONE = "done"
    FAILED = "failed"


class AnalysisOrchestrator:
    """Run one analysis over a batch of embedded journal entries.

    Topics are processed one at a time, in the order the model listed them.
    A failure in any step aborts the whole run; no partial result is returned.
    """

    def __init__(
        self,
        embedder: EmbeddingService,
        generator: GenerationService,
        *,
        policy: RetryPolicy = RetryPolicy(),
        language: str = REPORT_LANGUAGE,
    ) -> None:
        self.embedder = embedder
        self.generator = generator
        self.policy = policy
        self.language = language
        self.state = AnalysisState.IDLE

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "AnalysisOrchestrator":
        return cls(
            create_embedding_service(config),
            create_generation_service(config),
            policy=RetryPolicy.from_config(config),
            language=config.report_language,
        )

    def _enter(self, state: AnalysisState) -> None:
        logger.debug("Analysis state: %s -> %s", self.state.value, state.value)
        self.state = state

    async def analyze(self, entries: Sequence[JournalEntry]) -> AnalysisResult:
        """Return a topic -> report mapping for *entries*."""
        self.state = AnalysisState.IDLE
        logger.info("--- Starting proactive journal analysis ---")

        if not entries:
            logger.info("No journal entries to analyze.")
            self._enter(AnalysisState.DONE)
            return {}

        try:
            results = await self._run(entries)
        except Exception:
            self._enter(AnalysisState.FAILED)
            raise

        self._enter(AnalysisState.DONE)
        logger.info("--- Proactive journal analysis completed (%d reports) ---", len(results))
        return results

    async def _run(self, entries: Sequence[JournalEntry]) -> AnalysisResult:
        self._enter(AnalysisState.EXTRACTING)
        topics = await extract_topics(entries, self.generator, self.policy)
        if not topics:
            logger.info("No topics identified – nothing to analyze.")
            return {}

        results: Dict[str, str] = {}
        for topic in topics:
            logger.info("Generating report for topic: '%s'", topic)

            self._enter(AnalysisState.EMBEDDING)
            topic_embedding = await self.policy.call(
                f"embedding for topic '{topic}'", lambda: self.embedder.embed(topic)
            )

            self._enter(AnalysisState.RETRIEVING)
            relevant = select_relevant(topic_embedding, entries)
            logger.info("Found %d relevant entries for '%s'", len(relevant), topic)

            self._enter(AnalysisState.CLASSIFYING)
            category = classify(topic)
            logger.info("Topic '%s' classified as %s", topic, category.value)

            self._enter(AnalysisState.SYNTHESIZING)
            results[topic] = await synthesize(
                topic,
                category,
                [scored.entry.text for scored in relevant],
                self.generator,
                self.policy,
                self.language,
            )
        return results


async def populate_embeddings(
    entries: Sequence[JournalEntry],
    embedder: EmbeddingService,
    policy: RetryPolicy = RetryPolicy(),
) -> int:
    """Fill in the embedding of every entry that has none; return how many were computed."""
    logger.info("Pre-calculating embeddings for %d journal entries…", len(entries))
    computed = 0
    for entry in entries:
        if entry.embedding is None:
            entry.embedding = await policy.call(
                f"embedding for entry dated {entry.date}", lambda: embedder.embed(entry.text)
            )
            computed += 1
    logger.info("Embeddings populated (%d new).", computed)
    return computed


async def run_async(
    journal_dir: str | Path | None = None,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Load, embed and analyze the journal in *journal_dir*."""
    config = config or AnalysisConfig()
    entries = read_journal_entries(journal_dir or config.journal_dir)

    orchestrator = AnalysisOrchestrator.from_config(config)
    computed = await populate_embeddings(entries, orchestrator.embedder, orchestrator.policy)
    results = await orchestrator.analyze(entries)

    _log_stats(len(entries), computed, len(results))
    return results


def run(
    journal_dir: str | Path | None = None,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Execute the full pipeline once."""
    return asyncio.run(run_async(journal_dir, config))


def _log_stats(total_entries: int, embedded: int, reports: int) -> None:
    logger.info("=== Journal Analysis Statistics ===")
    logger.info("Journal entries loaded: %d", total_entries)
    logger.info("Embeddings computed: %d", embedded)
    logger.info("Topic reports generated: %d", reports)
    logger.info("===================================")

__all__ = ["AnalysisState", "AnalysisOrchestrator", "populate_embeddings", "run_async", "run"]
