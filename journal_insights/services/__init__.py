"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from journal_insights.services import classify` without having to
know which underlying module provides the symbol.
"""

from .categories import classify  # noqa: F401
from .embeddings import create_embedding_service  # noqa: F401
from .generation import create_generation_service  # noqa: F401
from .journal_loader import read_journal_entries  # noqa: F401
from .similarity import cosine_similarity, score, select_relevant  # noqa: F401
from .synthesis import build_report_prompt, synthesize  # noqa: F401
from .topics import extract_topics, parse_topics  # noqa: F401

__all__ = [
    "classify",
    "create_embedding_service",
    "create_generation_service",
    "read_journal_entries",
    "cosine_similarity",
    "score",
    "select_relevant",
    "build_report_prompt",
    "synthesize",
    "extract_topics",
    "parse_topics",
]
