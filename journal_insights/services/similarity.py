"""Cosine similarity scoring and ranking of journal entries."""

from __future__ import annotations

import math
from typing import Hashable, Iterable, List, Sequence, Tuple, TypeVar

from ..config import MAX_CONTEXT_ENTRIES, SIMILARITY_THRESHOLD
from ..errors import DimensionMismatch
from ..models import JournalEntry, ScoredEntry

K = TypeVar("K", bound=Hashable)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return dot(a, b) / (|a| * |b|), or ``0.0`` if either vector is all zeros."""
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    if norm_a == 0 or norm_b == 0:
        return 0.0
    similarity = dot / (math.sqrt(norm_a) * math.sqrt(norm_b))
    # float rounding can push parallel vectors a hair past 1
    return max(-1.0, min(1.0, similarity))


def score(query: Sequence[float], candidates: Iterable[Tuple[K, Sequence[float]]]) -> List[Tuple[K, float]]:
    """Score every ``(id, vector)`` candidate against *query*.

    Results are ordered by descending similarity; equal scores keep their
    input order.
    """
    scored = [(key, cosine_similarity(query, vector)) for key, vector in candidates]
    return sorted(scored, key=lambda item: item[1], reverse=True)


def select_relevant(
    query: Sequence[float],
    entries: Sequence[JournalEntry],
    *,
    threshold: float = SIMILARITY_THRESHOLD,
    limit: int = MAX_CONTEXT_ENTRIES,
) -> List[ScoredEntry]:
    """Return at most *limit* entries scoring strictly above *threshold*.

    Entries without an embedding are not candidates.
    """
    candidates = [(idx, entry.embedding) for idx, entry in enumerate(entries) if entry.embedding is not None]
    ranked = score(query, candidates)
    return [
        ScoredEntry(entry=entries[idx], similarity=similarity)
        for idx, similarity in ranked
        if similarity > threshold
    ][:limit]

__all__ = ["cosine_similarity", "score", "select_relevant"]
