"""Domain models used across the project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

# Type alias for embedding vectors; dimensionality is fixed by the embedding model
Embedding = List[float]

# Topic label -> report text, in topic-extraction order
AnalysisResult = Dict[str, str]


@dataclass(slots=True)
class JournalEntry:
    """A dated free-text journal entry and its (lazily computed) embedding."""

    date: date
    text: str
    embedding: Optional[Embedding] = None


@dataclass(frozen=True, slots=True)
class ScoredEntry:
    """A journal entry paired with its similarity to a topic query."""

    entry: JournalEntry
    similarity: float


class Category(str, Enum):
    """Analytical lens a topic is reported under."""

    MENTAL_HEALTH = "mental-health"
    WORK = "work"
    FINANCES = "finances"
    SHOPPING_CONSUMPTION = "shopping-consumption"
    HEALTH_WELLBEING = "health-wellbeing"
    GENERAL = "general"


__all__ = ["Embedding", "AnalysisResult", "JournalEntry", "ScoredEntry", "Category"]
