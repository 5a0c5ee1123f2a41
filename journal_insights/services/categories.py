"""Map free-form topic labels to a fixed set of analysis categories."""

from __future__ import annotations

from typing import Dict, FrozenSet

from ..models import Category

CATEGORY_SYNONYMS: Dict[Category, FrozenSet[str]] = {
    Category.MENTAL_HEALTH: frozenset({"mental health", "anxiety", "stress"}),
    Category.WORK: frozenset({"work", "projects"}),
    Category.FINANCES: frozenset({"finances", "financial management", "money"}),
    Category.SHOPPING_CONSUMPTION: frozenset(
        {"shopping and consumption", "shopping", "consumption", "purchases"}
    ),
    Category.HEALTH_WELLBEING: frozenset({"health", "exercise", "well-being"}),
}

# synonym -> category, built once from the table above
_LOOKUP: Dict[str, Category] = {
    synonym: category
    for category, synonyms in CATEGORY_SYNONYMS.items()
    for synonym in synonyms
}


def classify(topic: str) -> Category:
    """Return the category for *topic*; unknown labels map to ``GENERAL``.

    Matching is exact after lower-casing.  "Mental Health" matches,
    "My mental health" does not.
    """
    return _LOOKUP.get(topic.lower(), Category.GENERAL)

__all__ = ["CATEGORY_SYNONYMS", "classify"]
