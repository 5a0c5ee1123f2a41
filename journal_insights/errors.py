"""Exception types raised by the analysis pipeline."""

from __future__ import annotations


class JournalInsightsError(Exception):
    """Base error for the journal_insights package."""


class DimensionMismatch(JournalInsightsError, ValueError):
    """Two vectors of different length were compared."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Vectors must have the same dimension (got {left} and {right})")
        self.left = left
        self.right = right


class ServiceFailure(JournalInsightsError):
    """An embedding/generation call failed or returned an undecodable payload."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


__all__ = ["JournalInsightsError", "DimensionMismatch", "ServiceFailure"]
