"""Utility helpers shared across services."""

from .tasks import RetryPolicy  # noqa: F401

__all__ = ["RetryPolicy"]
