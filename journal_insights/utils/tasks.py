"""Retry policy applied to every external service call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from ..config import AnalysisConfig
from ..errors import ServiceFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Run a service coroutine, retrying :class:`ServiceFailure` a bounded number of times.

    Per-call timeouts belong to the transport (``requests`` / ``AsyncOpenAI``),
    which reports expiry as :class:`ServiceFailure`.  An attempt is therefore
    always finished before the next one starts.  Anything else (for example a
    :class:`~journal_insights.errors.DimensionMismatch`) propagates on the
    first occurrence.
    """

    max_retries: int = 0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "RetryPolicy":
        return cls(max_retries=config.max_retries)

    async def call(self, operation: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Await ``factory()`` under this policy.

        *factory* is invoked once per attempt so that each retry gets a fresh
        coroutine.
        """
        attempts = self.max_retries + 1
        attempt = 1
        while True:
            try:
                return await factory()
            except ServiceFailure as exc:
                if attempt >= attempts:
                    logger.error("%s failed after %d attempt(s): %s", operation, attempts, exc)
                    raise
                logger.warning(
                    "%s failed (attempt %d/%d): %s – retrying", operation, attempt, attempts, exc
                )
                attempt += 1

__all__ = ["RetryPolicy"]
