"""Centralised configuration for journal_insights.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.  Services never read these
constants directly; they receive an :class:`AnalysisConfig` at construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Backend selection and credentials (from environment)
# ---------------------------------------------------------------------------
ANALYSIS_BACKEND: str = os.getenv("ANALYSIS_BACKEND", "ollama")
OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")

# ---------------------------------------------------------------------------
# Model names
# ---------------------------------------------------------------------------
EMBEDDING_MODEL: str = os.getenv("EMBEDDING_MODEL", "nomic-embed-text")
GENERATION_MODEL: str = os.getenv("GENERATION_MODEL", "llama3.1:8b")

# ---------------------------------------------------------------------------
# Service call policy
# ---------------------------------------------------------------------------
SERVICE_TIMEOUT: float = float(os.getenv("SERVICE_TIMEOUT", "120"))
SERVICE_MAX_RETRIES: int = int(os.getenv("SERVICE_MAX_RETRIES", "1"))

# ---------------------------------------------------------------------------
# Retrieval settings
# ---------------------------------------------------------------------------
SIMILARITY_THRESHOLD: float = 0.6
MAX_CONTEXT_ENTRIES: int = 5

# ---------------------------------------------------------------------------
# Miscellaneous
# ---------------------------------------------------------------------------
REPORT_LANGUAGE: str = os.getenv("REPORT_LANGUAGE", "English")
JOURNAL_DIR: str = os.getenv("JOURNAL_DIR", "journal")

SUPPORTED_BACKENDS = ("ollama", "openai")


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Settings handed to the embedding/generation services and the pipeline."""

    backend: str = ANALYSIS_BACKEND
    service_endpoint: str = OLLAMA_BASE_URL
    embedding_model: str = EMBEDDING_MODEL
    generation_model: str = GENERATION_MODEL
    openai_api_key: str | None = OPENAI_API_KEY
    timeout: float | None = SERVICE_TIMEOUT
    max_retries: int = SERVICE_MAX_RETRIES
    report_language: str = REPORT_LANGUAGE
    journal_dir: str = JOURNAL_DIR

    def __post_init__(self) -> None:
        if self.backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported backend {self.backend!r}; expected one of {SUPPORTED_BACKENDS}"
            )
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive (or None for no timeout)")


# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # backend
    "ANALYSIS_BACKEND",
    "OLLAMA_BASE_URL",
    "OPENAI_API_KEY",
    # models
    "EMBEDDING_MODEL",
    "GENERATION_MODEL",
    # call policy
    "SERVICE_TIMEOUT",
    "SERVICE_MAX_RETRIES",
    # retrieval
    "SIMILARITY_THRESHOLD",
    "MAX_CONTEXT_ENTRIES",
    # misc
    "REPORT_LANGUAGE",
    "JOURNAL_DIR",
    "SUPPORTED_BACKENDS",
    "AnalysisConfig",
]
