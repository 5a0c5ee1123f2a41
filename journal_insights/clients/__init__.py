"""Convenience re-exports for singleton SDK accessors."""

from .ollama_client import get_session as get_ollama_session  # noqa: F401
from .openai_client import get_openai  # noqa: F401

__all__ = [
    "get_ollama_session",
    "get_openai",
]
