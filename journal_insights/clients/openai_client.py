"""Singleton accessor for the async OpenAI SDK client."""

from __future__ import annotations

from openai import AsyncOpenAI as _OpenAIClient

from ..config import OPENAI_API_KEY

_client: _OpenAIClient | None = None


def get_openai(api_key: str | None = None) -> _OpenAIClient:
    """Return a singleton instance of :class:`openai.AsyncOpenAI`.

    *api_key* is only consulted when the client is first created.
    """
    global _client
    if _client is None:
        _client = _OpenAIClient(api_key=api_key or OPENAI_API_KEY)
    return _client

__all__ = ["get_openai"]
