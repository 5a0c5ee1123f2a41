"""Embedding services: map text to a fixed-dimension vector.

Two backends are provided: a local Ollama server (``/api/embeddings``) and
the OpenAI embeddings API.  Both expose the same coroutine, ``embed(text)``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import requests
from openai import AsyncOpenAI, OpenAIError

from ..clients.ollama_client import get_session
from ..clients.openai_client import get_openai
from ..config import AnalysisConfig
from ..errors import ServiceFailure
from ..models import Embedding

logger = logging.getLogger(__name__)


class EmbeddingService(Protocol):
    async def embed(self, text: str) -> Embedding: ...


def _validate_embedding(operation: str, value: Any) -> Embedding:
    """Return *value* as a list of floats or raise :class:`ServiceFailure`."""
    if not isinstance(value, list) or not value:
        raise ServiceFailure(operation, f"expected a non-empty list of numbers, got {type(value).__name__}")
    try:
        return [float(x) for x in value]
    except (TypeError, ValueError) as exc:
        raise ServiceFailure(operation, "embedding contains non-numeric values") from exc


class OllamaEmbeddingService:
    """Embeddings from an Ollama server."""

    operation = "embedding"

    def __init__(self, config: AnalysisConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or get_session()
        self._url = f"{config.service_endpoint.rstrip('/')}/api/embeddings"

    def _post(self, text: str) -> Embedding:
        payload = {"model": self._config.embedding_model, "prompt": text}
        try:
            response = self._session.post(self._url, json=payload, timeout=self._config.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            logger.error("Error getting embedding from %s: %s", self._url, exc)
            raise ServiceFailure(self.operation, str(exc)) from exc
        except ValueError as exc:
            logger.error("Undecodable embedding response from %s: %s", self._url, exc)
            raise ServiceFailure(self.operation, "response is not valid JSON") from exc

        if not isinstance(data, dict) or "embedding" not in data:
            logger.error("Embedding response missing 'embedding' field: %.200r", data)
            raise ServiceFailure(self.operation, "response has no 'embedding' field")
        return _validate_embedding(self.operation, data["embedding"])

    async def embed(self, text: str) -> Embedding:
        """Generate a vector embedding for *text* using the configured model."""
        logger.info("Generating embedding for text (first 50 chars): %s…", text[:50])
        embedding = await asyncio.to_thread(self._post, text)
        logger.debug("Generated embedding of length %d", len(embedding))
        return embedding


class OpenAIEmbeddingService:
    """Embeddings from the OpenAI API."""

    operation = "embedding"

    def __init__(self, config: AnalysisConfig, client: AsyncOpenAI | None = None) -> None:
        self._config = config
        self._client = client or get_openai(config.openai_api_key)

    async def embed(self, text: str) -> Embedding:
        """Generate a vector embedding for *text* using the configured model."""
        logger.info("Generating embedding for text (first 50 chars): %s…", text[:50])
        try:
            response = await self._client.embeddings.create(
                model=self._config.embedding_model,
                input=text,
                timeout=self._config.timeout,
            )
            value = response.data[0].embedding
        except OpenAIError as exc:
            logger.error("Error getting embedding from OpenAI: %s", exc)
            raise ServiceFailure(self.operation, str(exc)) from exc
        except (AttributeError, IndexError) as exc:
            logger.error("Malformed OpenAI embedding response: %s", exc)
            raise ServiceFailure(self.operation, "malformed response") from exc

        embedding = _validate_embedding(self.operation, value)
        logger.debug("Generated embedding of length %d", len(embedding))
        return embedding


def create_embedding_service(config: AnalysisConfig) -> EmbeddingService:
    """Return the embedding service matching ``config.backend``."""
    if config.backend == "openai":
        return OpenAIEmbeddingService(config)
    return OllamaEmbeddingService(config)

__all__ = [
    "EmbeddingService",
    "OllamaEmbeddingService",
    "OpenAIEmbeddingService",
    "create_embedding_service",
]
