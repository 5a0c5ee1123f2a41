"""Text generation services: map a prompt to generated text."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import requests
from openai import AsyncOpenAI, OpenAIError

from ..clients.ollama_client import get_session
from ..clients.openai_client import get_openai
from ..config import AnalysisConfig
from ..errors import ServiceFailure

logger = logging.getLogger(__name__)


class GenerationService(Protocol):
    async def generate(self, prompt: str) -> str: ...


class OllamaGenerationService:
    """Non-streaming completions from an Ollama server (``/api/generate``)."""

    operation = "generation"

    def __init__(self, config: AnalysisConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or get_session()
        self._url = f"{config.service_endpoint.rstrip('/')}/api/generate"

    def _post(self, prompt: str) -> str:
        payload = {"model": self._config.generation_model, "prompt": prompt, "stream": False}
        try:
            response = self._session.post(self._url, json=payload, timeout=self._config.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            logger.error("Error getting LLM response from %s: %s", self._url, exc)
            raise ServiceFailure(self.operation, str(exc)) from exc
        except ValueError as exc:
            logger.error("Undecodable LLM response from %s: %s", self._url, exc)
            raise ServiceFailure(self.operation, "response is not valid JSON") from exc

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            logger.error("LLM response missing 'response' text: %.200r", data)
            raise ServiceFailure(self.operation, "response has no 'response' text")
        return text

    async def generate(self, prompt: str) -> str:
        logger.info("Requesting completion from %s", self._config.generation_model)
        text = await asyncio.to_thread(self._post, prompt)
        logger.debug("Raw %s response: %s", self._config.generation_model, text)
        return text


class OpenAIGenerationService:
    """Chat completions from the OpenAI API, one user message per prompt."""

    operation = "generation"

    def __init__(self, config: AnalysisConfig, client: AsyncOpenAI | None = None) -> None:
        self._config = config
        self._client = client or get_openai(config.openai_api_key)

    async def generate(self, prompt: str) -> str:
        logger.info("Requesting completion from %s", self._config.generation_model)
        try:
            resp = await self._client.chat.completions.create(
                model=self._config.generation_model,
                messages=[{"role": "user", "content": prompt}],
                timeout=self._config.timeout,
            )
            text = resp.choices[0].message.content
        except OpenAIError as exc:
            logger.error("Error getting LLM response from OpenAI: %s", exc)
            raise ServiceFailure(self.operation, str(exc)) from exc
        except (AttributeError, IndexError) as exc:
            logger.error("Malformed OpenAI completion response: %s", exc)
            raise ServiceFailure(self.operation, "malformed response") from exc

        if not isinstance(text, str):
            raise ServiceFailure(self.operation, "completion has no text content")
        logger.debug("Raw %s response: %s", self._config.generation_model, text)
        return text


def create_generation_service(config: AnalysisConfig) -> GenerationService:
    """Return the generation service matching ``config.backend``."""
    if config.backend == "openai":
        return OpenAIGenerationService(config)
    return OllamaGenerationService(config)

__all__ = [
    "GenerationService",
    "OllamaGenerationService",
    "OpenAIGenerationService",
    "create_generation_service",
]
