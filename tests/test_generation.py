import threading
import time
import unittest
from unittest.mock import AsyncMock, MagicMock, patch
import os
import sys

import requests
from openai import OpenAIError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from journal_insights.config import AnalysisConfig
from journal_insights.errors import ServiceFailure
from journal_insights.utils.tasks import RetryPolicy
from journal_insights.services.generation import (
    OllamaGenerationService,
    OpenAIGenerationService,
    create_generation_service,
)


class TestOllamaGenerationService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.config = AnalysisConfig(
            backend="ollama",
            service_endpoint="http://localhost:11434",
            generation_model="llama3.1:8b",
            timeout=60,
        )
        self.session = MagicMock()
        self.response = MagicMock()
        self.session.post.return_value = self.response
        self.service = OllamaGenerationService(self.config, session=self.session)

    async def test_generate(self):
        self.response.json.return_value = {"response": "• Work\n• Money", "done": True}

        result = await self.service.generate("List topics")

        self.assertEqual(result, "• Work\n• Money")
        self.session.post.assert_called_once_with(
            "http://localhost:11434/api/generate",
            json={"model": "llama3.1:8b", "prompt": "List topics", "stream": False},
            timeout=60,
        )

    async def test_timeout_is_service_failure(self):
        self.session.post.side_effect = requests.Timeout("read timed out")
        with self.assertRaises(ServiceFailure) as ctx:
            await self.service.generate("List topics")
        self.assertEqual(ctx.exception.operation, "generation")

    async def test_timed_out_request_finishes_before_retry(self):
        lock = threading.Lock()
        state = {"active": 0, "peak": 0, "attempts": 0}

        def post(url, json, timeout):
            with lock:
                state["active"] += 1
                state["attempts"] += 1
                state["peak"] = max(state["peak"], state["active"])
                attempt = state["attempts"]
            try:
                time.sleep(0.05)
                if attempt == 1:
                    raise requests.Timeout("read timed out")
                return self.response
            finally:
                with lock:
                    state["active"] -= 1

        self.session.post.side_effect = post
        self.response.json.return_value = {"response": "• Work"}

        result = await RetryPolicy(max_retries=1).call(
            "generation", lambda: self.service.generate("List topics")
        )

        self.assertEqual(result, "• Work")
        self.assertEqual(state["attempts"], 2)
        self.assertEqual(state["peak"], 1)

    async def test_missing_response_field(self):
        self.response.json.return_value = {"error": "model 'llama3.1:8b' not found"}
        with self.assertRaises(ServiceFailure):
            await self.service.generate("List topics")

    async def test_non_object_payload(self):
        self.response.json.return_value = ["unexpected"]
        with self.assertRaises(ServiceFailure):
            await self.service.generate("List topics")


class TestOpenAIGenerationService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.config = AnalysisConfig(backend="openai", generation_model="gpt-4o-mini", timeout=45)
        self.client = MagicMock()
        self.client.chat.completions.create = AsyncMock()
        self.service = OpenAIGenerationService(self.config, client=self.client)

    async def test_generate(self):
        completion = MagicMock()
        completion.choices = [MagicMock()]
        completion.choices[0].message.content = "A concise report."
        self.client.chat.completions.create.return_value = completion

        result = await self.service.generate("Write a report")

        self.assertEqual(result, "A concise report.")
        self.client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Write a report"}],
            timeout=45,
        )

    async def test_api_error(self):
        self.client.chat.completions.create.side_effect = OpenAIError("rate limited")
        with self.assertRaises(ServiceFailure):
            await self.service.generate("Write a report")

    async def test_null_content(self):
        completion = MagicMock()
        completion.choices = [MagicMock()]
        completion.choices[0].message.content = None
        self.client.chat.completions.create.return_value = completion
        with self.assertRaises(ServiceFailure):
            await self.service.generate("Write a report")


class TestCreateGenerationService(unittest.TestCase):

    @patch('journal_insights.services.generation.get_session')
    def test_ollama_backend(self, mock_get_session):
        self.assertIsInstance(
            create_generation_service(AnalysisConfig(backend="ollama")), OllamaGenerationService
        )

    @patch('journal_insights.services.generation.get_openai')
    def test_openai_backend(self, mock_get_openai):
        self.assertIsInstance(
            create_generation_service(AnalysisConfig(backend="openai")), OpenAIGenerationService
        )


if __name__ == '__main__':
    unittest.main()
