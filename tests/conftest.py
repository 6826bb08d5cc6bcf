"""Shared fixtures: a local stand-in for the Open Trivia DB endpoint and a fake provider."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest
from aiohttp import test_utils, web

from trivia.models import TriviaQuestion
from trivia.providers.base import QuestionProvider
from trivia.providers.opentdb import OpenTDBProvider
from trivia.settings import TriviaSettings


def raw_question(**overrides: Any) -> Dict[str, Any]:
    """A well-formed wire record, optionally overridden field by field."""
    record = {
        "category": "General Knowledge",
        "type": "multiple",
        "difficulty": "easy",
        "question": "What is the capital of France?",
        "correct_answer": "Paris",
        "incorrect_answers": ["Lyon", "Marseille", "Nice"],
    }
    record.update(overrides)
    return record


def envelope(response_code: int = 0, results: Optional[List[Dict]] = None) -> Dict[str, Any]:
    return {"response_code": response_code, "results": [] if results is None else results}


class RecordingHandler:
    """aiohttp handler that answers with a fixed body and remembers each query."""

    def __init__(self, body: Any = None, status: int = 200, raw: Optional[bytes] = None, delay: float = 0):
        self.body = body
        self.status = status
        self.raw = raw
        self.delay = delay
        self.queries: List[Dict[str, str]] = []

    async def handle(self, request: web.Request) -> web.Response:
        self.queries.append(dict(request.query))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raw is not None:
            return web.Response(body=self.raw, status=self.status)
        return web.Response(text=json.dumps(self.body), status=self.status, content_type="application/json")


@pytest.fixture
def fetch_from():
    """Run ``fetch_questions`` against a local server driven by ``handler``."""

    def _run(handler, settings: Optional[TriviaSettings] = None, **fetch_kwargs):
        async def scenario():
            app = web.Application()
            app.router.add_get("/api.php", handler.handle)
            async with test_utils.TestServer(app) as server:
                base_url = str(server.make_url("/api.php"))
                async with OpenTDBProvider(settings, base_url=base_url) as provider:
                    return await provider.fetch_questions(**fetch_kwargs)

        return asyncio.run(scenario())

    return _run


class FakeProvider(QuestionProvider):
    """Serves queued batches; queued exceptions are raised instead."""

    name = "Fake"

    def __init__(self, *batches):
        self.batches = list(batches)
        self.calls: List[Dict[str, Any]] = []

    async def fetch_questions(self, amount=None, category_id=None, difficulty=None, question_type=None):
        self.calls.append({
            "amount": amount,
            "category_id": category_id,
            "difficulty": difficulty,
            "question_type": question_type,
        })
        item = self.batches.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def make_question(number: int = 1, correct: str = "Right") -> TriviaQuestion:
    return TriviaQuestion(
        category="Science & Nature",
        question=f"Question {number}?",
        correct_answer=correct,
        incorrect_answers=["Wrong A", "Wrong B", "Wrong C"],
        difficulty="easy",
        type="multiple",
    )
