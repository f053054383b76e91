import json
import os

# Keep the app's store in memory and start without a webhook during tests.
os.environ["TASKGEN_DATA_PATH"] = ""
os.environ["TASKGEN_WEBHOOK_URL"] = ""

import httpx
import pytest

from storage.kv_store import InMemoryStore
from storage.task_store import TaskStore
from taskgen.models import Task


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies with a fixed status."""

    def __init__(self, status_code: int = 200, body: str = "", error: Exception | None = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def webhook_handler_factory():
    def _make(status_code: int = 200, body: str = "", error: Exception | None = None):
        return RecordingHandler(status_code=status_code, body=body, error=error)
    return _make


@pytest.fixture
def sample_task():
    return Task(
        id="abc123",
        name="Research essentials",
        description="Outline subjects and weightage from the syllabus.",
        timeframe="15 minutes",
    )


@pytest.fixture
def task_store():
    return TaskStore(InMemoryStore())
