"""
Shared fixtures: settings without environment leakage, a fake completion
API built on httpx.MockTransport, and a TestClient wired to both.
"""
import json
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

# Add backend to path
backend_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend_dir))

from main import create_app  # noqa: E402
from src.api.dependencies.chat import get_chat_controller  # noqa: E402
from src.config.settings import Settings  # noqa: E402
from src.controllers.chat_controller import ChatController  # noqa: E402
from src.services.completions import CompletionClient  # noqa: E402

TEST_API_KEY = "sk-test-key"


class FakeCompletionAPI:
    """Records outbound requests and replies with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-3.5-turbo-0125",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": "Hello there!"},
                }
            ],
        }
        self.error: Optional[Exception] = None

    def reply(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Settings."""
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "OPENAI_BASE_URL",
        "OPENAI_TIMEOUT_SECONDS",
        "ENVIRONMENT",
        "SYSTEM_ENVIRONMENT",
        "GRAPHQL_IDE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        values = {"openai_api_key": TEST_API_KEY}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeCompletionAPI:
    return FakeCompletionAPI()


@pytest.fixture
def make_client(upstream) -> Callable[[Settings], TestClient]:
    """Build a TestClient whose controller talks to the fake completion API."""

    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_chat_controller] = lambda: ChatController(
            settings, CompletionClient(settings, transport=upstream.transport)
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, settings) -> TestClient:
    return make_client(settings)
