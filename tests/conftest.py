"""Shared test fixtures for ghmodels.

Provides explicit settings objects and canned chat-completion responses so no
test reads or mutates the real process environment.
"""

import httpx
import pytest

from ghmodels.settings import ModelsSettings


@pytest.fixture(autouse=True)
def _clear_models_env(monkeypatch):
    """Keep a developer's real token out of tests that fall back to os.environ."""
    for name in ("GITHUB_MODELS_TOKEN", "GITHUB_MODELS_ENDPOINT", "GITHUB_MODELS_API_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> ModelsSettings:
    """Settings with only the token set."""
    return ModelsSettings(token="abc123")


def success_response(content: str = "Hello!", model: str = "gpt-4o") -> dict:
    """Build a realistic chat completion response dict."""
    return {
        "id": "chatcmpl-test123",
        "object": "chat.completion",
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def make_transport(handler) -> httpx.MockTransport:
    """Create an httpx.MockTransport from a handler function."""
    return httpx.MockTransport(handler)
