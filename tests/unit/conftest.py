from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from openai_mcp.config.settings import get_settings
from openai_mcp.tools.gateway import ToolGateway
from openai_mcp.tools.schemas import ChatMessage


class RecordingClient:
    """Test double for the OpenAI client that records every call."""

    def __init__(self, reply: str | None = "Hello from the model", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def complete(self, *, messages: Sequence[ChatMessage], model: str) -> str | None:
        self.calls.append(
            {
                "model": model,
                "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_client():
    return RecordingClient


@pytest.fixture
def client(make_client) -> RecordingClient:
    return make_client()


@pytest.fixture
def gateway(client: RecordingClient) -> ToolGateway:
    return ToolGateway(client=client)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
