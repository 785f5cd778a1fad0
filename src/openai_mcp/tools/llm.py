"""OpenAI chat completions client used by the openai_chat tool."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Protocol
from urllib import error, request

from openai_mcp.tools.schemas import ChatMessage

logger = logging.getLogger(__name__)


class MissingCredentialError(RuntimeError):
    """Raised when the client is built without an API key."""


class ChatCompletionError(RuntimeError):
    """Raised when the remote API call fails or returns an unusable body."""


class ChatCompletionsClient(Protocol):
    """Interface for a single chat completion round-trip."""

    def complete(self, *, messages: Sequence[ChatMessage], model: str) -> str | None: ...


class OpenAIChatCompletionsClient:
    """Small OpenAI client using the chat completions REST API.

    One request per call: no retries, no extra sampling parameters. The
    configured ``timeout_s`` is the only bound on how long a call may take.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        timeout_s: float = 60.0,
    ) -> None:
        if not api_key:
            raise MissingCredentialError("OPENAI_API_KEY environment variable is required")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    def complete(self, *, messages: Sequence[ChatMessage], model: str) -> str | None:
        payload = {
            "model": model,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
        }
        response_json = self._request(payload)
        return _extract_content(response_json)

    def _request(self, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/chat/completions"
        logger.debug(
            "OpenAI request model=%s messages=%d url=%s timeout_s=%s",
            payload["model"],
            len(payload["messages"]),
            url,
            self.timeout_s,
        )
        req = request.Request(
            url=url,
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
        )
        try:
            with request.urlopen(req, timeout=self.timeout_s) as response:
                raw = response.read().decode("utf-8")
        except error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace")
            raise ChatCompletionError(
                f"{exc.code} {_error_detail(body) or exc.reason}"
            ) from exc
        except error.URLError as exc:
            raise ChatCompletionError(f"Connection error: {exc.reason}") from exc
        except TimeoutError as exc:
            raise ChatCompletionError("Request timed out.") from exc

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ChatCompletionError("OpenAI returned a non-JSON response") from exc
        if not isinstance(parsed, dict):
            raise ChatCompletionError("OpenAI response must be a JSON object")
        return parsed


def _extract_content(response_json: dict[str, Any]) -> str | None:
    choices = response_json.get("choices")
    if choices is None:
        raise ChatCompletionError("OpenAI response did not contain choices")
    if not isinstance(choices, list):
        raise ChatCompletionError("OpenAI response choices must be a list")
    if not choices:
        return None

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, dict) and isinstance(item.get("text"), str):
                parts.append(item["text"])
        return "".join(parts)
    return None


def _error_detail(body: str) -> str:
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        return body.strip()[:400]
    if isinstance(parsed, dict):
        detail = parsed.get("error")
        if isinstance(detail, dict) and isinstance(detail.get("message"), str):
            return detail["message"]
    return body.strip()[:400]
