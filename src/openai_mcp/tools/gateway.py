"""Schema-enforcing tool gateway between the MCP host and the OpenAI API."""

from __future__ import annotations

import functools
import logging
from typing import Any

import anyio
from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from openai_mcp.tools import registry
from openai_mcp.tools.llm import ChatCompletionsClient
from openai_mcp.tools.schemas import OpenAIChatInput

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response received"
API_ERROR_PREFIX = "OpenAI API error: "


class ToolGateway:
    """List and invoke the registered tools against an injected completion client."""

    def __init__(self, *, client: ChatCompletionsClient) -> None:
        self._client = client

    @property
    def client(self) -> ChatCompletionsClient:
        return self._client

    def list_tools(self) -> list[types.Tool]:
        return registry.list_tools()

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        """Run one invocation.

        Unknown tool names raise ``McpError`` (METHOD_NOT_FOUND). Every other
        failure, including invalid arguments, comes back as an error-flagged
        result so the calling agent can read and react to it.
        """
        if name != registry.OPENAI_CHAT_TOOL:
            logger.warning("Rejected call to unknown tool=%s", name)
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
            )
        return await self._openai_chat(arguments or {})

    async def _openai_chat(self, arguments: dict[str, Any]) -> types.CallToolResult:
        model = arguments.get("model", registry.DEFAULT_MODEL)
        if not registry.is_supported_model(model):
            logger.warning("Rejected unsupported model=%r", model)
            return _error_result(
                f"Unsupported model: {model}. "
                f"Must be one of: {', '.join(registry.SUPPORTED_MODELS)}"
            )

        try:
            payload = OpenAIChatInput.model_validate(arguments)
        except ValidationError as exc:
            details = _format_validation_error(exc)
            logger.warning(
                "Rejected invalid arguments tool=%s: %s", registry.OPENAI_CHAT_TOOL, details
            )
            return _error_result(f"Invalid arguments for {registry.OPENAI_CHAT_TOOL}: {details}")

        logger.info(
            "Invoking tool=%s model=%s messages=%d",
            registry.OPENAI_CHAT_TOOL,
            payload.model,
            len(payload.messages),
        )
        try:
            content = await anyio.to_thread.run_sync(
                functools.partial(
                    self._client.complete,
                    messages=list(payload.messages),
                    model=payload.model,
                )
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning("OpenAI call failed model=%s reason=%s", payload.model, exc)
            return _error_result(f"{API_ERROR_PREFIX}{exc}")

        return types.CallToolResult(
            content=[types.TextContent(type="text", text=content or NO_RESPONSE_TEXT)],
            isError=False,
        )


def _error_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=True,
    )


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err["loc"]) or "arguments"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)
