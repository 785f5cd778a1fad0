"""Main entry point for the OpenAI MCP server."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from openai_mcp.config.settings import Settings, get_settings
from openai_mcp.tools.gateway import ToolGateway
from openai_mcp.tools.llm import MissingCredentialError, OpenAIChatCompletionsClient

logger = logging.getLogger(__name__)


def build_gateway(settings: Settings, *, timeout_s: float | None = None) -> ToolGateway:
    """Build the gateway and its OpenAI client.

    Raises:
        MissingCredentialError: no API key is configured.
    """
    client = OpenAIChatCompletionsClient(
        api_key=settings.resolved_openai_api_key(),
        base_url=settings.openai_base_url,
        timeout_s=timeout_s if timeout_s is not None else settings.request_timeout_s,
    )
    return ToolGateway(client=client)


def build_server(gateway: ToolGateway, *, name: str = "openai", version: str = "0.1.0") -> Server:
    server: Server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return gateway.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await gateway.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    # Registered directly: the call_tool() decorator converts raised errors into
    # tool results, and unknown tools must surface as JSON-RPC errors.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MCP server exposing OpenAI chat completions")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: OPENAI_MCP_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="OpenAI request timeout in seconds (default: OPENAI_MCP_REQUEST_TIMEOUT_S or 60)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()

    # stdout carries the protocol, so logs go to stderr.
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        gateway = build_gateway(settings, timeout_s=args.timeout)
    except MissingCredentialError as exc:
        logger.error("Cannot start server: %s", exc)
        return 1

    server = build_server(gateway, name=settings.server_name, version=settings.server_version)
    logger.info(
        "Starting %s %s over stdio with %d tool(s)",
        settings.server_name,
        settings.server_version,
        len(gateway.list_tools()),
    )

    try:
        anyio.run(serve, server)
    except KeyboardInterrupt:
        logger.info("Server interrupted, shutting down")
    except Exception:
        logger.exception("Failed to start server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
