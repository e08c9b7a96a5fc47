"""MCP wiring: exposes the tool dispatcher over the stdio transport."""
from __future__ import annotations

import asyncio
import logging
import os
import signal
from typing import Any, NoReturn, Optional

from mcp import types as mcp_types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from lm_sidekick import __version__
from lm_sidekick.dispatcher import ToolDispatcher
from lm_sidekick.logging_config import SERVICE_NAME
from lm_sidekick.providers.openai import LMStudioLLM
from lm_sidekick.settings import Settings

SERVER_NAME = SERVICE_NAME

logger = logging.getLogger(__name__)


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Register the tool list and tool call handlers of *dispatcher* on a new MCP server."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[mcp_types.Tool]:
        return [tool.to_mcp() for tool in dispatcher.list_tools()]

    @server.call_tool()
    async def call_tool(
        name: str, arguments: Optional[dict[str, Any]]
    ) -> list[mcp_types.TextContent]:
        result = await dispatcher.dispatch(name, arguments)
        return result.to_mcp()

    return server


async def _run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def _run_until_stopped(server: Server) -> bool:
    """
    Serve over stdio until the client closes stdin or SIGINT/SIGTERM arrives.

    Returns:
        ``True`` when a signal ended the session. The stdio task is then left
        running: its stdin reader is parked in a worker thread that
        cancellation cannot interrupt.
    """
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()

    def request_shutdown(sig: signal.Signals) -> None:
        logger.info("Received %s, shutting down gracefully...", sig.name)
        stop.set()

    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_shutdown, sig)
        except NotImplementedError:
            # Windows event loops; KeyboardInterrupt still reaches main()
            continue
        installed.append(sig)

    session = asyncio.create_task(_run_stdio(server))
    stopping = asyncio.create_task(stop.wait())
    logger.info("Listening on stdio")
    try:
        await asyncio.wait({session, stopping}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)

    if stop.is_set():
        return True
    stopping.cancel()
    # re-raise transport failures
    session.result()
    return False


def _exit_process(code: int) -> NoReturn:
    """Flush the log handlers and end the process without joining worker threads."""
    logging.shutdown()
    os._exit(code)


async def serve(settings: Settings) -> None:
    """Run the sidekick over stdio until the client disconnects or a signal arrives."""
    logger.info("Starting LM Studio MCP Sidekick...")
    async with LMStudioLLM.from_settings(settings) as llm:
        dispatcher = ToolDispatcher(llm)
        server = build_server(dispatcher)
        logger.info(
            "LM Studio MCP Sidekick started and ready for connections (model=%s, api_url=%s)",
            settings.model,
            settings.base_url,
        )
        signalled = await _run_until_stopped(server)
    logger.info("LM Studio MCP Sidekick stopped")
    if signalled:
        _exit_process(0)


__all__ = ["SERVER_NAME", "build_server", "serve"]
