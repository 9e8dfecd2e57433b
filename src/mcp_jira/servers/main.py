"""Main FastMCP server setup for the Jira gateway."""

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from typing import Literal

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira import JiraFetcher
from mcp_jira.utils.logging import mask_sensitive
from mcp_jira.utils.tools import should_include_tool, warn_unknown_tools

from .dispatcher import DispatchedTool, ToolDispatcher, ToolSpec
from .jira import JIRA_TOOLS

logger = logging.getLogger("mcp-jira.server.main")

SERVER_NAME = "Jira MCP"

TransportName = Literal["stdio", "http"]


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP) -> AsyncIterator[None]:
    logger.info("Jira MCP server lifespan starting...")
    try:
        yield
    finally:
        logger.info("Jira MCP server lifespan shutdown complete.")


def create_server(
    fetcher: JiraFetcher,
    enabled_tools: list[str] | None = None,
    tools: Iterable[ToolSpec] = JIRA_TOOLS,
) -> FastMCP:
    """
    Build the FastMCP server exposing the Jira tools.

    Args:
        fetcher: Shared Jira client used by every tool call
        enabled_tools: Tool names to register, or None for all of them
        tools: Tool table to register from

    Returns:
        The configured server, ready to run on any transport
    """
    tools = tuple(tools)
    warn_unknown_tools(enabled_tools, (spec.name for spec in tools))

    selected = [
        spec for spec in tools if should_include_tool(spec.name, enabled_tools)
    ]
    dispatcher = ToolDispatcher(fetcher, selected)

    mcp = FastMCP(name=SERVER_NAME, lifespan=main_lifespan)
    for spec in dispatcher.tools:
        mcp.add_tool(DispatchedTool.from_spec(spec, dispatcher))
        logger.debug(f"Registered tool: {spec.name}")

    @mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
    async def _health_check_route(request: Request) -> JSONResponse:
        return await health_check(request)

    logger.info(
        f"Jira MCP server ready for {fetcher.config.url} "
        f"(token={mask_sensitive(fetcher.config.token)}, "
        f"tools={len(dispatcher.tools)})"
    )
    return mcp


async def run_server(
    server: FastMCP,
    transport: TransportName = "stdio",
    host: str = "127.0.0.1",
    port: int | None = None,
) -> None:
    """Run the server on stdio or on streamable HTTP."""
    if transport == "stdio":
        await server.run_async(transport="stdio")
        return

    if port is None:
        raise ValueError("A port is required for the HTTP transport")
    logger.info(f"Listening for MCP requests on http://{host}:{port}/mcp")
    await server.run_async(transport="streamable-http", host=host, port=port)
