"""MCP server package for the Jira gateway."""

from .dispatcher import (
    DispatchedTool,
    ToolDispatcher,
    ToolFailure,
    ToolSpec,
    ToolSuccess,
    render_outcome,
)
from .jira import JIRA_TOOLS
from .main import create_server, run_server

__all__ = [
    "JIRA_TOOLS",
    "DispatchedTool",
    "ToolDispatcher",
    "ToolFailure",
    "ToolSpec",
    "ToolSuccess",
    "create_server",
    "render_outcome",
    "run_server",
]
