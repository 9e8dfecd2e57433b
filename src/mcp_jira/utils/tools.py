"""Tool filtering utilities for MCP Jira."""

import logging
from collections.abc import Iterable

from .env import get_env_list

logger = logging.getLogger("mcp-jira.utils.tools")

ENABLED_TOOLS_ENV = "JIRA_MCP_ENABLED_TOOLS"


def get_enabled_tools() -> list[str] | None:
    """Read the list of enabled tools from JIRA_MCP_ENABLED_TOOLS.

    Returns:
        The tool names, or None when every tool is enabled
    """
    enabled_tools = get_env_list(ENABLED_TOOLS_ENV)
    if enabled_tools is None:
        logger.debug(f"{ENABLED_TOOLS_ENV} not set - all tools enabled.")
    return enabled_tools


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check whether a tool passes the enabled-tools filter.

    Args:
        tool_name: Registered tool name
        enabled_tools: Enabled tool names, or None to include all tools

    Returns:
        True if the tool should be registered
    """
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools


def warn_unknown_tools(
    enabled_tools: list[str] | None, known_tools: Iterable[str]
) -> list[str]:
    """Log a warning for filter entries that match no tool.

    Returns:
        The unknown names, in the order given
    """
    if not enabled_tools:
        return []
    known = set(known_tools)
    unknown = [name for name in enabled_tools if name not in known]
    for name in unknown:
        logger.warning(f"Ignoring unknown tool '{name}' in {ENABLED_TOOLS_ENV}")
    return unknown
