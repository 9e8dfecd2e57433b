"""
Utility functions for the MCP Jira integration.
This package provides various utility functions used throughout the codebase.
"""

from .env import get_env_int, get_env_list, get_required_env, is_env_ssl_verify
from .logging import mask_sensitive
from .tools import get_enabled_tools, should_include_tool, warn_unknown_tools

__all__ = [
    "get_enabled_tools",
    "get_env_int",
    "get_env_list",
    "get_required_env",
    "is_env_ssl_verify",
    "mask_sensitive",
    "should_include_tool",
    "warn_unknown_tools",
]
