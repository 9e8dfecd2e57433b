"""
Pydantic models for MCP Jira responses.
"""

from .base import ApiModel
from .jira import JiraIssueSummary, JiraSearchResult, text_to_adf

__all__ = [
    "ApiModel",
    "JiraIssueSummary",
    "JiraSearchResult",
    "text_to_adf",
]
