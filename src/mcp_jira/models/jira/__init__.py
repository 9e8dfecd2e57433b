"""
Jira data models for the MCP Jira integration.
"""

from .adf import text_to_adf
from .issue import JiraIssueSummary
from .search import JiraSearchResult

__all__ = [
    "JiraIssueSummary",
    "JiraSearchResult",
    "text_to_adf",
]
