"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssueSummary

logger = logging.getLogger(__name__)


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except (ValueError, TypeError):
        return default


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.

    Issues keep the order the API returned them in.
    """

    total: int = 0
    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    issues: list[JiraIssueSummary] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API search response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary search data")
            return cls()

        issues_data = data.get("issues", [])
        issues = [
            JiraIssueSummary.from_api_response(issue_data)
            for issue_data in (issues_data if isinstance(issues_data, list) else [])
            if issue_data
        ]

        return cls(
            total=_as_int(data.get("total"), len(issues)),
            start_at=_as_int(data.get("startAt"), 0),
            max_results=_as_int(data.get("maxResults"), 0),
            issues=issues,
        )
