"""
Jira issue models.

This module provides the narrowed issue projection returned by the tools.
The full upstream issue carries dozens of fields; only six are kept so that
responses stay small enough for an agent's context window.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, NONE_VALUE, UNASSIGNED, UNKNOWN

logger = logging.getLogger(__name__)


def _nested_str(container: dict[str, Any], field: str, attr: str) -> str | None:
    """Return ``container[field][attr]`` if it is a non-empty string."""
    value = container.get(field)
    if not isinstance(value, dict):
        return None
    nested = value.get(attr)
    if isinstance(nested, str) and nested:
        return nested
    return None


class JiraIssueSummary(ApiModel):
    """
    Model representing the six-field summary of a Jira issue.

    Every field is always a string; absent upstream values are replaced by
    sentinel strings rather than null.
    """

    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    assignee: str = UNASSIGNED
    priority: str = NONE_VALUE
    reporter: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueSummary":
        """
        Create a JiraIssueSummary from a Jira API issue representation.

        Args:
            data: The issue data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraIssueSummary instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields")
        if not isinstance(fields, dict):
            fields = {}

        summary = fields.get("summary")

        return cls(
            key=str(data.get("key") or EMPTY_STRING),
            summary=summary if isinstance(summary, str) else EMPTY_STRING,
            status=_nested_str(fields, "status", "name") or UNKNOWN,
            assignee=_nested_str(fields, "assignee", "displayName") or UNASSIGNED,
            priority=_nested_str(fields, "priority", "name") or NONE_VALUE,
            reporter=_nested_str(fields, "reporter", "displayName") or UNKNOWN,
        )
