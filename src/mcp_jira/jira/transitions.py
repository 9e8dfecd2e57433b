"""Module for Jira transition operations."""

import logging
from typing import Any

from ..exceptions import MCPJiraError
from ..models.jira import text_to_adf
from .client import JiraClient, encode_path_segment

logger = logging.getLogger("mcp-jira")


def build_transition_body(
    transition_id: str, comment: str | None = None
) -> dict[str, Any]:
    """Build the request body for a transition, with an optional ADF comment."""
    body: dict[str, Any] = {"transition": {"id": transition_id}}
    if comment:
        body["update"] = {"comment": [{"add": {"body": text_to_adf(comment)}}]}
    return body


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[dict[str, Any]]:
        """
        Get the transitions currently available for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The raw transition objects as returned by Jira
        """
        logger.debug(f"Fetching transitions for Jira issue {issue_key}")
        try:
            result = self.execute(f"issue/{encode_path_segment(issue_key)}/transitions")
        except MCPJiraError as e:
            logger.error(f"Failed to fetch transitions for Jira issue {issue_key}: {e}")
            raise

        if not isinstance(result, dict):
            logger.warning(
                f"Unexpected transitions response for {issue_key}: {type(result)}"
            )
            return []
        return result.get("transitions", [])

    def transition_issue(
        self, issue_key: str, transition_id: str, comment: str | None = None
    ) -> None:
        """
        Transition an issue to a new status.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: ID of the transition to perform
            comment: Optional comment added as part of the transition
        """
        logger.info(
            f"Transitioning Jira issue {issue_key} (transition={transition_id})"
        )
        try:
            self.execute(
                f"issue/{encode_path_segment(issue_key)}/transitions",
                method="POST",
                body=build_transition_body(transition_id, comment),
            )
        except MCPJiraError as e:
            logger.error(
                f"Failed to transition Jira issue {issue_key} "
                f"(transition={transition_id}): {e}"
            )
            raise

        logger.info(f"Successfully transitioned Jira issue {issue_key}")
