"""Module for Jira comment operations."""

import logging
from typing import Any

from ..exceptions import MCPJiraError
from ..models.jira import text_to_adf
from .client import JiraClient, encode_path_segment

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> dict[str, Any] | None:
        """Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Plain-text comment, sent as ADF

        Returns:
            The created comment as returned by Jira
        """
        logger.info(f"Adding comment to Jira issue {issue_key}")
        try:
            result = self.execute(
                f"issue/{encode_path_segment(issue_key)}/comment",
                method="POST",
                body={"body": text_to_adf(comment)},
            )
        except MCPJiraError as e:
            logger.error(f"Failed to add comment to Jira issue {issue_key}: {e}")
            raise

        logger.info(f"Successfully added comment to Jira issue {issue_key}")
        return result
