"""Module for Jira search operations."""

import logging
from urllib.parse import quote

from ..exceptions import MCPJiraError
from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT

logger = logging.getLogger("mcp-jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string, passed to Jira unchanged
            start_at: Index of the first result
            max_results: Maximum number of results to return

        Returns:
            JiraSearchResult with each issue narrowed to its summary
        """
        logger.info(
            f"Searching Jira issues: jql={jql!r}, start_at={start_at}, "
            f"max_results={max_results}"
        )
        endpoint = (
            f"search?jql={quote(jql, safe='')}"
            f"&startAt={start_at}&maxResults={max_results}"
        )
        try:
            response = self.execute(endpoint)
        except MCPJiraError as e:
            logger.error(f"Failed to search Jira issues for {jql!r}: {e}")
            raise

        result = JiraSearchResult.from_api_response(response)
        logger.info(
            f"Successfully searched Jira issues: total={result.total}, "
            f"returned={len(result.issues)}"
        )
        return result
