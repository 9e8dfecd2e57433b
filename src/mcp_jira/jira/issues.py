"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import MCPJiraError, ToolValidationError
from ..models.jira import JiraIssueSummary, text_to_adf
from .client import JiraClient, encode_path_segment

logger = logging.getLogger("mcp-jira")

# Fields Jira expects as {"name": value} references rather than plain values
NAMED_REFERENCE_FIELDS = frozenset({"assignee", "priority"})


def build_create_fields(
    project_key: str,
    issue_type: str,
    summary: str,
    description: str | None = None,
    assignee: str | None = None,
    priority: str | None = None,
) -> dict[str, Any]:
    """Build the ``fields`` object for an issue creation request.

    Optional values are only included when they are non-empty; the
    description is wrapped as an ADF document.
    """
    fields: dict[str, Any] = {
        "project": {"key": project_key},
        "issuetype": {"name": issue_type},
        "summary": summary,
    }
    if description:
        fields["description"] = text_to_adf(description)
    if assignee:
        fields["assignee"] = {"name": assignee}
    if priority:
        fields["priority"] = {"name": priority}
    return fields


def build_update_fields(**values: Any) -> dict[str, Any]:
    """Build the ``fields`` object for an issue update request.

    Values that are None were not supplied by the caller and are dropped.
    ``assignee`` and ``priority`` become name references; everything else is
    passed through unchanged.

    Example:
        >>> build_update_fields(summary="x", assignee=None)
        {'summary': 'x'}
    """
    update_fields: dict[str, Any] = {}
    for field_name, value in values.items():
        if value is None:
            continue
        if field_name in NAMED_REFERENCE_FIELDS:
            update_fields[field_name] = {"name": value}
        else:
            update_fields[field_name] = value
    return update_fields


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssueSummary:
        """
        Get the summary of a specific issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            JiraIssueSummary with key, summary, status, assignee, priority
            and reporter
        """
        logger.info(f"Fetching Jira issue {issue_key}")
        try:
            issue_data = self.execute(f"issue/{encode_path_segment(issue_key)}")
        except MCPJiraError as e:
            logger.error(f"Failed to fetch Jira issue {issue_key}: {e}")
            raise

        issue = JiraIssueSummary.from_api_response(issue_data)
        logger.info(f"Successfully fetched Jira issue {issue.key}: {issue.summary}")
        return issue

    def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str | None = None,
        assignee: str | None = None,
        priority: str | None = None,
    ) -> str:
        """
        Create a new issue.

        The creation endpoint only returns identifiers; callers wanting the
        issue summary fetch it with :meth:`get_issue` afterwards.

        Args:
            project_key: The key of the project (e.g. 'PROJ')
            issue_type: Issue type name (e.g. 'Task', 'Bug')
            summary: Summary of the issue
            description: Plain-text description, sent as ADF
            assignee: Username of the assignee
            priority: Priority name

        Returns:
            The key of the created issue

        Raises:
            MCPJiraError: If the issue could not be created
        """
        logger.info(
            f"Creating Jira issue in project {project_key} "
            f"(type={issue_type}, summary={summary!r})"
        )
        fields = build_create_fields(
            project_key, issue_type, summary, description, assignee, priority
        )
        try:
            result = self.execute("issue", method="POST", body={"fields": fields})
        except MCPJiraError as e:
            logger.error(f"Failed to create Jira issue in project {project_key}: {e}")
            raise

        if not isinstance(result, dict) or not result.get("key"):
            msg = f"Jira did not return a key for the issue created in {project_key}"
            logger.error(msg)
            raise MCPJiraError(msg)

        issue_key = str(result["key"])
        logger.info(f"Successfully created Jira issue {issue_key}")
        return issue_key

    def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Update fields of an existing issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Payload built by :func:`build_update_fields`

        Raises:
            ToolValidationError: If there is nothing to update; no request is made
            MCPJiraError: If the update was rejected or failed
        """
        if not fields:
            raise ToolValidationError("No fields provided to update")

        logger.info(f"Updating Jira issue {issue_key} (fields={sorted(fields)})")
        try:
            self.execute(
                f"issue/{encode_path_segment(issue_key)}",
                method="PUT",
                body={"fields": fields},
            )
        except MCPJiraError as e:
            logger.error(f"Failed to update Jira issue {issue_key}: {e}")
            raise

        logger.info(f"Successfully updated Jira issue {issue_key}")
