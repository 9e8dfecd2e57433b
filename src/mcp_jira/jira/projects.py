"""Module for Jira project operations."""

import logging
from typing import Any

from ..exceptions import MCPJiraError
from .client import JiraClient, encode_path_segment

logger = logging.getLogger("mcp-jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_projects(self) -> list[dict[str, Any]]:
        """Get all projects visible to the authenticated user."""
        logger.debug("Fetching Jira projects")
        try:
            projects = self.execute("project")
        except MCPJiraError as e:
            logger.error(f"Failed to fetch Jira projects: {e}")
            raise

        if not isinstance(projects, list):
            logger.warning(f"Unexpected projects response: {type(projects)}")
            return []
        return projects

    def get_issue_types(self, project_key: str) -> list[dict[str, Any]]:
        """
        Get the issue types available in a project.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            The raw issue type objects of the project
        """
        logger.debug(f"Fetching issue types for Jira project {project_key}")
        try:
            project = self.execute(f"project/{encode_path_segment(project_key)}")
        except MCPJiraError as e:
            logger.error(f"Failed to fetch issue types for project {project_key}: {e}")
            raise

        if not isinstance(project, dict):
            logger.warning(
                f"Unexpected project response for {project_key}: {type(project)}"
            )
            return []
        return project.get("issueTypes", [])
