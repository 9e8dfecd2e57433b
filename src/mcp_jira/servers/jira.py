"""Jira tool definitions for the MCP server.

Each tool is a :class:`ToolSpec`: a parameter model describing the arguments
on the wire and a handler that runs against a :class:`JiraFetcher` and returns
the text sent back to the client.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from mcp_jira.exceptions import FollowUpFetchError, MCPJiraError
from mcp_jira.jira.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from mcp_jira.jira.issues import build_update_fields
from mcp_jira.servers.dispatcher import ToolSpec

if TYPE_CHECKING:
    from mcp_jira.jira import JiraFetcher

logger = logging.getLogger("mcp-jira.server.jira")


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class _ToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IssueKeyParams(_ToolParams):
    issue_key: str = Field(
        alias="issueKey",
        min_length=1,
        description="The Jira issue key (e.g., PROJECT-123)",
    )


class ProjectKeyParams(_ToolParams):
    project_key: str = Field(
        alias="projectKey",
        min_length=1,
        description="The Jira project key (e.g., PROJECT)",
    )


class NoParams(_ToolParams):
    pass


class SearchParams(_ToolParams):
    jql: str = Field(description="JQL query string to search for issues")
    start_at: StrictInt = Field(
        default=DEFAULT_START_AT,
        alias="startAt",
        ge=0,
        description="Starting index for pagination (default: 0)",
    )
    max_results: StrictInt = Field(
        default=DEFAULT_MAX_RESULTS,
        alias="maxResults",
        ge=1,
        description="Maximum number of results to return (default: 50)",
    )

    @field_validator("start_at", mode="before")
    @classmethod
    def _default_start_at(cls, value: Any) -> Any:
        return DEFAULT_START_AT if value is None else value

    @field_validator("max_results", mode="before")
    @classmethod
    def _default_max_results(cls, value: Any) -> Any:
        return DEFAULT_MAX_RESULTS if value is None else value


class CreateIssueParams(_ToolParams):
    project_key: str = Field(
        alias="projectKey",
        min_length=1,
        description="The project key where the issue will be created",
    )
    issue_type: str = Field(
        alias="issueType",
        min_length=1,
        description="The type of issue to create (e.g., Bug, Task, Story)",
    )
    summary: str = Field(description="The summary/title of the issue")
    description: str | None = Field(
        default=None, description="The description of the issue"
    )
    assignee: str | None = Field(default=None, description="The assignee username")
    priority: str | None = Field(
        default=None, description="The priority level (e.g., High, Medium, Low)"
    )


class UpdateIssueParams(_ToolParams):
    issue_key: str = Field(
        alias="issueKey", min_length=1, description="The Jira issue key to update"
    )
    summary: str | None = Field(
        default=None, description="New summary/title for the issue"
    )
    description: str | None = Field(
        default=None, description="New description for the issue"
    )
    assignee: str | None = Field(default=None, description="New assignee username")
    priority: str | None = Field(default=None, description="New priority level")


class TransitionIssueParams(_ToolParams):
    issue_key: str = Field(
        alias="issueKey", min_length=1, description="The Jira issue key to transition"
    )
    transition_id: str = Field(
        alias="transitionId",
        min_length=1,
        description="The ID of the transition to execute",
    )
    comment: str | None = Field(
        default=None, description="Optional comment to add during transition"
    )


class AddCommentParams(_ToolParams):
    issue_key: str = Field(
        alias="issueKey",
        min_length=1,
        description="The Jira issue key to add comment to",
    )
    comment: str = Field(description="The comment text to add")


def _fetch_after_write(jira: JiraFetcher, issue_key: str, action: str) -> str:
    """Second step of create/update: fetch the summary of the written issue.

    The write has already been applied upstream at this point, so a failure
    here is reported as a :class:`FollowUpFetchError` naming the issue.
    """
    try:
        issue = jira.get_issue(issue_key)
    except MCPJiraError as e:
        logger.error(f"Issue {issue_key} was {action} but the follow-up fetch failed")
        raise FollowUpFetchError(issue_key, action, e) from e
    return _to_json(issue.to_simplified_dict())


def get_issue(jira: JiraFetcher, params: IssueKeyParams) -> str:
    issue = jira.get_issue(params.issue_key)
    return _to_json(issue.to_simplified_dict())


def search(jira: JiraFetcher, params: SearchParams) -> str:
    result = jira.search_issues(
        params.jql, start_at=params.start_at, max_results=params.max_results
    )
    return _to_json(result.to_simplified_dict())


def create_issue(jira: JiraFetcher, params: CreateIssueParams) -> str:
    issue_key = jira.create_issue(
        project_key=params.project_key,
        issue_type=params.issue_type,
        summary=params.summary,
        description=params.description,
        assignee=params.assignee,
        priority=params.priority,
    )
    return _fetch_after_write(jira, issue_key, "created")


def update_issue(jira: JiraFetcher, params: UpdateIssueParams) -> str:
    fields = build_update_fields(
        summary=params.summary,
        description=params.description,
        assignee=params.assignee,
        priority=params.priority,
    )
    jira.update_issue(params.issue_key, fields)
    return _fetch_after_write(jira, params.issue_key, "updated")


def transition_issue(jira: JiraFetcher, params: TransitionIssueParams) -> str:
    jira.transition_issue(params.issue_key, params.transition_id, params.comment)
    return f"Successfully transitioned issue {params.issue_key}"


def add_comment(jira: JiraFetcher, params: AddCommentParams) -> str:
    jira.add_comment(params.issue_key, params.comment)
    return f"Successfully added comment to issue {params.issue_key}"


def get_transitions(jira: JiraFetcher, params: IssueKeyParams) -> str:
    return _to_json(jira.get_transitions(params.issue_key))


def get_projects(jira: JiraFetcher, params: NoParams) -> str:
    return _to_json(jira.get_projects())


def get_issue_types(jira: JiraFetcher, params: ProjectKeyParams) -> str:
    return _to_json(jira.get_issue_types(params.project_key))


JIRA_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="jira_get_issue",
        title="Get Issue",
        description="Get details of a specific Jira issue by key",
        params_model=IssueKeyParams,
        handler=get_issue,
        tags=frozenset({"jira", "read"}),
    ),
    ToolSpec(
        name="jira_search",
        title="Search Issues",
        description=(
            "Search issues using JQL (Jira Query Language) with pagination support"
        ),
        params_model=SearchParams,
        handler=search,
        tags=frozenset({"jira", "read"}),
    ),
    ToolSpec(
        name="jira_create_issue",
        title="Create Issue",
        description=(
            "Create a new issue with project, issue type, summary, "
            "and optional fields"
        ),
        params_model=CreateIssueParams,
        handler=create_issue,
        read_only=False,
        tags=frozenset({"jira", "write"}),
    ),
    ToolSpec(
        name="jira_update_issue",
        title="Update Issue",
        description=(
            "Update an existing issue's fields "
            "(summary, description, assignee, priority)"
        ),
        params_model=UpdateIssueParams,
        handler=update_issue,
        read_only=False,
        tags=frozenset({"jira", "write"}),
    ),
    ToolSpec(
        name="jira_transition_issue",
        title="Transition Issue",
        description="Transition an issue to a new status with optional comment",
        params_model=TransitionIssueParams,
        handler=transition_issue,
        read_only=False,
        tags=frozenset({"jira", "write"}),
    ),
    ToolSpec(
        name="jira_add_comment",
        title="Add Comment",
        description="Add a comment to an existing issue",
        params_model=AddCommentParams,
        handler=add_comment,
        read_only=False,
        tags=frozenset({"jira", "write"}),
    ),
    ToolSpec(
        name="jira_get_transitions",
        title="Get Transitions",
        description="List the transitions currently available for an issue",
        params_model=IssueKeyParams,
        handler=get_transitions,
        tags=frozenset({"jira", "discovery"}),
    ),
    ToolSpec(
        name="jira_get_projects",
        title="Get Projects",
        description="List the projects visible to the configured account",
        params_model=NoParams,
        handler=get_projects,
        tags=frozenset({"jira", "discovery"}),
    ),
    ToolSpec(
        name="jira_get_issue_types",
        title="Get Issue Types",
        description="List the issue types available in a project",
        params_model=ProjectKeyParams,
        handler=get_issue_types,
        tags=frozenset({"jira", "discovery"}),
    ),
)
