"""Jira API module for MCP Jira.

This module provides the client and operation mixins for the Jira REST API.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    TransitionsMixin,
    CommentsMixin,
    ProjectsMixin,
):
    """
    The main Jira client class providing access to the Jira operations used
    by the MCP tools.

    Each mixin adds one area of the API; all of them share the single
    authenticated session created by :class:`JiraClient`.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
