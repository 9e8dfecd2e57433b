class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class ConfigurationError(MCPJiraError):
    """Raised when a required startup setting is missing or invalid."""

    pass


class ToolValidationError(MCPJiraError):
    """Raised when tool arguments fail schema or business-rule validation."""

    pass


class UpstreamAPIError(MCPJiraError):
    """Raised when the Jira API answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: str,
        message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            message or f"Jira API error: {status_code} {reason} - {body}"
        )


class JiraAuthenticationError(UpstreamAPIError):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class TransportError(MCPJiraError):
    """Raised when the Jira API could not be reached at all."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class FollowUpFetchError(MCPJiraError):
    """Raised when a write succeeded upstream but re-reading the issue failed."""

    def __init__(self, issue_key: str, action: str, cause: BaseException) -> None:
        self.issue_key = issue_key
        self.action = action
        self.cause = cause
        super().__init__(
            f"Issue {issue_key} was {action} but could not be fetched afterwards: "
            f"{cause}"
        )
