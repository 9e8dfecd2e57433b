"""Constants for the Jira REST API v2 endpoints used by MCP Jira."""

API_ROOT = "rest/api/2"

DEFAULT_START_AT = 0
DEFAULT_MAX_RESULTS = 50

SUCCESS_STATUS_RANGE = range(200, 300)
AUTH_FAILURE_STATUSES = frozenset({401, 403})
