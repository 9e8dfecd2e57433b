"""Base client module for Jira API interactions."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from ..exceptions import JiraAuthenticationError, TransportError, UpstreamAPIError
from .config import JiraConfig
from .constants import API_ROOT, AUTH_FAILURE_STATUSES, SUCCESS_STATUS_RANGE

# Configure logging
logger = logging.getLogger("mcp-jira")


def encode_path_segment(value: str) -> str:
    """Percent-encode a value used as a single URL path segment."""
    return quote(str(value), safe="")


def create_session(config: JiraConfig) -> requests.Session:
    """Create an HTTP session carrying bearer auth and JSON headers.

    Args:
        config: Jira configuration providing the token and SSL setting

    Returns:
        A session shared by every request of one client
    """
    session = requests.Session()
    session.headers.update(
        {
            "Authorization": f"Bearer {config.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    )
    session.verify = config.ssl_verify
    if not config.ssl_verify:
        logger.warning(
            f"SSL verification disabled for Jira at {config.url}. "
            "This is insecure and should only be used in testing environments."
        )
    return session


class JiraClient:
    """Base client for Jira API interactions.

    Every logical operation performs exactly one HTTP call through
    :meth:`execute`; there is no retry.
    """

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, loaded from the environment.

        Raises:
            ConfigurationError: If configuration is missing or invalid.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        self.session = create_session(self.config)

    def build_url(self, endpoint: str) -> str:
        """Return the absolute URL for a relative REST endpoint."""
        return f"{self.config.url}/{API_ROOT}/{endpoint}"

    def execute(
        self,
        endpoint: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Perform a single call against the Jira REST API.

        Args:
            endpoint: Path relative to ``/rest/api/2/``, already percent-encoded
                (including any query string).
            method: HTTP method.
            body: Optional JSON body.

        Returns:
            The parsed JSON body, or None when the response has no body.

        Raises:
            JiraAuthenticationError: For 401/403 responses.
            UpstreamAPIError: For any other non-2xx response, or an
                unparseable 2xx body.
            TransportError: If the request never got a response.
        """
        url = self.build_url(endpoint)
        logger.debug(f"Making Jira API request: {method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=body,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            error_msg = f"Jira API request failed: {e}"
            logger.error(f"{error_msg} ({method} {url})")
            raise TransportError(error_msg, cause=e) from e

        status_code = response.status_code
        logger.debug(f"Jira API response received: {method} {url} -> {status_code}")

        if status_code not in SUCCESS_STATUS_RANGE:
            error_text = response.text
            error = (
                JiraAuthenticationError
                if status_code in AUTH_FAILURE_STATUSES
                else UpstreamAPIError
            )(status_code, response.reason, error_text)
            logger.error(f"{error} ({method} {url})")
            raise error

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            error = UpstreamAPIError(
                status_code,
                response.reason,
                response.text,
                message=f"Jira API returned invalid JSON for {method} {endpoint}: {e}",
            )
            logger.error(str(error))
            raise error from e
