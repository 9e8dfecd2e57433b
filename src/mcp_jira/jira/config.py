"""Configuration module for Jira API interactions."""

from dataclasses import dataclass
from urllib.parse import urlparse

from ..exceptions import ConfigurationError
from ..utils.env import get_env_int, get_required_env, is_env_ssl_verify

DEFAULT_TIMEOUT = 75


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Holds the base URL and the bearer token used for every request. Loaded
    once at startup and never changed afterwards.
    """

    url: str  # Base URL for Jira
    token: str  # Bearer token (personal access token)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: int = DEFAULT_TIMEOUT  # Seconds, handed to the HTTP client

    def __post_init__(self) -> None:
        parsed = urlparse(self.url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            msg = f"Invalid Jira URL '{self.url}': expected http(s)://host[/path]"
            raise ConfigurationError(msg)
        if not self.token:
            raise ConfigurationError("Jira token must not be empty")
        # Normalise so endpoint joining never produces a double slash
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from JIRA_MCP_URL, JIRA_MCP_TOKEN,
            JIRA_MCP_SSL_VERIFY and JIRA_MCP_TIMEOUT

        Raises:
            ConfigurationError: If required environment variables are missing or invalid
        """
        url = get_required_env("JIRA_MCP_URL")
        token = get_required_env("JIRA_MCP_TOKEN")
        ssl_verify = is_env_ssl_verify("JIRA_MCP_SSL_VERIFY")
        timeout = get_env_int("JIRA_MCP_TIMEOUT", DEFAULT_TIMEOUT)
        if timeout is None or timeout <= 0:
            raise ConfigurationError("JIRA_MCP_TIMEOUT must be a positive integer")

        return cls(url=url, token=token, ssl_verify=ssl_verify, timeout=timeout)
