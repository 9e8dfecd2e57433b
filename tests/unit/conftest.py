"""
Shared fixtures for the unit tests.

The HTTP session (``fetcher.session``) is always replaced by a MagicMock, so no
test ever performs a real HTTP request.
"""

import logging
from unittest.mock import MagicMock

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from mcp_jira.logging_config import clear_context
from tests.utils.mocks import TEST_BASE_URL, make_response

TEST_TOKEN = "test-personal-access-token"


@pytest.fixture(autouse=True)
def reset_logging():
    """Let records reach caplog even after the CLI configured the logger."""
    package_logger = logging.getLogger("mcp-jira")
    package_logger.propagate = True
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
    clear_context()


@pytest.fixture
def jira_config():
    """A valid JiraConfig pointing at a fake instance."""
    return JiraConfig(url=TEST_BASE_URL, token=TEST_TOKEN)


@pytest.fixture
def jira_fetcher(jira_config):
    """A JiraFetcher whose HTTP session is a MagicMock."""
    fetcher = JiraFetcher(config=jira_config)
    fetcher.session = MagicMock()
    fetcher.session.request.return_value = make_response(json_data={})
    return fetcher


@pytest.fixture
def request_mock(jira_fetcher):
    """The mocked ``Session.request`` of :func:`jira_fetcher`."""
    return jira_fetcher.session.request


@pytest.fixture
def anyio_backend():
    """Run ``@pytest.mark.anyio`` tests on asyncio, the runtime the server uses."""
    return "asyncio"
