"""Unit tests for the command-line entry point."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira import main

CONFIG_ENV = (
    "JIRA_MCP_URL",
    "JIRA_MCP_TOKEN",
    "JIRA_MCP_SSL_VERIFY",
    "JIRA_MCP_TIMEOUT",
    "JIRA_MCP_DEBUG",
    "JIRA_MCP_TRANSPORT",
    "JIRA_MCP_HOST",
    "JIRA_MCP_PORT",
    "JIRA_MCP_ENABLED_TOOLS",
    "JIRA_MCP_LOG_DIR",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)
    # main() writes CLI values into os.environ; restore it afterwards
    with patch.dict("os.environ"), patch("mcp_jira.load_dotenv"):
        yield monkeypatch


@pytest.fixture
def mock_server_run():
    with (
        patch("mcp_jira.servers.create_server") as mock_create_server,
        patch("mcp_jira.servers.run_server") as mock_run_server,
        patch("asyncio.run") as mock_asyncio_run,
    ):
        mock_create_server.return_value = MagicMock()
        yield mock_create_server, mock_run_server, mock_asyncio_run


class TestMain:
    def test_missing_url_is_fatal(self, clean_env, mock_server_run):
        result = CliRunner().invoke(main, ["--no-log-to-file"])

        assert result.exit_code == 1
        assert "FATAL: JIRA_MCP_URL environment variable is required" in result.output
        mock_server_run[2].assert_not_called()

    def test_missing_token_is_fatal(self, clean_env, mock_server_run):
        result = CliRunner().invoke(
            main, ["--no-log-to-file", "--jira-url", "https://jira.example.com"]
        )

        assert result.exit_code == 1
        assert "JIRA_MCP_TOKEN environment variable is required" in result.output

    def test_invalid_log_level_is_fatal(self, clean_env, mock_server_run):
        clean_env.setenv("JIRA_MCP_DEBUG", "verbose")

        result = CliRunner().invoke(main, ["--no-log-to-file"])

        assert result.exit_code == 1
        assert "Invalid log level 'verbose'" in result.output

    def test_http_transport_requires_port(self, clean_env, mock_server_run):
        clean_env.setenv("JIRA_MCP_URL", "https://jira.example.com")
        clean_env.setenv("JIRA_MCP_TOKEN", "token")

        result = CliRunner().invoke(main, ["--no-log-to-file", "--transport", "http"])

        assert result.exit_code == 1
        assert "JIRA_MCP_PORT" in result.output

    def test_stdio_startup(self, clean_env, mock_server_run):
        mock_create_server, mock_run_server, mock_asyncio_run = mock_server_run
        clean_env.setenv("JIRA_MCP_ENABLED_TOOLS", "jira_get_issue,jira_search")

        result = CliRunner().invoke(
            main,
            [
                "--no-log-to-file",
                "--jira-url",
                "https://jira.example.com",
                "--jira-token",
                "token",
            ],
        )

        assert result.exit_code == 0, result.output
        fetcher = mock_create_server.call_args.args[0]
        assert fetcher.config.url == "https://jira.example.com"
        assert mock_create_server.call_args.kwargs["enabled_tools"] == [
            "jira_get_issue",
            "jira_search",
        ]
        mock_run_server.assert_called_once_with(
            mock_create_server.return_value,
            transport="stdio",
            host="127.0.0.1",
            port=None,
        )
        mock_asyncio_run.assert_called_once()

    def test_http_startup_from_env(self, clean_env, mock_server_run):
        _, mock_run_server, _ = mock_server_run
        clean_env.setenv("JIRA_MCP_URL", "https://jira.example.com")
        clean_env.setenv("JIRA_MCP_TOKEN", "token")
        clean_env.setenv("JIRA_MCP_TRANSPORT", "http")
        clean_env.setenv("JIRA_MCP_PORT", "9000")
        clean_env.setenv("JIRA_MCP_HOST", "0.0.0.0")

        result = CliRunner().invoke(main, ["--no-log-to-file"])

        assert result.exit_code == 0, result.output
        assert mock_run_server.call_args.kwargs == {
            "transport": "http",
            "host": "0.0.0.0",
            "port": 9000,
        }

    def test_cli_ssl_flag_overrides_env(self, clean_env, mock_server_run):
        mock_create_server, _, _ = mock_server_run
        clean_env.setenv("JIRA_MCP_URL", "https://jira.example.com")
        clean_env.setenv("JIRA_MCP_TOKEN", "token")

        result = CliRunner().invoke(
            main, ["--no-log-to-file", "--no-jira-ssl-verify"]
        )

        assert result.exit_code == 0, result.output
        fetcher = mock_create_server.call_args.args[0]
        assert fetcher.config.ssl_verify is False
