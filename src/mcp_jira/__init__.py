import asyncio
import logging
import os
import sys
from typing import NoReturn

import click
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging_config import log_operation, resolve_log_level, set_context, setup_logger
from .utils.env import get_env_int

__version__ = "0.1.0"

logger = logging.getLogger("mcp-jira")

DEFAULT_HOST = "127.0.0.1"
TRANSPORTS = ("stdio", "http")


def _fail(message: str) -> NoReturn:
    logger.error(f"FATAL: {message}")
    click.echo(f"FATAL: {message}", err=True)
    sys.exit(1)


def _resolve_transport(
    transport: str | None, host: str | None, port: int | None
) -> tuple[str, str, int | None]:
    """Combine CLI values with JIRA_MCP_TRANSPORT, JIRA_MCP_HOST and JIRA_MCP_PORT.

    Raises:
        ConfigurationError: If the transport is unknown, or HTTP has no port
    """
    transport = (transport or os.getenv("JIRA_MCP_TRANSPORT") or "stdio").lower()
    if transport not in TRANSPORTS:
        raise ConfigurationError(
            f"Invalid transport '{transport}'. Expected one of: {', '.join(TRANSPORTS)}"
        )
    host = host or os.getenv("JIRA_MCP_HOST") or DEFAULT_HOST
    if port is None:
        port = get_env_int("JIRA_MCP_PORT")
    if transport == "http" and port is None:
        raise ConfigurationError(
            "JIRA_MCP_PORT environment variable is required for the http transport"
        )
    return transport, host, port


@click.command()
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    help="Transport type (default: JIRA_MCP_TRANSPORT or stdio)",
)
@click.option("--host", help="Host to bind for HTTP transport (default: 127.0.0.1)")
@click.option("--port", type=int, help="Port to listen on for HTTP transport")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log threshold (default: JIRA_MCP_DEBUG or debug)",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=True,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://jira.your-company.com)",
)
@click.option("--jira-token", help="Jira personal access token (bearer)")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira (default: verify)",
)
def main(
    env_file: str | None,
    transport: str | None,
    host: str | None,
    port: int | None,
    log_level: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """MCP Jira Server - Jira issue tools for MCP clients

    Exposes issue lookup, JQL search, creation, update, transitions and
    comments of a Jira Server/Data Center instance.
    """
    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    # Set environment variables from command line arguments if provided
    if jira_url:
        os.environ["JIRA_MCP_URL"] = jira_url
    if jira_token:
        os.environ["JIRA_MCP_TOKEN"] = jira_token
    if jira_ssl_verify is not None:
        os.environ["JIRA_MCP_SSL_VERIFY"] = str(jira_ssl_verify).lower()
    if log_dir:
        os.environ["JIRA_MCP_LOG_DIR"] = log_dir

    try:
        level = resolve_log_level(log_level or os.getenv("JIRA_MCP_DEBUG"))
    except ConfigurationError as e:
        _fail(str(e))

    setup_logger(
        level=level,
        log_to_file=log_to_file,
        log_dir=os.getenv("JIRA_MCP_LOG_DIR"),
    )
    set_context(app_version=__version__)

    from .jira import JiraConfig, JiraFetcher
    from .servers import create_server, run_server
    from .utils.tools import get_enabled_tools

    with log_operation(logger, "application_startup"):
        try:
            transport, host, port = _resolve_transport(transport, host, port)
            config = JiraConfig.from_env()
        except ConfigurationError as e:
            _fail(str(e))

        fetcher = JiraFetcher(config=config)
        server = create_server(fetcher, enabled_tools=get_enabled_tools())
        logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")

    try:
        asyncio.run(run_server(server, transport=transport, host=host, port=port))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
