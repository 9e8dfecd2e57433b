"""Tests for the logging configuration."""

import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from mcp_jira.exceptions import ConfigurationError
from mcp_jira.logging_config import (
    ContextFilter,
    get_context_str,
    log_operation,
    resolve_log_level,
    set_context,
    setup_logger,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        (None, logging.DEBUG),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
    ],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


@pytest.mark.parametrize("name", ["verbose", "warn"])
def test_resolve_log_level_invalid(name):
    with pytest.raises(ConfigurationError, match=f"Invalid log level .{name}."):
        resolve_log_level(name)


def test_setup_logger_console_on_stderr():
    logger = setup_logger("mcp-jira.test-console", level="info")

    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_setup_logger_is_idempotent():
    setup_logger("mcp-jira.test-repeat")
    logger = setup_logger("mcp-jira.test-repeat")

    assert len(logger.handlers) == 1


def test_setup_logger_with_file(tmp_path):
    logger = setup_logger(
        "mcp-jira.test-file", level="debug", log_to_file=True, log_dir=str(tmp_path)
    )
    logger.info("written to file")
    for handler in logger.handlers:
        handler.flush()

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    content = (tmp_path / "mcp-jira.test-file.log").read_text(encoding="utf-8")
    assert "written to file" in content
    assert "[no-context]" in content

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_context_filter_renders_context():
    set_context(tool="jira_search")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    ContextFilter().filter(record)

    assert record.context == "tool=jira_search"


def test_log_operation_sets_and_restores_context(caplog):
    logger = logging.getLogger("mcp-jira.test-operation")
    set_context(app_version="1.0")

    with caplog.at_level(logging.DEBUG, logger="mcp-jira"):
        with log_operation(logger, "jira_get_issue", issueKey="PROJ-1"):
            inside = get_context_str()

    assert "operation=jira_get_issue" in inside
    assert "issueKey=PROJ-1" in inside
    assert "trace_id=" in inside
    assert "app_version=1.0" in inside
    assert get_context_str() == "app_version=1.0"
    assert "Operation started: jira_get_issue" in caplog.text
    assert "Operation completed: jira_get_issue" in caplog.text


def test_log_operation_logs_failure(caplog):
    logger = logging.getLogger("mcp-jira.test-operation")

    with caplog.at_level(logging.ERROR, logger="mcp-jira"):
        with pytest.raises(RuntimeError):
            with log_operation(logger, "jira_search"):
                raise RuntimeError("boom")

    assert "Operation failed: jira_search" in caplog.text
    assert "boom" in caplog.text
    assert get_context_str() == "no-context"
