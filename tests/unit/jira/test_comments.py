"""Tests for the Jira comment operations."""

import pytest

from mcp_jira.exceptions import JiraAuthenticationError
from mcp_jira.models.jira import text_to_adf
from tests.fixtures.jira_mocks import MOCK_JIRA_COMMENT_RESPONSE
from tests.utils.mocks import make_response, sent_body, sent_method, sent_path


class TestCommentsMixin:
    def test_add_comment(self, jira_fetcher, request_mock):
        request_mock.return_value = make_response(
            201, json_data=MOCK_JIRA_COMMENT_RESPONSE
        )

        result = jira_fetcher.add_comment("PROJ-1", "Looks good to me")

        assert result == MOCK_JIRA_COMMENT_RESPONSE
        assert sent_method(request_mock) == "POST"
        assert sent_path(request_mock) == "rest/api/2/issue/PROJ-1/comment"
        assert sent_body(request_mock) == {"body": text_to_adf("Looks good to me")}

    def test_add_comment_forbidden(self, jira_fetcher, request_mock):
        request_mock.return_value = make_response(
            403, text="Forbidden", reason="Forbidden"
        )

        with pytest.raises(JiraAuthenticationError):
            jira_fetcher.add_comment("PROJ-1", "hello")
