"""Tests for the Jira project operations."""

from tests.fixtures.jira_mocks import MOCK_JIRA_PROJECT, MOCK_JIRA_PROJECTS
from tests.utils.mocks import make_response, sent_path


class TestProjectsMixin:
    def test_get_projects(self, jira_fetcher, request_mock):
        request_mock.return_value = make_response(json_data=MOCK_JIRA_PROJECTS)

        projects = jira_fetcher.get_projects()

        assert sent_path(request_mock) == "rest/api/2/project"
        assert [p["key"] for p in projects] == ["PROJ", "OPS"]

    def test_get_projects_unexpected_payload(self, jira_fetcher, request_mock):
        request_mock.return_value = make_response(json_data={"values": []})

        assert jira_fetcher.get_projects() == []

    def test_get_issue_types(self, jira_fetcher, request_mock):
        request_mock.return_value = make_response(json_data=MOCK_JIRA_PROJECT)

        issue_types = jira_fetcher.get_issue_types("PROJ")

        assert sent_path(request_mock) == "rest/api/2/project/PROJ"
        assert [t["name"] for t in issue_types] == ["Bug", "Task", "Sub-task"]
