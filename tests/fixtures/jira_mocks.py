"""Mock Jira API payloads shared by the unit tests."""

MOCK_JIRA_ISSUE_RESPONSE = {
    "id": "10001",
    "key": "PROJ-1",
    "self": "https://jira.example.com/rest/api/2/issue/10001",
    "fields": {
        "summary": "Login page returns 500",
        "description": "Stack trace attached.",
        "status": {"name": "In Progress", "id": "3"},
        "assignee": {
            "name": "jdoe",
            "displayName": "Jane Doe",
            "emailAddress": "jane.doe@example.com",
        },
        "priority": {"name": "High", "id": "2"},
        "reporter": {"name": "rsmith", "displayName": "Robert Smith"},
        "issuetype": {"name": "Bug"},
        "project": {"key": "PROJ", "name": "Project"},
        "labels": ["backend"],
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-02T11:00:00.000+0000",
    },
}

MOCK_JIRA_ISSUE_UNASSIGNED = {
    "id": "10002",
    "key": "PROJ-1",
    "fields": {
        "summary": "Nobody owns this yet",
        "status": {"name": "Open"},
        "assignee": None,
        "reporter": {"displayName": "Robert Smith"},
    },
}

MOCK_JIRA_SEARCH_RESPONSE = {
    "startAt": 0,
    "maxResults": 50,
    "total": 2,
    "issues": [
        MOCK_JIRA_ISSUE_RESPONSE,
        {
            "id": "10003",
            "key": "PROJ-3",
            "fields": {
                "summary": "Add dark mode",
                "status": {"name": "To Do"},
                "assignee": None,
                "priority": {"name": "Low"},
                "reporter": {"displayName": "Jane Doe"},
            },
        },
    ],
}

MOCK_JIRA_CREATE_RESPONSE = {
    "id": "10042",
    "key": "PROJ-42",
    "self": "https://jira.example.com/rest/api/2/issue/10042",
}

MOCK_JIRA_TRANSITIONS = {
    "expand": "transitions",
    "transitions": [
        {"id": "11", "name": "To Do", "to": {"name": "To Do"}},
        {"id": "21", "name": "In Progress", "to": {"name": "In Progress"}},
        {"id": "31", "name": "Done", "to": {"name": "Done"}},
    ],
}

MOCK_JIRA_COMMENT_RESPONSE = {
    "id": "20001",
    "author": {"displayName": "Jane Doe"},
    "created": "2024-01-03T09:30:00.000+0000",
}

MOCK_JIRA_PROJECTS = [
    {"id": "10000", "key": "PROJ", "name": "Project"},
    {"id": "10001", "key": "OPS", "name": "Operations"},
]

MOCK_JIRA_PROJECT = {
    "id": "10000",
    "key": "PROJ",
    "name": "Project",
    "issueTypes": [
        {"id": "1", "name": "Bug", "subtask": False},
        {"id": "3", "name": "Task", "subtask": False},
        {"id": "5", "name": "Sub-task", "subtask": True},
    ],
}
