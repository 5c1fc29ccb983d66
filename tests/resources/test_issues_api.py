"""
Tests for issue operations.
"""

import pytest

from helpers import API_KEY, PASSWORD, USER, basic_credentials, json_body, make_response, paged, path_and_query, \
    query_pairs

from redmine_client import IdName, IdRef, Issue, IssueFilter, TransportError

ISSUE_JSON = {
    "id": 1,
    "project": {"id": 1, "name": "example project1"},
    "tracker": {"id": 1, "name": "Bug"},
    "status": {"id": 1, "name": "New"},
    "priority": {"id": 2, "name": "Normal"},
    "author": {"id": 1, "name": "Redmine Admin"},
    "subject": "Something should be done",
    "description": "In this ticket an **important task** should be done!",
    "start_date": None,
    "due_date": None,
    "done_ratio": 0,
    "is_private": False,
    "estimated_hours": None,
    "total_estimated_hours": None,
    "spent_hours": 0,
    "total_spent_hours": 0,
    "created_on": "2021-02-23T14:20:48Z",
    "updated_on": "2021-02-23T14:39:02Z",
    "closed_on": None,
}


def _issues(count):
    return [dict(ISSUE_JSON, id=i + 1) for i in range(count)]


def _echo_created(key, new_id):
    """Handler answering a create request with its own payload plus an id."""

    def handle(request):
        payload = json_body(request)[key]
        payload.pop("parent_issue_id", None)
        payload["id"] = new_id
        return make_response(201, {key: payload})

    return handle


class TestReadIssue:
    """Tests for reading single issues."""

    def test_token_auth(self, token_client, session):
        session.respond(200, {"issue": ISSUE_JSON})
        issue = token_client.issue(1)

        assert session.last.method == "GET"
        assert path_and_query(session.last) == f"/issues/1.json?key={API_KEY}"
        assert issue.id == 1
        assert issue.subject == "Something should be done"
        assert issue.tracker == IdName(id=1, name="Bug")
        assert issue.status == IdName(id=1, name="New")
        assert issue.priority == IdName(id=2, name="Normal")
        assert issue.author == IdName(id=1, name="Redmine Admin")
        assert issue.created_on == "2021-02-23T14:20:48Z"
        assert issue.closed_on is None
        assert issue.parent is None

    def test_basic_auth(self, basic_client, session):
        session.respond(200, {"issue": ISSUE_JSON})
        basic_client.issue(1)

        assert path_and_query(session.last) == "/issues/1.json"
        assert basic_credentials(session.last) == (USER, PASSWORD)

    def test_with_args(self, token_client, session):
        session.respond(200, {"issue": dict(ISSUE_JSON, journals=[
            {"id": 3, "user": {"id": 1, "name": "Redmine Admin"}, "notes": "Done",
             "details": [{"property": "attr", "name": "status_id", "old_value": "1", "new_value": "5"}]},
        ])})
        issue = token_client.issue_with_args(1, {"include": "journals,watchers"})

        assert query_pairs(session.last) == [("include", "journals,watchers"), ("key", API_KEY)]
        assert issue.journals[0].notes == "Done"
        assert issue.journals[0].details[0].new_value == "5"

    def test_with_no_args(self, token_client, session):
        session.respond(200, {"issue": ISSUE_JSON})
        token_client.issue_with_args(1, None)
        assert path_and_query(session.last) == f"/issues/1.json?key={API_KEY}"

    def test_parent_reference(self, token_client, session):
        session.respond(200, {"issue": dict(ISSUE_JSON, parent={"id": 7})})
        assert token_client.issue(1).parent == IdRef(id=7)


class TestListIssues:
    """Tests for issue lists."""

    def test_all_issues_page_by_page(self, token_client, session):
        session.handler = paged("issues", _issues(2), 1)
        issues = token_client.issues()

        assert [issue.id for issue in issues] == [1, 2]
        assert [path_and_query(r) for r in session.requests] == [
            f"/issues.json?key={API_KEY}&offset=0",
            f"/issues.json?key={API_KEY}&offset=1",
        ]

    def test_with_limit(self, paging_client, session):
        session.handler = paged("issues", _issues(3), 2)
        assert len(paging_client.issues()) == 3
        assert [path_and_query(r) for r in session.requests] == [
            f"/issues.json?limit=2&key={API_KEY}&offset=0",
            f"/issues.json?limit=2&key={API_KEY}&offset=2",
        ]

    def test_of_project(self, token_client, session):
        session.handler = paged("issues", _issues(1), 25)
        issues = token_client.issues_of(1)

        assert len(issues) == 1
        assert path_and_query(session.last) == f"/issues.json?project_id=1&key={API_KEY}&offset=0"

    def test_of_project_error_context(self, token_client, session):
        session.respond(500, "")
        with pytest.raises(TransportError) as exc_info:
            token_client.issues_of(1)
        assert str(exc_info.value).startswith("error while reading issues for project 1: ")

    def test_by_query(self, token_client, session):
        session.handler = paged("issues", _issues(1), 25)
        token_client.issues_by_query(12)
        assert query_pairs(session.last) == [("query_id", "12"), ("key", API_KEY), ("offset", "0")]

    def test_by_filter(self, token_client, session):
        session.handler = paged("issues", _issues(1), 25)
        issue_filter = IssueFilter(project_id=1, status_id="*", updated_on=">=2021-01-01",
                                   extra_filters={"cf_1": "yes"})
        token_client.issues_by_filter(issue_filter)

        assert query_pairs(session.last) == [
            ("project_id", "1"),
            ("status_id", "*"),
            ("updated_on", ">=2021-01-01"),
            ("cf_1", "yes"),
            ("key", API_KEY),
            ("offset", "0"),
        ]

    def test_by_no_filter(self, token_client, session):
        session.handler = paged("issues", _issues(1), 25)
        token_client.issues_by_filter(None)
        assert path_and_query(session.last) == f"/issues.json?key={API_KEY}&offset=0"


class TestWriteIssue:
    """Tests for creating, updating and deleting issues."""

    def test_create_round_trip(self, token_client, session):
        session.handler = _echo_created("issue", 42)
        issue = Issue(project_id=1, tracker_id=2, subject="Something should be done",
                      description="Go ahead!", priority_id=4)

        created = token_client.create_issue(issue)

        assert session.last.method == "POST"
        assert path_and_query(session.last) == f"/issues.json?key={API_KEY}"
        assert session.last.headers["Content-Type"] == "application/json"
        assert json_body(session.last) == {"issue": {
            "project_id": 1,
            "tracker_id": 2,
            "subject": "Something should be done",
            "description": "Go ahead!",
            "priority_id": 4,
            "parent_issue_id": "",
        }}
        assert created == issue.model_copy(update={"id": 42})

    def test_create_with_parent(self, token_client, session):
        session.handler = _echo_created("issue", 43)
        token_client.create_issue(Issue(project_id=1, subject="Child", parent_id=7))
        assert json_body(session.last)["issue"]["parent_issue_id"] == "7"

    def test_update(self, token_client, session):
        session.respond(204)
        token_client.update_issue(Issue(id=1, subject="Changed", notes="Updated via API"))

        assert session.last.method == "PUT"
        assert path_and_query(session.last) == f"/issues/1.json?key={API_KEY}"
        assert json_body(session.last) == {"issue": {
            "id": 1,
            "subject": "Changed",
            "notes": "Updated via API",
            "parent_issue_id": "",
        }}

    def test_update_accepts_ok(self, token_client, session):
        session.respond(200, b"")
        token_client.update_issue(Issue(id=1, subject="Changed"))

    def test_delete(self, token_client, session):
        session.respond(204)
        token_client.delete_issue(1)

        assert session.last.method == "DELETE"
        assert path_and_query(session.last) == f"/issues/1.json?key={API_KEY}"
        assert session.last.headers["Content-Type"] == "application/json"
