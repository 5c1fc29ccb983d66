"""
Tests for version operations.
"""

import pytest

from helpers import API_KEY, json_body, make_response, paged, path_and_query

from redmine_client import IdName, Version

VERSION_JSON = {
    "id": 1,
    "project": {"id": 1, "name": "example project"},
    "name": "1.0",
    "description": "First release",
    "status": "open",
    "due_date": "2021-03-01",
    "sharing": "none",
    "created_on": "2021-02-19T16:51:25Z",
    "updated_on": "2021-02-19T16:51:25Z",
}


class TestVersions:
    """Tests for version CRUD."""

    def test_read(self, token_client, session):
        session.respond(200, {"version": VERSION_JSON})
        version = token_client.version(1)

        assert path_and_query(session.last) == f"/versions/1.json?key={API_KEY}"
        assert version.name == "1.0"
        assert version.project == IdName(id=1, name="example project")
        assert version.sharing == "none"

    def test_list_of_project(self, token_client, session):
        session.handler = paged("versions", [VERSION_JSON, dict(VERSION_JSON, id=2, name="2.0")], 25)
        versions = token_client.versions(1)

        assert [v.name for v in versions] == ["1.0", "2.0"]
        assert path_and_query(session.last) == f"/projects/1/versions.json?key={API_KEY}&offset=0"

    def test_create_in_referenced_project(self, token_client, session):
        def handler(request):
            payload = json_body(request)["version"]
            return make_response(201, {"version": dict(payload, id=5)})

        session.handler = handler
        version = Version(project=IdName(id=1, name="example project"), name="1.1", status="open")

        created = token_client.create_version(version)

        assert session.last.method == "POST"
        assert path_and_query(session.last) == f"/projects/1/versions.json?key={API_KEY}"
        assert created == version.model_copy(update={"id": 5})

    def test_create_without_project(self, token_client, session):
        with pytest.raises(ValueError):
            token_client.create_version(Version(name="1.1"))
        assert session.requests == []

    def test_update(self, token_client, session):
        session.respond(204)
        token_client.update_version(Version(id=1, status="closed"))

        assert session.last.method == "PUT"
        assert path_and_query(session.last) == f"/versions/1.json?key={API_KEY}"
        assert json_body(session.last) == {"version": {"id": 1, "status": "closed"}}

    def test_delete(self, token_client, session):
        session.respond(204)
        token_client.delete_version(1)
        assert session.last.method == "DELETE"
        assert path_and_query(session.last) == f"/versions/1.json?key={API_KEY}"
