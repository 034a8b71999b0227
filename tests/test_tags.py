"""
Tests for the /api/tags endpoints.
"""

import uuid

from tests.factories import make_language, make_tag, make_translation


def test_create_tag(client, auth_headers):
    response = client.post(
        "/api/tags/",
        json={"name": "mobile", "description": "Mobile app strings"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["name"] == "mobile"
    assert response.json()["description"] == "Mobile app strings"


def test_description_is_optional(client, auth_headers):
    response = client.post("/api/tags/", json={"name": "web"}, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["description"] is None


def test_duplicate_name(client, session, auth_headers):
    make_tag(session, name="web")

    response = client.post("/api/tags/", json={"name": "web"}, headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["error_code"] == "TAG_EXISTS"


def test_list_tags(client, session, auth_headers):
    make_tag(session, name="web")
    make_tag(session, name="api")

    response = client.get("/api/tags/", headers=auth_headers)

    assert response.status_code == 200
    assert [tag["name"] for tag in response.json()["data"]] == ["api", "web"]


def test_update_tag(client, session, auth_headers):
    tag = make_tag(session, name="web")

    response = client.put(
        f"/api/tags/{tag.id}", json={"name": "website"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["name"] == "website"


def test_update_to_taken_name(client, session, auth_headers):
    make_tag(session, name="web")
    tag = make_tag(session, name="api")

    response = client.put(
        f"/api/tags/{tag.id}", json={"name": "web"}, headers=auth_headers
    )

    assert response.status_code == 409


def test_delete_keeps_translations(client, session, auth_headers):
    language = make_language(session, code="en")
    tag = make_tag(session, name="web")
    translation = make_translation(session, language, key="greeting", tags=[tag])

    response = client.delete(f"/api/tags/{tag.id}", headers=auth_headers)
    assert response.status_code == 200

    response = client.get(f"/api/translations/{translation.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["tags"] == []


def test_read_missing(client, auth_headers):
    response = client.get(f"/api/tags/{uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404
