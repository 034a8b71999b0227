"""
Tests for the /api/translations endpoints.
"""

import uuid

import pytest

from translation_service.translations import get_translations
from tests.factories import make_language, make_tag, make_translation


@pytest.fixture
def english(session):
    return make_language(session, code="en", name="English")


@pytest.fixture
def french(session):
    return make_language(session, code="fr", name="French")


class TestCreateTranslation:
    def test_create_with_tags_and_metadata(self, client, session, english, auth_headers):
        web = make_tag(session, name="web")
        mobile = make_tag(session, name="mobile")

        response = client.post(
            "/api/translations/",
            json={
                "language_id": str(english.id),
                "key": "greeting",
                "content": "Hello",
                "metadata": {"context": "home page"},
                "tags": [str(web.id), str(mobile.id)],
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["key"] == "greeting"
        assert data["content"] == "Hello"
        assert data["metadata"] == {"context": "home page"}
        assert data["language"] == {
            "id": str(english.id),
            "code": "en",
            "name": "English",
        }
        assert sorted(tag["name"] for tag in data["tags"]) == ["mobile", "web"]

    def test_duplicate_key_in_language(self, client, session, english, auth_headers):
        make_translation(session, english, key="greeting")

        response = client.post(
            "/api/translations/",
            json={"language_id": str(english.id), "key": "greeting", "content": "Hi"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "TRANSLATION_EXISTS"

    def test_same_key_in_other_language(
        self, client, session, english, french, auth_headers
    ):
        make_translation(session, english, key="greeting")

        response = client.post(
            "/api/translations/",
            json={"language_id": str(french.id), "key": "greeting", "content": "Salut"},
            headers=auth_headers,
        )

        assert response.status_code == 201

    def test_unknown_language(self, client, session, auth_headers):
        response = client.post(
            "/api/translations/",
            json={"language_id": str(uuid.uuid4()), "key": "k", "content": "c"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["details"]["field"] == "language_id"

    def test_unknown_tag_creates_nothing(self, client, session, english, auth_headers):
        response = client.post(
            "/api/translations/",
            json={
                "language_id": str(english.id),
                "key": "greeting",
                "content": "Hello",
                "tags": [str(uuid.uuid4())],
            },
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["details"]["field"] == "tags"
        listing = client.get("/api/translations/", headers=auth_headers).json()
        assert listing["count"] == 0

    def test_requires_token(self, client, english):
        response = client.post(
            "/api/translations/",
            json={"language_id": str(english.id), "key": "k", "content": "c"},
        )
        assert response.status_code == 401


class TestListTranslations:
    @pytest.fixture
    def catalogue(self, session, english, french):
        web = make_tag(session, name="web")
        make_translation(session, english, key="auth.login", content="Log in", tags=[web])
        make_translation(session, english, key="auth.logout", content="Log out")
        make_translation(session, english, key="menu.home", content="Home")
        make_translation(session, french, key="auth.login", content="Connexion", tags=[web])
        return web

    def test_filters_are_combined(self, client, english, catalogue, auth_headers):
        response = client.get(
            "/api/translations/",
            params={"language_id": str(english.id), "key": "auth", "tag": "web"},
            headers=auth_headers,
        )

        data = response.json()
        assert data["count"] == 1
        assert data["data"][0]["content"] == "Log in"

    def test_content_substring(self, client, catalogue, auth_headers):
        response = client.get(
            "/api/translations/", params={"content": "log"}, headers=auth_headers
        )

        assert {item["content"] for item in response.json()["data"]} == {
            "Log in",
            "Log out",
        }

    def test_paginated(self, client, catalogue, auth_headers):
        response = client.get(
            "/api/translations/", params={"per_page": 3}, headers=auth_headers
        )

        data = response.json()
        assert data["count"] == 4
        assert len(data["data"]) == 3


class TestSearchTranslations:
    @pytest.fixture
    def catalogue(self, session, english, french):
        web = make_tag(session, name="web")
        api = make_tag(session, name="api")
        make_translation(session, english, key="errors.login", content="Bad password", tags=[web])
        make_translation(session, english, key="menu.home", content="Login here", tags=[api])
        make_translation(session, english, key="menu.about", content="About")
        make_translation(session, french, key="errors.login", content="Erreur", tags=[web])
        return {"web": web, "api": api}

    def test_key_or_content(self, client, catalogue, auth_headers):
        response = client.get(
            "/api/translations/search",
            params={"key": "login", "content": "login"},
            headers=auth_headers,
        )

        assert response.json()["count"] == 3

    def test_language_and_tags(self, client, english, catalogue, auth_headers):
        response = client.get(
            "/api/translations/search",
            params={
                "key": "login",
                "content": "login",
                "language_id": str(english.id),
                "tags": f"{catalogue['web'].id},{catalogue['api'].id}",
            },
            headers=auth_headers,
        )

        data = response.json()
        assert data["count"] == 2
        assert {item["key"] for item in data["data"]} == {"errors.login", "menu.home"}

    def test_invalid_tag_ids(self, client, catalogue, auth_headers):
        response = client.get(
            "/api/translations/search",
            params={"tags": "not-a-uuid"},
            headers=auth_headers,
        )
        assert response.status_code == 422


class TestUpdateTranslation:
    def test_update_replaces_tags(self, client, session, english, auth_headers):
        web = make_tag(session, name="web")
        api = make_tag(session, name="api")
        translation = make_translation(session, english, key="greeting", tags=[web])

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"content": "Hey", "tags": [str(api.id)]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "Hey"
        assert [tag["name"] for tag in data["tags"]] == ["api"]

    def test_update_without_tags_keeps_them(self, client, session, english, auth_headers):
        web = make_tag(session, name="web")
        translation = make_translation(session, english, key="greeting", tags=[web])

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"content": "Hey"},
            headers=auth_headers,
        )

        assert [tag["name"] for tag in response.json()["tags"]] == ["web"]

    def test_empty_tag_list_clears_tags(self, client, session, english, auth_headers):
        web = make_tag(session, name="web")
        translation = make_translation(session, english, key="greeting", tags=[web])

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"tags": []},
            headers=auth_headers,
        )

        assert response.json()["tags"] == []

    def test_update_bumps_updated_at(self, client, session, english, auth_headers):
        translation = make_translation(session, english, key="greeting")
        before = translation.updated_at

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"content": "Hey"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        session.refresh(translation)
        assert translation.updated_at > before

    def test_key_conflict(self, client, session, english, auth_headers):
        make_translation(session, english, key="greeting")
        translation = make_translation(session, english, key="farewell")

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"key": "greeting"},
            headers=auth_headers,
        )

        assert response.status_code == 409

    def test_move_to_other_language_updates_both_exports(
        self, client, session, english, french, auth_headers
    ):
        translation = make_translation(session, english, key="greeting", content="Hi")
        assert client.get("/api/export/language/en").json() == {"greeting": "Hi"}
        assert client.get("/api/export/language/fr").json() == {}

        response = client.put(
            f"/api/translations/{translation.id}",
            json={"language_id": str(french.id)},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["language"]["code"] == "fr"

        assert client.get("/api/export/language/en").json() == {}
        assert client.get("/api/export/language/fr").json() == {"greeting": "Hi"}


class TestDeleteTranslation:
    def test_delete(self, client, session, english, auth_headers):
        translation = make_translation(session, english, key="greeting")

        response = client.delete(
            f"/api/translations/{translation.id}", headers=auth_headers
        )
        assert response.status_code == 200

        response = client.get(
            f"/api/translations/{translation.id}", headers=auth_headers
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "TRANSLATION_NOT_FOUND"


def test_listing_pages_by_key_with_tags_loaded(session, english, french):
    web = make_tag(session, name="web")
    make_translation(session, french, key="b.title", content="Titre")
    make_translation(session, english, key="a.title", content="Title", tags=[web])
    make_translation(session, english, key="b.title", content="Title")
    make_translation(session, french, key="a.title", content="Titre", tags=[web])

    translations, count = get_translations(session=session, skip=1, limit=2)

    assert count == 4
    assert [t.key for t in translations] == ["a.title", "b.title"]
    first_page, _ = get_translations(session=session, skip=0, limit=2)
    assert [t.key for t in first_page] == ["a.title", "a.title"]
    assert all([tag.name for tag in t.tags] == ["web"] for t in first_page)
