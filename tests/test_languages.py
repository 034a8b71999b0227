"""
Tests for the /api/languages endpoints.
"""

import uuid

from tests.factories import make_language, make_translation


class TestLanguagesAuth:
    def test_requires_token(self, client, session):
        response = client.get("/api/languages/")
        assert response.status_code == 401


class TestCreateLanguage:
    def test_create(self, client, auth_headers):
        response = client.post(
            "/api/languages/",
            json={"code": "en", "name": "English"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "en"
        assert data["name"] == "English"
        assert data["is_active"] is True
        assert "created_at" in data and "updated_at" in data

    def test_duplicate_code(self, client, session, auth_headers):
        make_language(session, code="en")

        response = client.post(
            "/api/languages/",
            json={"code": "en", "name": "English again"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "LANGUAGE_EXISTS"

    def test_code_too_long(self, client, auth_headers):
        response = client.post(
            "/api/languages/",
            json={"code": "x" * 11, "name": "Too long"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_name_required(self, client, auth_headers):
        response = client.post(
            "/api/languages/", json={"code": "en"}, headers=auth_headers
        )
        assert response.status_code == 422


class TestReadLanguages:
    def test_list_ordered_by_code(self, client, session, auth_headers):
        make_language(session, code="fr")
        make_language(session, code="de", is_active=False)
        make_language(session, code="en")

        response = client.get("/api/languages/", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [item["code"] for item in data["data"]] == ["de", "en", "fr"]

    def test_pagination(self, client, session, auth_headers):
        for code in ("aa", "bb", "cc"):
            make_language(session, code=code)

        response = client.get(
            "/api/languages/", params={"page": 2, "per_page": 2}, headers=auth_headers
        )

        data = response.json()
        assert data["count"] == 3
        assert [item["code"] for item in data["data"]] == ["cc"]

    def test_per_page_is_capped(self, client, auth_headers):
        response = client.get(
            "/api/languages/", params={"per_page": 1000}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_read_one(self, client, session, auth_headers):
        language = make_language(session, code="en", name="English")

        response = client.get(f"/api/languages/{language.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "English"

    def test_read_missing(self, client, auth_headers):
        response = client.get(f"/api/languages/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "LANGUAGE_NOT_FOUND"


class TestUpdateLanguage:
    def test_update_bumps_updated_at(self, client, session, auth_headers):
        language = make_language(session, code="en", name="English")
        before = language.updated_at

        response = client.put(
            f"/api/languages/{language.id}",
            json={"name": "English (US)", "is_active": False},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "English (US)"
        assert data["is_active"] is False
        session.refresh(language)
        assert language.updated_at > before

    def test_code_conflict(self, client, session, auth_headers):
        make_language(session, code="en")
        french = make_language(session, code="fr")

        response = client.put(
            f"/api/languages/{french.id}", json={"code": "en"}, headers=auth_headers
        )

        assert response.status_code == 409

    def test_keeping_own_code(self, client, session, auth_headers):
        language = make_language(session, code="en")

        response = client.put(
            f"/api/languages/{language.id}", json={"code": "en"}, headers=auth_headers
        )

        assert response.status_code == 200


class TestDeleteLanguage:
    def test_delete_cascades_to_translations(self, client, session, auth_headers):
        language = make_language(session, code="en")
        make_translation(session, language, key="greeting")

        response = client.delete(f"/api/languages/{language.id}", headers=auth_headers)
        assert response.status_code == 200

        listing = client.get("/api/translations/", headers=auth_headers).json()
        assert listing["count"] == 0

    def test_delete_missing(self, client, auth_headers):
        response = client.delete(f"/api/languages/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
