"""
Tests for the HTTP surface: text pages, redirects and the JSON API.
"""
from fastapi.testclient import TestClient

from pitico_app.exceptions import StorageError
from pitico_app.storage.mapping_store import MappingStore


def fail_storage(*args, **kwargs):
    raise StorageError("disk I/O error")


class TestPages:
    """Test plain-text pages"""

    def test_welcome(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Welcome to Pitico, your very very simple URL shortener"

    def test_register_without_url(self, client: TestClient):
        response = client.get("/register")
        assert response.text == "Please provide an URL to be shortened"

    def test_register_with_empty_url(self, client: TestClient):
        response = client.get("/register/")
        assert response.text == "Please provide an URL to be shortened"

    def test_register_url(self, client: TestClient):
        response = client.get("/register/example.com/a")
        assert response.status_code == 200
        assert response.text == "URL registered under: 1"

    def test_register_url_twice(self, client: TestClient):
        client.get("/register/example.com/a")

        response = client.get("/register/example.com/a")
        assert response.text == 'URL "example.com/a" already registered under 1'

    def test_register_storage_failure(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(MappingStore, "find_by_original_url", fail_storage)

        response = client.get("/register/example.com/a")
        assert response.status_code == 200
        assert response.text == "Error registering URL: disk I/O error"

    def test_url_not_found_page(self, client: TestClient):
        response = client.get("/url_not_found/abc")
        assert response.text == "Pitico URL abc not found"

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_reports_stored_urls(self, client: TestClient):
        client.get("/register/example.com/a")
        client.get("/register/example.com/b")

        response = client.get("/health")
        assert response.json()["urls"] == 2

    def test_health_storage_failure(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(MappingStore, "count", fail_storage)

        response = client.get("/health")
        assert response.status_code == 500
        assert response.json()["kind"] == "storage_error"


class TestRedirect:
    """Test alias resolution over HTTP"""

    def test_redirect_to_registered_url(self, client: TestClient):
        client.get("/register/example.com/b")

        response = client.get("/1", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "http://example.com/b"

    def test_unknown_alias_redirects_to_not_found(self, client: TestClient):
        response = client.get("/99", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/url_not_found/99"

    def test_unknown_alias_followed(self, client: TestClient):
        response = client.get("/99")
        assert response.status_code == 200
        assert response.text == "Pitico URL 99 not found"

    def test_not_found_redirect_escapes_alias(self, client: TestClient):
        """Reserved URL characters in an unknown alias stay inside one path segment"""
        response = client.get("/%3Fx", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/url_not_found/%3Fx"

    def test_not_found_page_shows_escaped_alias(self, client: TestClient):
        response = client.get("/a%23b%25")
        assert response.status_code == 200
        assert response.text == "Pitico URL a#b% not found"

    def test_stored_scheme_is_kept_after_http_prefix(self, client: TestClient):
        client.post("/api/v1/urls/", json={"original_url": "https://example.com/x"})

        response = client.get("/1", follow_redirects=False)
        assert response.headers["location"] == "http://https://example.com/x"

    def test_storage_failure_on_redirect(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(MappingStore, "find_by_alias", fail_storage)

        response = client.get("/1", follow_redirects=False)
        assert response.status_code == 500
        assert response.json() == {"kind": "storage_error", "detail": "disk I/O error"}


class TestJSONAPI:
    """Test the structured API"""

    def test_register(self, client: TestClient):
        response = client.post("/api/v1/urls/", json={"original_url": "example.com/a"})
        assert response.status_code == 201

        data = response.json()
        assert data["id"] == 1
        assert data["alias"] == "1"
        assert data["original_url"] == "example.com/a"
        assert data["created"] is True
        assert data["short_url"].endswith("/1")

    def test_register_existing(self, client: TestClient):
        client.post("/api/v1/urls/", json={"original_url": "example.com/a"})

        response = client.post("/api/v1/urls/", json={"original_url": "example.com/a"})
        assert response.status_code == 200
        assert response.json()["alias"] == "1"
        assert response.json()["created"] is False

    def test_register_empty_url(self, client: TestClient):
        response = client.post("/api/v1/urls/", json={"original_url": ""})
        assert response.status_code == 422

    def test_register_storage_failure(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(MappingStore, "next_identifier", fail_storage)

        response = client.post("/api/v1/urls/", json={"original_url": "example.com/a"})
        assert response.status_code == 500
        assert response.json()["kind"] == "storage_error"

    def test_get_url_info(self, client: TestClient):
        client.post("/api/v1/urls/", json={"original_url": "example.com/a"})

        response = client.get("/api/v1/urls/1")
        assert response.status_code == 200

        data = response.json()
        assert data["alias"] == "1"
        assert data["original_url"] == "example.com/a"
        assert data["created"] is False

    def test_get_unknown_alias(self, client: TestClient):
        response = client.get("/api/v1/urls/99")
        assert response.status_code == 404
        assert response.json() == {"kind": "alias_not_found", "detail": "Pitico URL 99 not found"}


class TestEndToEnd:

    def test_register_and_resolve_scenario(self, client: TestClient):
        assert client.get("/register/example.com/a").text == "URL registered under: 1"
        assert client.get("/register/example.com/b").text == "URL registered under: 2"
        assert client.get("/register/example.com/a").text == (
            'URL "example.com/a" already registered under 1'
        )

        resolved = client.get("/2", follow_redirects=False)
        assert resolved.headers["location"] == "http://example.com/b"

        missing = client.get("/99", follow_redirects=False)
        assert missing.headers["location"] == "/url_not_found/99"
