"""HTTP tests for the demo service (app.py)."""

import pytest
from fastapi.testclient import TestClient

from typed_access.app import create_app
from typed_access.core.config import Config
from typed_access.core.http import app_config


@pytest.fixture
def client(config: Config) -> TestClient:
    return TestClient(create_app(config))


class TestInfoEndpoints:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["service"] == "typed-access-test"
        assert body["endpoints"]["search"] == "/search"

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"


class TestSearch:
    def test_json_body(self, client: TestClient) -> None:
        response = client.post(
            "/search",
            json={"q": "lamps", "page": 3, "per_page": 5, "tags": ["a", "b"], "exact": True},
        )
        assert response.status_code == 200
        assert response.json() == {
            "query": "lamps",
            "page": 3,
            "per_page": 5,
            "offset": 10,
            "tags": ["a", "b"],
            "exact": True,
        }

    def test_defaults_from_config(self, client: TestClient) -> None:
        response = client.post("/search", json={"q": "lamps", "page": None})
        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["per_page"] == 10
        assert body["tags"] == []
        assert body["exact"] is False

    def test_query_string_is_merged(self, client: TestClient) -> None:
        response = client.post("/search?q=from-query", json={"page": 2})
        assert response.status_code == 200
        assert response.json()["query"] == "from-query"

    def test_body_overrides_query(self, client: TestClient) -> None:
        response = client.post("/search?q=from-query", json={"q": "from-body"})
        assert response.json()["query"] == "from-body"

    def test_missing_required_input(self, client: TestClient) -> None:
        response = client.post("/search", json={"page": 1})
        assert response.status_code == 400
        assert response.json()["detail"] == {"error": "missing_key", "key": "q"}

    def test_query_string_numbers_are_not_coerced(self, client: TestClient) -> None:
        response = client.post("/search?q=x&page=2")
        assert response.status_code == 422
        assert response.json()["detail"] == {
            "error": "type_mismatch",
            "key": "page",
            "expected": "integer",
            "actual": "string",
        }

    def test_mismatch_detail_omits_value(self, client: TestClient) -> None:
        response = client.post("/search", json={"q": "x", "exact": "secret-token"})
        assert response.status_code == 422
        assert "secret-token" not in response.text
        assert response.json()["detail"]["expected"] == "boolean"

    def test_bad_tag_element(self, client: TestClient) -> None:
        response = client.post("/search", json={"q": "x", "tags": ["ok", 5]})
        assert response.status_code == 422
        assert response.json()["detail"]["key"] == "tags.1"

    def test_repeated_query_values_form_an_array(self, client: TestClient) -> None:
        response = client.post("/search?q=x&tags=a&tags=b")
        assert response.status_code == 200
        assert response.json()["tags"] == ["a", "b"]

    def test_form_body(self, client: TestClient) -> None:
        response = client.post("/search", data={"q": "from-form"})
        assert response.status_code == 200
        assert response.json()["query"] == "from-form"

    def test_per_page_above_maximum(self, client: TestClient) -> None:
        response = client.post("/search", json={"q": "x", "per_page": 51})
        assert response.status_code == 422

    def test_non_positive_page(self, client: TestClient) -> None:
        response = client.post("/search", json={"q": "x", "page": 0})
        assert response.status_code == 422

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post("/search", content=b"{not json", headers={"content-type": "application/json"})
        assert response.status_code == 400

    def test_json_body_must_be_an_object(self, client: TestClient) -> None:
        response = client.post("/search", json=["q"])
        assert response.status_code == 400


class TestErrorHandling:
    def test_configuration_failure_is_a_server_error(self, config: Config) -> None:
        app = create_app(config)
        broken = Config(APP_NAME=7).accessor()  # type: ignore[arg-type]
        app.dependency_overrides[app_config] = lambda: broken
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/", headers={"origin": "https://example.com"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert response.headers["access-control-allow-origin"] == "https://example.com"

    def test_invalid_configuration_aborts_startup(self) -> None:
        with pytest.raises(ValueError):
            create_app(Config(DEFAULT_PER_PAGE=500))

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/search",
            headers={"origin": "https://example.com", "access-control-request-method": "POST"},
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://example.com"
