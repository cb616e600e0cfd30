"""
Suggestion Service — Unit Tests
================================
Run:  pytest test_main.py -v
"""
import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from suggestion_service.core.dependencies import get_suggested_name_repo
from suggestion_service.metrics.prometheus import SUGGESTIONS_REJECTED, SUGGESTIONS_STORED
from suggestion_service.middleware import normalize_path
from suggestion_service.models.domain import GeoLocation, SuggestedName
from suggestion_service.repositories.base import SuggestedNameRepository
from suggestion_service.repositories.memory_repository import InMemorySuggestedNameRepository

client = TestClient(app)


@pytest.fixture(autouse=True)
def repo():
    """Swap the storage for a mock repository on every request."""
    mock_repo = MagicMock(spec=SuggestedNameRepository)
    mock_repo.STORAGE = "mock"
    mock_repo.find_all.return_value = []
    mock_repo.find_by_name.return_value = None
    mock_repo.count.return_value = 0
    app.dependency_overrides[get_suggested_name_repo] = lambda: mock_repo
    yield mock_repo
    app.dependency_overrides.clear()


# ── Helpers ──────────────────────────────────────────────────────────────
def _payload(name="test", email="test@email.com", **overrides):
    body = {
        "name": name,
        "description": "this is a test",
        "locations": [{"cityOrRegionName": "ABEOKUTA", "code": "NWY"}],
        "email": email,
    }
    body.update(overrides)
    return body


# ═══════════════════════════════════════════════════════════════════════════
# HEALTH & METRICS
# ═══════════════════════════════════════════════════════════════════════════
class TestHealth:
    def test_health_ok(self):
        r = client.get("/health")
        assert r.status_code == 200
        d = r.json()
        assert d["status"] == "ok"
        assert d["service"] == "suggestion-service"
        assert "timestamp" in d

    def test_readiness_ok(self, repo):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["status"] == "ready"
        repo.verify_connection.assert_called_once()

    def test_readiness_fails_when_storage_down(self, repo):
        repo.verify_connection.side_effect = Exception("boom")
        r = client.get("/health/ready")
        assert r.status_code == 503
        assert "boom" in r.json()["detail"]

    def test_metrics_endpoint(self):
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "suggestions_created_total" in r.text

    def test_request_id_propagated(self):
        r = client.get("/v1/suggestions", headers={"X-Request-ID": "my-req-42"})
        assert r.headers["X-Request-ID"] == "my-req-42"

    def test_request_id_generated(self):
        r = client.get("/health")
        assert r.headers["X-Request-ID"]


# ═══════════════════════════════════════════════════════════════════════════
# GET /v1/suggestions/meta
# ═══════════════════════════════════════════════════════════════════════════
class TestSuggestionMeta:
    def test_meta_without_count_is_empty(self, repo):
        r = client.get("/v1/suggestions/meta")
        assert r.status_code == 204
        assert r.content == b""
        assert r.headers["content-type"].startswith("application/json")
        repo.count.assert_not_called()

    def test_meta_count_false_is_empty(self, repo):
        r = client.get("/v1/suggestions/meta", params={"count": "false"})
        assert r.status_code == 204
        assert r.content == b""
        repo.count.assert_not_called()

    def test_meta_count(self, repo):
        repo.count.return_value = 2
        r = client.get("/v1/suggestions/meta?count=true")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("application/json")
        assert r.json() == {"count": "2"}
        repo.count.assert_called_once()

    def test_meta_count_zero(self, repo):
        r = client.get("/v1/suggestions/meta?count=true")
        assert r.status_code == 200
        assert r.json() == {"count": "0"}

    def test_meta_malformed_count_400(self, repo):
        r = client.get("/v1/suggestions/meta?count=banana")
        assert r.status_code == 400
        assert r.json()["error"] == "validation_error"
        repo.count.assert_not_called()


# ═══════════════════════════════════════════════════════════════════════════
# POST /v1/suggestions
# ═══════════════════════════════════════════════════════════════════════════
class TestSuggestName:
    def test_suggest_success(self, repo):
        r = client.post("/v1/suggestions", json=_payload())
        assert r.status_code == 201
        repo.save.assert_called_once()
        saved = repo.save.call_args.args[0]
        assert isinstance(saved, SuggestedName)
        assert saved.name == "test"
        assert saved.email == "test@email.com"
        assert saved.locations == [GeoLocation(city_or_region_name="ABEOKUTA", code="NWY")]

    def test_suggest_returns_wire_shape(self):
        r = client.post("/v1/suggestions", json=_payload())
        assert r.json() == _payload()

    def test_suggest_accepts_charset_content_type(self, repo):
        r = client.post(
            "/v1/suggestions",
            content=json.dumps(_payload()),
            headers={"Content-Type": "application/json; charset=UTF-8"},
        )
        assert r.status_code == 201
        repo.save.assert_called_once()

    def test_suggest_accepts_snake_case_locations(self, repo):
        body = _payload(locations=[{"city_or_region_name": "IBADAN", "code": "SW"}])
        r = client.post("/v1/suggestions", json=body)
        assert r.status_code == 201
        assert r.json()["locations"] == [{"cityOrRegionName": "IBADAN", "code": "SW"}]

    def test_suggest_optional_fields_default(self, repo):
        r = client.post("/v1/suggestions", json={"name": "ade", "email": "ade@example.org"})
        assert r.status_code == 201
        assert r.json() == {"name": "ade", "description": "", "locations": [], "email": "ade@example.org"}

    def test_invalid_email_400(self, repo):
        r = client.post("/v1/suggestions", json=_payload(email="testemail.com"))
        assert r.status_code == 400
        assert "email" in r.json()["detail"]
        repo.save.assert_not_called()

    @pytest.mark.parametrize("email", [
        "", "test@", "@email.com", "test@email", "te st@email.com",
        "test@@email.com", "test@email.", "test@.com",
    ])
    def test_malformed_emails_400(self, repo, email):
        r = client.post("/v1/suggestions", json=_payload(email=email))
        assert r.status_code == 400
        repo.save.assert_not_called()

    @pytest.mark.parametrize("email", ["a@b.co", "first.last@sub.domain.org", "x+tag@mail.example.ng"])
    def test_well_formed_emails_201(self, repo, email):
        r = client.post("/v1/suggestions", json=_payload(email=email))
        assert r.status_code == 201
        repo.save.assert_called_once()

    def test_invalid_name_400(self, repo):
        r = client.post("/v1/suggestions", json=_payload(name=""))
        assert r.status_code == 400
        assert "name" in r.json()["detail"]
        repo.save.assert_not_called()

    def test_blank_name_400(self, repo):
        r = client.post("/v1/suggestions", json=_payload(name="   "))
        assert r.status_code == 400
        repo.save.assert_not_called()

    def test_missing_name_400(self, repo):
        body = _payload()
        del body["name"]
        assert client.post("/v1/suggestions", json=body).status_code == 400
        repo.save.assert_not_called()

    def test_missing_email_400(self, repo):
        body = _payload()
        del body["email"]
        assert client.post("/v1/suggestions", json=body).status_code == 400
        repo.save.assert_not_called()

    def test_malformed_json_400(self, repo):
        r = client.post(
            "/v1/suggestions", content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        repo.save.assert_not_called()

    def test_validation_error_carries_request_id(self):
        r = client.post(
            "/v1/suggestions", json=_payload(name=""),
            headers={"X-Request-ID": "bad-req-1"},
        )
        assert r.json()["request_id"] == "bad-req-1"


# ═══════════════════════════════════════════════════════════════════════════
# GET /v1/suggestions
# ═══════════════════════════════════════════════════════════════════════════
class TestListSuggestions:
    def test_list_empty(self, repo):
        r = client.get("/v1/suggestions")
        assert r.status_code == 200
        assert r.json() == []
        repo.find_all.assert_called_once()

    def test_list_returns_wire_shape(self, repo):
        repo.find_all.return_value = [
            SuggestedName(
                name="lagbaja", description="a placeholder name",
                locations=[GeoLocation(city_or_region_name="ABEOKUTA", code="NWY")],
                email="test@email.com",
            ),
        ]
        r = client.get("/v1/suggestions")
        assert r.status_code == 200
        assert r.json() == [{
            "name": "lagbaja",
            "description": "a placeholder name",
            "locations": [{"cityOrRegionName": "ABEOKUTA", "code": "NWY"}],
            "email": "test@email.com",
        }]
        repo.find_all.assert_called_once()

    def test_list_storage_error_500(self, repo):
        repo.find_all.side_effect = RuntimeError("storage exploded")
        failing_client = TestClient(app, raise_server_exceptions=False)
        r = failing_client.get("/v1/suggestions")
        assert r.status_code == 500
        assert r.json()["error"] == "internal_server_error"


# ═══════════════════════════════════════════════════════════════════════════
# DELETE /v1/suggestions/{name}
# ═══════════════════════════════════════════════════════════════════════════
class TestDeleteSuggestion:
    def test_delete_success(self, repo):
        found = MagicMock(spec=SuggestedName)
        repo.find_by_name.return_value = found
        r = client.delete("/v1/suggestions/lagbaja")
        assert r.status_code == 204
        assert r.content == b""
        repo.find_by_name.assert_called_once_with("lagbaja")
        repo.delete.assert_called_once_with(found)

    def test_delete_name_not_found_400(self, repo):
        r = client.delete("/v1/suggestions/lagbaja")
        assert r.status_code == 400
        d = r.json()
        assert d["error"] == "bad_request"
        assert "lagbaja" in d["detail"]
        repo.delete.assert_not_called()

    def test_delete_url_encoded_name(self, repo):
        client.delete("/v1/suggestions/ade%20bayo")
        repo.find_by_name.assert_called_once_with("ade bayo")


# ═══════════════════════════════════════════════════════════════════════════
# END-TO-END WITH IN-MEMORY STORAGE
# ═══════════════════════════════════════════════════════════════════════════
class TestInMemoryFlow:
    def test_create_list_count_delete(self):
        store = InMemorySuggestedNameRepository()
        app.dependency_overrides[get_suggested_name_repo] = lambda: store

        assert client.post("/v1/suggestions", json=_payload(name="ade")).status_code == 201
        assert client.post("/v1/suggestions", json=_payload(name="bayo")).status_code == 201
        assert client.get("/v1/suggestions/meta?count=true").json() == {"count": "2"}
        assert [s["name"] for s in client.get("/v1/suggestions").json()] == ["ade", "bayo"]

        assert client.delete("/v1/suggestions/ade").status_code == 204
        assert client.delete("/v1/suggestions/ade").status_code == 400
        assert client.get("/v1/suggestions/meta?count=true").json() == {"count": "1"}

    def test_stored_gauge_tracks_resuggested_name(self):
        store = InMemorySuggestedNameRepository()
        app.dependency_overrides[get_suggested_name_repo] = lambda: store

        assert client.post("/v1/suggestions", json=_payload(name="ade", email="a@b.co")).status_code == 201
        assert client.post("/v1/suggestions", json=_payload(name="ade", email="a@b.co")).status_code == 201
        assert store.count() == 1
        assert SUGGESTIONS_STORED._value.get() == store.count()

        client.delete("/v1/suggestions/ade")
        assert SUGGESTIONS_STORED._value.get() == store.count() == 0


# ═══════════════════════════════════════════════════════════════════════════
# REJECTION METRICS
# ═══════════════════════════════════════════════════════════════════════════
class TestRejectionMetrics:
    @staticmethod
    def _rejected():
        return SUGGESTIONS_REJECTED.labels(reason="validation")._value.get()

    def test_invalid_suggestion_counted(self):
        before = self._rejected()
        assert client.post("/v1/suggestions", json=_payload(name="")).status_code == 400
        assert self._rejected() == before + 1

    def test_malformed_meta_query_not_counted(self):
        before = self._rejected()
        assert client.get("/v1/suggestions/meta?count=banana").status_code == 400
        assert self._rejected() == before


# ═══════════════════════════════════════════════════════════════════════════
# MIDDLEWARE HELPERS
# ═══════════════════════════════════════════════════════════════════════════
class TestNormalizePath:
    @pytest.mark.parametrize("path,expected", [
        ("/v1/suggestions", "/v1/suggestions"),
        ("/v1/suggestions/meta", "/v1/suggestions/meta"),
        ("/v1/suggestions/lagbaja", "/v1/suggestions/{param}"),
        ("/", "/"),
    ])
    def test_normalize(self, path, expected):
        assert normalize_path(path) == expected
