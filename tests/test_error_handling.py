"""
Error handling and edge case tests.

This test suite covers how failures reach the client:
- Error envelope produced by the registered exception handlers
- Request validation failures (bad ids, missing fields)
- Unexpected persistence failures surfacing as 500
"""

from sqlalchemy.orm.exc import StaleDataError

from test_fixtures import client, engine, lenient_client, session_factory
from api.middleware import error_body
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from repositories import FeedingRepository
from services import FeedingService

BASE = "/api/feedings"


# =============================================================================
# ERROR ENVELOPE
# =============================================================================


def test_not_found_envelope(client):
    r = client.get(f"{BASE}/3")
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"] == "Feeding 3 not found"
    assert body["error"]["details"] == {"id": 3}
    assert "timestamp" in body


def test_bad_request_envelope_reports_both_ids(client):
    client.post(BASE, json={"name": "Oats"})
    r = client.put(f"{BASE}/1", json={"id": 8, "name": "Bran"})
    assert r.status_code == 400
    assert r.json()["error"]["details"] == {"path_id": 1, "body_id": 8}


def test_conflict_error_maps_to_409(client, monkeypatch):
    def conflicting(db):
        raise ConflictError("Feeding is being modified", code="FEEDING_BUSY")

    monkeypatch.setattr(FeedingService, "list_feedings", conflicting)
    r = client.get(BASE)
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "FEEDING_BUSY"


def test_method_not_allowed_uses_http_code(client):
    r = client.patch(f"{BASE}/1", json={"name": "Bran"})
    assert r.status_code == 405
    assert r.json()["error"]["code"] == "HTTP_405"


# =============================================================================
# REQUEST VALIDATION
# =============================================================================


def test_non_integer_id_is_rejected(client):
    r = client.get(f"{BASE}/abc")
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_requires_name(client):
    r = client.post(BASE, json={"pet_id": 1})
    assert r.status_code == 422
    assert client.get(BASE).json() == []


def test_create_rejects_empty_name(client):
    r = client.post(BASE, json={"name": ""})
    assert r.status_code == 422


def test_malformed_json_is_rejected(client):
    r = client.post(
        BASE, content=b"{not json", headers={"content-type": "application/json"}
    )
    assert r.status_code == 422


def test_id_beyond_integer_column_is_rejected(lenient_client):
    """
    Ids no database row can hold never reach the driver.

    Verifies:
    - GET, PUT and DELETE answer 422 rather than 500
    - The store is untouched
    """
    huge = 2**63
    assert lenient_client.post(BASE, json={"name": "Oats"}).status_code == 201

    for r in (
        lenient_client.get(f"{BASE}/{huge}"),
        lenient_client.delete(f"{BASE}/{huge}"),
        lenient_client.put(f"{BASE}/{huge}", json={"id": huge, "name": "Bran"}),
    ):
        assert r.status_code == 422
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"

    assert [f["name"] for f in lenient_client.get(BASE).json()] == ["Oats"]


def test_replace_body_id_beyond_integer_column_is_rejected(lenient_client):
    lenient_client.post(BASE, json={"name": "Oats"})
    r = lenient_client.put(f"{BASE}/1", json={"id": 2**31, "name": "Bran"})
    assert r.status_code == 422


def test_pet_id_beyond_integer_column_is_rejected(lenient_client):
    r = lenient_client.post(BASE, json={"name": "Oats", "pet_id": 2**40})
    assert r.status_code == 422
    assert lenient_client.get(BASE).json() == []


def test_largest_and_non_positive_ids_are_plain_not_found(client):
    for feeding_id in (2**31 - 1, 0, -5):
        assert client.get(f"{BASE}/{feeding_id}").status_code == 404
        assert client.delete(f"{BASE}/{feeding_id}").status_code == 404


def test_error_body_stringifies_nested_exceptions():
    body = error_body(
        "VALIDATION_ERROR",
        "Request validation failed",
        [{"loc": ("body", "when"), "ctx": {"error": ValueError("bad date")}}],
    )
    assert body["error"]["details"] == [
        {"loc": ["body", "when"], "ctx": {"error": "bad date"}}
    ]


# =============================================================================
# UNEXPECTED FAILURES
# =============================================================================


def test_unexpected_error_returns_500(lenient_client, monkeypatch):
    def broken(db):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(FeedingService, "list_feedings", broken)
    r = lenient_client.get(BASE)
    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "connection reset" not in body["error"]["message"]


def test_replace_conflict_on_existing_row_returns_500(lenient_client, monkeypatch):
    """
    Verifies:
    - A commit conflict for a feeding that still exists is not turned into 404
    - The failure propagates to the general handler
    """
    assert lenient_client.post(BASE, json={"name": "Oats"}).status_code == 201

    def conflicting_replace(self, entity):
        raise StaleDataError("simulated conflict")

    monkeypatch.setattr(FeedingRepository, "replace", conflicting_replace)

    r = lenient_client.put(f"{BASE}/1", json={"id": 1, "name": "Bran"})
    assert r.status_code == 500
    assert lenient_client.get(f"{BASE}/1").json()["name"] == "Oats"


def test_exception_to_dict():
    exc = NotFoundError("Feeding 1 not found", details={"id": 1}, code="NOT_FOUND")
    assert exc.to_dict() == {
        "message": "Feeding 1 not found",
        "code": "NOT_FOUND",
        "details": {"id": 1},
    }
    assert str(ServiceValidationError()) == "Invalid input"
