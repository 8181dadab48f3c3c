"""
HTTP tests for the /dates endpoints using a temporary JSON data file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the datestore package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datestore.app import create_app  # noqa: E402
from datestore.core import config as core_config  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({"availableDates": ["2024-01-01"], "occupiedDates": ["2024-02-01"]}, indent=2),
        encoding="utf-8",
    )
    monkeypatch.setenv("DATA_FILE", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_file):
    with TestClient(create_app()) as test_client:
        yield test_client


def test_get_returns_full_document(client):
    resp = client.get("/dates")
    assert resp.status_code == 200
    assert resp.json() == {"availableDates": ["2024-01-01"], "occupiedDates": ["2024-02-01"]}


def test_put_replaces_and_persists(client, data_file):
    resp = client.put("/dates/available", json={"availableDates": ["2024-06-01", "2024-06-02"]})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Available dates updated successfully"}

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert stored == {"availableDates": ["2024-06-01", "2024-06-02"], "occupiedDates": ["2024-02-01"]}
    assert data_file.read_text(encoding="utf-8").startswith('{\n  "availableDates"')
    assert client.get("/dates").json() == stored


def test_put_rejects_non_array(client, data_file):
    before = data_file.read_text(encoding="utf-8")
    resp = client.put("/dates/available", json={"availableDates": "not-an-array"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid availableDates data"}
    assert data_file.read_text(encoding="utf-8") == before


def test_patch_merges_without_duplicates(client):
    resp = client.patch("/dates/occupied", json={"occupiedDates": ["2024-02-01", "2024-02-02"]})
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Occupied dates updated successfully",
        "occupiedDates": ["2024-02-01", "2024-02-02"],
    }


def test_delete_clears_collection(client):
    resp = client.delete("/dates/available")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Available dates deleted successfully"}
    assert client.get("/dates").json()["availableDates"] == []


def test_post_range_across_month_boundary(client):
    client.delete("/dates/available")
    resp = client.post("/dates/available", json={"fromDate": "2024-01-30", "toDate": "2024-02-02"})
    assert resp.status_code == 200
    assert resp.json()["availableDates"] == ["2024-01-30", "2024-01-31", "2024-02-01", "2024-02-02"]


def test_post_reversed_range_adds_nothing(client):
    resp = client.post("/dates/occupied", json={"fromDate": "2024-03-10", "toDate": "2024-03-01"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Occupied dates updated successfully", "occupiedDates": ["2024-02-01"]}


def test_post_missing_to_date_is_rejected(client):
    resp = client.post("/dates/available", json={"fromDate": "2024-01-01"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid fromDate or toDate data"}


def test_invalid_json_body_is_rejected(client):
    resp = client.put(
        "/dates/available", content="{broken", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid availableDates data"}


def test_unknown_collection_is_not_found(client):
    resp = client.delete("/dates/blocked")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Unknown date collection"}


def test_storage_failures_map_to_500(client, data_file):
    data_file.write_text("{not json", encoding="utf-8")
    assert client.get("/dates").status_code == 500
    assert client.get("/dates").json() == {"error": "Error reading data"}

    resp = client.patch("/dates/available", json={"availableDates": ["2024-01-05"]})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error updating availableDates"}

    resp = client.delete("/dates/occupied")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error deleting occupiedDates"}


def test_put_occupied_success_message(client):
    resp = client.put("/dates/occupied", json={"occupiedDates": ["2024-07-01"]})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Occupied dates updated successfully"}
    assert client.get("/dates").json()["occupiedDates"] == ["2024-07-01"]


def test_post_range_ending_on_last_calendar_day(client):
    resp = client.post("/dates/available", json={"fromDate": "9999-12-30", "toDate": "9999-12-31"})
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Available dates updated successfully",
        "availableDates": ["2024-01-01", "9999-12-30", "9999-12-31"],
    }


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("put", "/dates/occupied", {"occupiedDates": "not-an-array"}, "Invalid occupiedDates data"),
        ("put", "/dates/available", None, "Invalid availableDates data"),
        ("patch", "/dates/available", {"availableDates": "not-an-array"}, "Invalid availableDates data"),
        ("patch", "/dates/occupied", {"occupiedDates": ["2024-02-30"]}, "Invalid occupiedDates data"),
        ("patch", "/dates/occupied", {"availableDates": ["2024-01-01"]}, "Invalid occupiedDates data"),
        ("post", "/dates/occupied", {"toDate": "2024-01-01"}, "Invalid fromDate or toDate data"),
        ("post", "/dates/occupied", {"fromDate": "2024-01-32", "toDate": "2024-02-01"}, "Invalid fromDate or toDate data"),
        ("post", "/dates/available", [], "Invalid fromDate or toDate data"),
    ],
)
def test_bad_bodies_are_rejected_before_storage(client, data_file, method, path, body, message):
    before = data_file.read_text(encoding="utf-8")
    kwargs = {} if body is None else {"json": body}
    resp = getattr(client, method)(path, **kwargs)
    assert resp.status_code == 400
    assert resp.json() == {"error": message}
    assert data_file.read_text(encoding="utf-8") == before


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("put", "/dates/available", {"availableDates": ["2024-01-05"]}, "Error updating availableDates"),
        ("put", "/dates/occupied", {"occupiedDates": ["2024-01-05"]}, "Error updating occupiedDates"),
        ("patch", "/dates/occupied", {"occupiedDates": ["2024-01-05"]}, "Error updating occupiedDates"),
        ("post", "/dates/available", {"fromDate": "2024-01-01", "toDate": "2024-01-02"}, "Error updating availableDates"),
        ("post", "/dates/occupied", {"fromDate": "2024-01-01", "toDate": "2024-01-02"}, "Error updating occupiedDates"),
        ("delete", "/dates/available", None, "Error deleting availableDates"),
    ],
)
def test_mutations_on_unreadable_file_answer_500(client, data_file, method, path, body, message):
    data_file.unlink()
    kwargs = {} if body is None else {"json": body}
    resp = getattr(client, method)(path, **kwargs)
    assert resp.status_code == 500
    assert resp.json() == {"error": message}


def test_openapi_documents_request_bodies(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "requestBody" in paths["/dates/available"]["put"]
    assert "requestBody" in paths["/dates/occupied"]["post"]


def test_cors_allows_any_origin(client):
    resp = client.get("/dates", headers={"Origin": "https://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_settings_read_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().port == 8080
        monkeypatch.setenv("PORT", "abc")
        core_config.get_settings.cache_clear()
        assert core_config.get_settings().port == 3000
    finally:
        core_config.get_settings.cache_clear()
