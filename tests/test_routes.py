import csv
import io

import pytest
import requests
from fastapi.testclient import TestClient

import main
from services import auth_service, incidents_service, reports_service

INCIDENTS = {"incidents": [
    {"_id": "1", "type": "hazard", "description": "pothole, deep", "severity": 1,
     "lat": "22.5", "lng": "86.2", "consent_public_map": True},
    {"_id": "2", "type": "theft", "description": "bike", "severity": "high",
     "lat": "95", "lng": "10"},
    {"_id": "3", "type": "hazard", "description": "wire", "severity": "odd"},
]}

REPORTS = [
    {"id": 1, "type": "hazard", "severity": 2, "f_lat": "22.7", "f_lng": "86.1", "status": "verified"},
    {"id": 2, "type": "theft", "severity": 4, "f_lat": "abc", "f_lng": "86.1"},
]

@pytest.fixture
def client():
    return TestClient(main.app)

def test_root_and_health(client):
    assert client.get("/").status_code == 200
    body = client.get("/health").json()
    assert body["fetch_retries"] == 1

def test_dashboard(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get", scripted(respond(INCIDENTS)))
    body = client.get("/dashboard").json()
    assert body["error"] is None
    assert [(t["type"], t["count"]) for t in body["stats"]["type_counts"]] == [("hazard", 2), ("theft", 1)]
    assert [(s["label"], s["count"]) for s in body["stats"]["severity_buckets"]] == [
        ("Low", 1), ("Moderate", 0), ("High", 1), ("Critical", 0),
    ]
    assert body["filter"] == {"selected": "All", "options": ["All", "hazard", "theft"]}
    assert [c["id"] for c in body["cards"]["items"]] == ["1", "2", "3"]

def test_dashboard_filter_and_page(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get", scripted(respond(INCIDENTS)))
    body = client.get("/dashboard", params={"type": "hazard", "page": 2, "page_size": 1}).json()
    assert [c["id"] for c in body["cards"]["items"]] == ["3"]
    assert body["cards"]["total"] == 2

def test_dashboard_retry_recovers(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get",
                        scripted(requests.ConnectionError("cold"), respond(INCIDENTS)))
    body = client.get("/dashboard").json()
    assert body["error"] is None
    assert len(body["cards"]["items"]) == 3

def test_dashboard_banner(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get",
                        scripted(requests.ConnectionError("cold"), respond({}, 502)))
    body = client.get("/dashboard").json()
    assert body["error"] == "Failed to load incident data. Please try again later."
    assert body["cards"] is None

def test_map(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get", scripted(respond(REPORTS)))
    body = client.get("/map").json()
    assert body["center"]["label"] == "Default Center: Ram Mandir"
    assert [(m["id"], m["lat"], m["lng"]) for m in body["markers"]] == [("1", 22.7, 86.1)]
    assert body["markers"][0]["color"] == "orange"
    assert body["skipped"] == 1

def test_reports_list_and_error(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get", scripted(
        respond(REPORTS),
        respond({"error": "db down"}), respond({"error": "db down"}),
    ))
    rows = client.get("/reports").json()["rows"]
    assert [r["location"] for r in rows] == ["22.7, 86.1", "No location"]
    assert client.get("/reports").json() == {"error": "db down", "rows": []}

def test_export_csv(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(incidents_service, "http_get", scripted(respond(INCIDENTS)))
    r = client.get("/reports/export.csv")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    rows = list(csv.reader(io.StringIO(r.text)))
    assert rows[0][0] == "_id"
    assert rows[1][2] == "pothole, deep"
    assert len(rows) == 4

def test_export_csv_unavailable(client, monkeypatch, scripted):
    monkeypatch.setattr(incidents_service, "http_get",
                        scripted(requests.ConnectionError(), requests.ConnectionError()))
    assert client.get("/reports/export.csv").status_code == 502

def test_submit_report(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(reports_service, "http_post", scripted(respond({"detail": "nope"}, 400)))
    form = {"type": "hazard", "description": "d", "severity": 3, "lat": "1", "lng": "2",
            "city": "X", "area": "", "landmark": ""}
    body = client.post("/report", json=form).json()
    assert body["ok"] is False
    assert body["message"]["text"] == "❌ nope"
    assert body["form"]["city"] == "X"

def test_signup_mismatch(client, monkeypatch, scripted):
    monkeypatch.setattr(auth_service, "http_post", scripted())
    body = client.post("/signup", json={"name": "a", "email": "a@b.c", "password": "1",
                                        "confirm_password": "2"}).json()
    assert body == {"ok": False, "message": "Passwords do not match!", "status_code": None}

def test_login(client, monkeypatch, scripted, respond):
    monkeypatch.setattr(auth_service, "http_post", scripted(respond({}, 200)))
    assert client.post("/login", json={"email": "a@b.c", "password": "x"}).json()["ok"] is True
