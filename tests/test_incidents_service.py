import requests

from services import incidents_service as svc
from texts.ui_en import LOAD_ERROR

ROWS = [{"_id": "1", "type": "hazard", "severity": 1, "lat": "22.5", "lng": "86.2"}]

def test_first_attempt_succeeds(monkeypatch, scripted, respond):
    fake = scripted(respond({"incidents": ROWS}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error is None
    assert [x.id for x in feed.incidents] == ["1"]
    assert len(fake.calls) == 1

def test_network_error_then_success(monkeypatch, scripted, respond):
    fake = scripted(
        requests.ConnectionError("cold start"),
        respond({"incidents": ROWS + [{"_id": "2", "type": "theft"}]}),
    )
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error is None
    assert [x.id for x in feed.incidents] == ["1", "2"]
    assert feed.attempts == 2

def test_two_failures_give_banner_and_empty_list(monkeypatch, scripted):
    fake = scripted(requests.ConnectionError("down"), requests.Timeout("slow"))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error == LOAD_ERROR
    assert feed.incidents == []
    assert feed.detail == "slow"
    assert len(fake.calls) == 2

def test_redirect_status_is_retried(monkeypatch, scripted, respond):
    fake = scripted(respond({"incidents": ROWS}, 304), respond({"incidents": ROWS}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error is None
    assert feed.attempts == 2
    assert len(fake.calls) == 2

def test_retries_exactly_once(monkeypatch, scripted, respond):
    fake = scripted(respond({}, 500), respond({}, 503), respond({"incidents": ROWS}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error == LOAD_ERROR
    assert feed.detail == "HTTP 503"
    assert len(fake.calls) == 2
    assert len(fake.steps) == 1

def test_malformed_body_is_retried(monkeypatch, scripted, respond, not_json):
    fake = scripted(not_json(), respond({"incidents": ROWS}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error is None
    assert len(feed.incidents) == 1

def test_non_object_body_is_malformed(monkeypatch, scripted, respond):
    fake = scripted(respond(ROWS), respond(ROWS))
    monkeypatch.setattr(svc, "http_get", fake)
    assert svc.load_incidents().error == LOAD_ERROR

def test_missing_incidents_key_is_an_empty_feed(monkeypatch, scripted, respond):
    fake = scripted(respond({"data": ROWS}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_incidents()
    assert feed.error is None
    assert feed.incidents == []
    assert len(fake.calls) == 1

def test_reports_list_shape(monkeypatch, scripted, respond):
    fake = scripted(respond([{"id": 3, "type": "theft", "f_lat": "1", "f_lng": "2"}]))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_reports()
    assert feed.error is None
    assert feed.incidents[0].id == "3"
    assert fake.calls[0][0].endswith("/reports")

def test_reports_error_body(monkeypatch, scripted, respond):
    fake = scripted(respond({"error": "db offline"}), respond({"error": "db offline"}))
    monkeypatch.setattr(svc, "http_get", fake)
    feed = svc.load_reports()
    assert feed.error == LOAD_ERROR
    assert feed.detail == "db offline"
    assert feed.incidents == []

def test_fetch_with_retry_generic():
    calls = []

    def once():
        calls.append(1)
        if len(calls) == 1:
            raise svc.FeedError("first")
        return []

    feed = svc.fetch_with_retry(once, "test")
    assert feed.error is None and feed.incidents == []
    assert len(calls) == 2
