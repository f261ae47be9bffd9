# services/incidents_service.py
# Incident feeds from the SafeCity backend, one retry per page load
import logging
from typing import Any, Callable, List

import requests

from core import config as CFG
from core.http_client import http_get, is_2xx
from models.incidents import Incident, IncidentFeed
from parsers.incidents_parser import parse_incident_list
from texts.ui_en import LOAD_ERROR

class FeedError(RuntimeError):
    pass

# -----------------------------
# Body shapes
# -----------------------------
def _unwrap_incidents(data: Any) -> List[Any]:
    # GET /incidents -> { "incidents": [...] }; a missing list is an empty feed
    if not isinstance(data, dict):
        raise FeedError(f"malformed body: expected object, got {type(data).__name__}")
    rows = data.get("incidents")
    if not isinstance(rows, list):
        logging.warning("[incidents] body has no 'incidents' list, treating as empty")
        return []
    return rows

def _unwrap_reports(data: Any) -> List[Any]:
    # GET /reports -> [...] or { "error": "..." }
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and data.get("error"):
        raise FeedError(str(data["error"]))
    raise FeedError(f"malformed body: expected list, got {type(data).__name__}")

# -----------------------------
# Fetch
# -----------------------------
def _fetch_once(url: str, unwrap: Callable[[Any], List[Any]]) -> List[Incident]:
    r = http_get(url)
    if not is_2xx(r):
        raise FeedError(f"HTTP {r.status_code}")
    return parse_incident_list(unwrap(r.json()))

def fetch_with_retry(fetch_once: Callable[[], List[Incident]], label: str = "incidents") -> IncidentFeed:
    """
    First attempt, then exactly one more on any failure (transport, status,
    body). No backoff. After that the feed carries the banner text.
    """
    detail = None
    attempts = 0
    for attempt in range(1 + CFG.FETCH_RETRIES):
        attempts += 1
        if attempt:
            logging.info(f"[incidents] retrying {label}...")
        try:
            items = fetch_once()
            return IncidentFeed(incidents=items, attempts=attempts)
        except (requests.RequestException, ValueError, FeedError) as e:
            detail = str(e) or type(e).__name__
            logging.warning(f"[incidents] {label} attempt {attempts} failed: {type(e).__name__}: {e}")

    logging.error(f"[incidents] {label} unavailable after {attempts} attempts: {detail}")
    return IncidentFeed(incidents=[], error=LOAD_ERROR, detail=detail, attempts=attempts)

def load_incidents() -> IncidentFeed:
    """Dashboard / export feed."""
    return fetch_with_retry(lambda: _fetch_once(CFG.INCIDENTS_URL, _unwrap_incidents), "incidents")

def load_reports() -> IncidentFeed:
    """Map / report list feed (looser record shape)."""
    return fetch_with_retry(lambda: _fetch_once(CFG.REPORTS_URL, _unwrap_reports), "reports")
