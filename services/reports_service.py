# services/reports_service.py
# Report list rows, coordinate auto-fill, and report submission
import logging
from typing import Any, Dict, List

import requests

from core.config import SUBMIT_URL
from core.geocoding import build_query, geocode
from core.http_client import http_post, is_2xx
from models.forms import FormMessage, GeocodeFill, ReportForm, SubmitOutcome
from models.incidents import Incident, IncidentFeed, ReportRow, SeverityBucket
from parsers.geo_normalizer import parse_coordinates
from parsers.incidents_parser import normalize_severity, severity_wire_label
from texts import ui_en as T

class ReportValidationError(ValueError):
    pass

# -----------------------------
# Report list
# -----------------------------
def _row_location(it: Incident) -> str:
    pair = parse_coordinates(it.lat, it.lng)
    return f"{it.lat}, {it.lng}" if pair is not None else T.NO_LOCATION

# list rows use their own three-step scale: 4 high, 3 medium, anything else low
_ROW_CLASSES = {
    SeverityBucket.CRITICAL: "high",
    SeverityBucket.HIGH: "medium",
}

def row_severity_class(value) -> str:
    return _ROW_CLASSES.get(normalize_severity(value), "low")

def report_rows(feed: IncidentFeed) -> List[ReportRow]:
    return [
        ReportRow(
            type=it.type,
            description=it.description,
            severity=it.severity,
            severity_class=row_severity_class(it.severity),
            status=it.status or "pending",
            location=_row_location(it),
        )
        for it in feed.incidents
    ]

# -----------------------------
# Auto-fill
# -----------------------------
def autofill_coordinates(city: str, area: str) -> GeocodeFill:
    """Blank coordinates when the lookup finds nothing or fails."""
    q = build_query(city, area)
    hit = geocode(q)
    if not hit:
        return GeocodeFill(query=q)
    lat, lng, label = hit
    return GeocodeFill(query=q, lat=lat, lng=lng, label=label, found=True)

# -----------------------------
# Submission
# -----------------------------
def _blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())

def build_payload(form: ReportForm) -> Dict[str, Any]:
    """
    Body for POST /incidents. Severity goes out as a lower-case label.
    Blank coordinates go out as null; filled-in but invalid ones are refused.
    """
    if not form.type.strip() or not form.description.strip():
        raise ReportValidationError(T.MISSING_FIELDS)

    severity = severity_wire_label(form.severity)
    if severity is None:
        raise ReportValidationError(T.BAD_SEVERITY)

    if _blank(form.lat) or _blank(form.lng):
        lat = lng = None
    else:
        pair = parse_coordinates(form.lat, form.lng)
        if pair is None:
            raise ReportValidationError(T.BAD_COORDINATES)
        lat, lng = pair

    body: Dict[str, Any] = {
        "type": form.type,
        "description": form.description,
        "severity": severity,
        "lat": lat,
        "lng": lng,
    }
    for key in ("city", "area", "landmark"):
        val = getattr(form, key)
        if val.strip():
            body[key] = val
    return body

def _error_text(r: requests.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return T.REPORT_FAILED
    if isinstance(data, dict):
        return str(data.get("detail") or data.get("message") or T.REPORT_FAILED)
    return T.REPORT_FAILED

def _failed(form: ReportForm, text: str) -> SubmitOutcome:
    return SubmitOutcome(
        ok=False,
        message=FormMessage(text=f"{T.REPORT_ERROR_PREFIX}{text}", type="error"),
        form=form,
    )

def submit_report(form: ReportForm) -> SubmitOutcome:
    """On failure the form comes back as entered so the user can fix and resend."""
    try:
        body = build_payload(form)
    except ReportValidationError as e:
        logging.info(f"[report] rejected locally: {e}")
        return _failed(form, str(e))

    if body["lat"] is None:
        logging.info("[report] submitting without coordinates; it won't show on the map")

    try:
        r = http_post(SUBMIT_URL, body)
    except requests.RequestException as e:
        logging.warning(f"[report] submit failed: {type(e).__name__}: {e}")
        return _failed(form, str(e) or T.REPORT_FAILED)

    if not is_2xx(r):
        text = _error_text(r)
        logging.warning(f"[report] backend refused ({r.status_code}): {text}")
        return _failed(form, text)

    try:
        created = r.json()
    except ValueError:
        created = None
    logging.info(f"[report] submitted type={body['type']!r} severity={body['severity']}")
    return SubmitOutcome(
        ok=True,
        message=FormMessage(text=T.REPORT_SUBMITTED, type="success"),
        form=ReportForm(),
        created=created,
    )
