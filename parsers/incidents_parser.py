# parsers/incidents_parser.py
import logging
import math
from typing import Any, Dict, List, Optional

from models.incidents import Incident, SeverityBucket

# -----------------------------
# Severity: int 1..4 or a label, anything else maps to no bucket
# -----------------------------
_SEVERITY_TOKENS: Dict[str, SeverityBucket] = {
    "1": SeverityBucket.LOW,
    "low": SeverityBucket.LOW,
    "2": SeverityBucket.MODERATE,
    "medium": SeverityBucket.MODERATE,
    "moderate": SeverityBucket.MODERATE,
    "3": SeverityBucket.HIGH,
    "high": SeverityBucket.HIGH,
    "4": SeverityBucket.CRITICAL,
    "critical": SeverityBucket.CRITICAL,
}

# what POST /incidents expects
_WIRE_LABELS: Dict[SeverityBucket, str] = {
    SeverityBucket.LOW: "low",
    SeverityBucket.MODERATE: "medium",
    SeverityBucket.HIGH: "high",
    SeverityBucket.CRITICAL: "critical",
}

def _severity_token(value: Any) -> str:
    # bool is an int subclass; true/false are not levels
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value).strip().lower()

def normalize_severity(value: Any) -> Optional[SeverityBucket]:
    """
    Map a raw severity (number, label, or junk) to its bucket.
    Returns None for anything unrecognised; never raises.
    """
    return _SEVERITY_TOKENS.get(_severity_token(value))

def severity_wire_label(value: Any) -> Optional[str]:
    bucket = normalize_severity(value)
    return _WIRE_LABELS[bucket] if bucket is not None else None

# -----------------------------
# Record parsing (two backend shapes: /incidents and /reports)
# -----------------------------
def safe_float(x) -> Optional[float]:
    """Numeric or numeric-string to a finite float, else None."""
    if x is None or isinstance(x, bool):
        return None
    s = x if isinstance(x, (int, float)) else str(x).strip()
    if s == "":
        return None
    try:
        v = float(s)
    except (ValueError, OverflowError):
        return None
    return v if math.isfinite(v) else None

def _pick(d: dict, *cands):
    for c in cands:
        v = d.get(c)
        if v not in (None, ""):
            return v
    return None

def _opt_str(v) -> Optional[str]:
    if v is None:
        return None
    s = str(v)
    return s if s.strip() else None

def _flag(v) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in ("true", "1", "yes")
    return bool(v)

def parse_incident(d: dict) -> Incident:
    rid = _pick(d, "_id", "id")
    media = d.get("media_urls")
    return Incident(
        id=str(rid) if rid is not None else None,
        type="" if d.get("type") is None else str(d.get("type")),
        description="" if d.get("description") is None else str(d.get("description")),
        severity=d.get("severity"),
        lat=_pick(d, "lat", "f_lat", "latitude"),
        lng=_pick(d, "lng", "f_lng", "lon", "longitude"),
        consent_public_map=_flag(d.get("consent_public_map")),
        media_urls=[str(u) for u in media if u] if isinstance(media, list) else [],
        city=_opt_str(d.get("city")),
        area=_opt_str(d.get("area")),
        landmark=_opt_str(d.get("landmark")),
        status=_opt_str(d.get("status")),
    )

def parse_incident_list(rows: List[Any]) -> List[Incident]:
    items: List[Incident] = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            logging.warning(f"[incidents] row {i} is {type(row).__name__}, skipped")
            continue
        items.append(parse_incident(row))
    return items
