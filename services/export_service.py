# services/export_service.py
import csv
import io
from typing import Any, Iterable

from models.incidents import Incident

EXPORT_COLUMNS = [
    "_id", "type", "description", "severity", "lat", "lng",
    "consent_public_map", "city", "area", "landmark",
]

def _cell(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)

def _row(it: Incident) -> list:
    return [_cell(v) for v in (
        it.id, it.type, it.description, it.severity, it.lat, it.lng,
        it.consent_public_map, it.city, it.area, it.landmark,
    )]

def incidents_to_csv(items: Iterable[Incident]) -> str:
    """
    Whole feed, fixed column order. A value with a comma, quote or newline
    is quoted and its quotes doubled (csv.QUOTE_MINIMAL).
    """
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    w.writerow(EXPORT_COLUMNS)
    for it in items:
        w.writerow(_row(it))
    return buf.getvalue()
