# services/dashboard_service.py
# Dashboard: chart aggregates, type filter, pagination, report cards
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

from core.config import DEFAULT_PAGE_SIZE, TYPE_FILTER_ALL
from models.incidents import (
    DashboardStats, Incident, IncidentCard, IncidentFeed, Page,
    SeverityBucket, SeveritySlice, TypeCount,
)
from parsers.incidents_parser import normalize_severity
from texts import ui_en as T

SEVERITY_ORDER = (
    SeverityBucket.LOW, SeverityBucket.MODERATE,
    SeverityBucket.HIGH, SeverityBucket.CRITICAL,
)

SEVERITY_COLORS: Dict[SeverityBucket, str] = {
    SeverityBucket.LOW: "#4caf50",
    SeverityBucket.MODERATE: "#ffeb3b",
    SeverityBucket.HIGH: "#fb8c00",
    SeverityBucket.CRITICAL: "#e53935",
}

# keyed by lower-cased type; cosmetic only
TYPE_COLORS: Dict[str, str] = {
    "hazard": "orange",
    "theft": "red",
    "unsafe area": "purple",
    "emergency": "blue",
    "harassment": "pink",
}
DEFAULT_TYPE_COLOR = "cyan"

def type_color(itype: str) -> str:
    return TYPE_COLORS.get((itype or "").lower(), DEFAULT_TYPE_COLOR)

# -----------------------------
# Aggregation
# -----------------------------
def aggregate(items: Sequence[Incident]) -> DashboardStats:
    """
    One pass over the feed:
      - type counts, first-seen order, case-sensitive keys
      - the four severity buckets in fixed order (unrecognised severities count nowhere)
      - distinct types for the filter dropdown, first-seen order
    """
    by_type: Counter = Counter()
    by_bucket: Counter = Counter()
    for it in items:
        by_type[it.type] += 1
        bucket = normalize_severity(it.severity)
        if bucket is not None:
            by_bucket[bucket] += 1

    return DashboardStats(
        type_counts=[TypeCount(type=t, count=n, color=type_color(t)) for t, n in by_type.items()],
        severity_buckets=[
            SeveritySlice(label=b, count=by_bucket.get(b, 0), color=SEVERITY_COLORS[b])
            for b in SEVERITY_ORDER
        ],
        distinct_types=list(by_type.keys()),
    )

# -----------------------------
# Filter / paginate
# -----------------------------
def filter_by_type(items: Sequence[Incident], selected: Optional[str] = TYPE_FILTER_ALL) -> List[Incident]:
    if not selected or selected == TYPE_FILTER_ALL:
        return list(items)
    return [x for x in items if x.type == selected]

def paginate(items: Sequence, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    page = max(1, int(page))
    page_size = max(1, int(page_size))
    total = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=total,
        pages=math.ceil(total / page_size) if total else 0,
    )

# -----------------------------
# Report cards
# -----------------------------
def severity_class(value) -> str:
    bucket = normalize_severity(value)
    return f"severity-card-{bucket.value.lower()}" if bucket is not None else ""

def severity_label(value) -> str:
    s = "" if value is None else str(value)
    return f"Severity {s[:1].upper()}{s[1:]}"

def to_card(it: Incident) -> IncidentCard:
    return IncidentCard(
        id=it.id,
        type=it.type,
        description=it.description,
        severity_label=severity_label(it.severity),
        severity_class=severity_class(it.severity),
        location=f"{it.area or 'Unknown'}, {it.city or 'Unknown'}",
        landmark=it.landmark or "None",
    )

def build_dashboard(feed: IncidentFeed, selected: Optional[str] = TYPE_FILTER_ALL,
                    page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> dict:
    """View model for the dashboard page. Stats always cover the full feed."""
    if feed.error:
        return {"error": feed.error, "stats": None, "filter": None, "cards": None,
                "empty": True, "empty_text": None}

    stats = aggregate(feed.incidents)
    selected = selected or TYPE_FILTER_ALL
    hits = filter_by_type(feed.incidents, selected)
    pg = paginate(hits, page, page_size)
    pg.items = [to_card(x) for x in pg.items]
    return {
        "error": None,
        "stats": stats,
        "filter": {"selected": selected, "options": [TYPE_FILTER_ALL] + stats.distinct_types},
        "cards": pg,
        "empty": pg.total == 0,
        "empty_text": [T.EMPTY_CARDS, T.EMPTY_CARDS_HINT] if pg.total == 0 else None,
    }
