# models/incidents.py
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field

class SeverityBucket(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"

class Incident(BaseModel):
    id: Optional[str] = None                 # "_id" on /incidents, "id" on /reports
    type: str = ""                           # free text: hazard / theft / ...
    description: str = ""
    severity: Any = None                      # 1..4, "low".."critical", or junk
    lat: Any = None                           # number, numeric string, or missing
    lng: Any = None
    consent_public_map: bool = False
    media_urls: List[str] = Field(default_factory=list)
    city: Optional[str] = None
    area: Optional[str] = None
    landmark: Optional[str] = None
    status: Optional[str] = None              # /reports only (pending / verified)

# ---------- dashboard ----------

class TypeCount(BaseModel):
    type: str
    count: int
    color: str

class SeveritySlice(BaseModel):
    label: SeverityBucket
    count: int
    color: str

class DashboardStats(BaseModel):
    type_counts: List[TypeCount]
    severity_buckets: List[SeveritySlice]
    distinct_types: List[str]

class IncidentCard(BaseModel):
    id: Optional[str] = None
    type: str
    description: str
    severity_label: str                       # "Severity High"
    severity_class: str                       # "severity-card-high" or ""
    location: str                             # "<area>, <city>"
    landmark: str

class Page(BaseModel):
    items: List[Any]
    page: int
    page_size: int
    total: int
    pages: int

# ---------- feeds ----------

class IncidentFeed(BaseModel):
    incidents: List[Incident] = Field(default_factory=list)
    error: Optional[str] = None               # banner text once the retry is spent
    detail: Optional[str] = None              # last failure cause
    attempts: int = 0

# ---------- map ----------

class MapMarker(BaseModel):
    id: Optional[str] = None
    lat: float
    lng: float
    type: str
    severity: Any = None
    description: str = ""
    city: Optional[str] = None
    area: Optional[str] = None
    landmark: Optional[str] = None
    color: str

class MapCenter(BaseModel):
    lat: float
    lng: float
    zoom: int
    label: str

class MapView(BaseModel):
    center: MapCenter
    markers: List[MapMarker]
    skipped: int                              # records without usable coordinates
    error: Optional[str] = None

# ---------- report list ----------

class ReportRow(BaseModel):
    type: str
    description: str
    severity: Any = None
    severity_class: str                       # "high", "medium" or "low"
    status: str
    location: str                             # "lat, lng" or "No location"
