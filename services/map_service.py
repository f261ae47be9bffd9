# services/map_service.py
from core.config import MAP_DEFAULT_CENTER, MAP_DEFAULT_LABEL, MAP_DEFAULT_ZOOM
from models.incidents import IncidentFeed, MapCenter, MapMarker, MapView
from parsers.geo_normalizer import normalize_all
from services.dashboard_service import type_color

def default_center() -> MapCenter:
    lat, lng = MAP_DEFAULT_CENTER
    return MapCenter(lat=lat, lng=lng, zoom=MAP_DEFAULT_ZOOM, label=MAP_DEFAULT_LABEL)

def build_map(feed: IncidentFeed) -> MapView:
    """Default center plus one marker per record with usable coordinates."""
    valid = normalize_all(feed.incidents)
    markers = [
        MapMarker(
            id=it.id, lat=it.lat, lng=it.lng, type=it.type, severity=it.severity,
            description=it.description, city=it.city, area=it.area,
            landmark=it.landmark, color=type_color(it.type),
        )
        for it in valid
    ]
    return MapView(
        center=default_center(),
        markers=markers,
        skipped=len(feed.incidents) - len(valid),
        error=feed.error,
    )
