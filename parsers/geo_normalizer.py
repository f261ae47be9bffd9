# parsers/geo_normalizer.py
"""
Coordinate validation for map output.

A record is placeable only when both axes parse to finite numbers and sit
inside lat [-90, 90] / lng [-180, 180]. Rejected records are left out of
geographic views only; aggregates and list views still see them.
"""
from typing import Any, Iterable, List, Optional, Tuple

from models.incidents import Incident
from parsers.incidents_parser import safe_float

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)

def parse_axis(value: Any, bounds: Tuple[float, float]) -> Optional[float]:
    v = safe_float(value)
    if v is None:
        return None                     # parse failure
    lo, hi = bounds
    if v < lo or v > hi:
        return None                     # range failure
    return v

def parse_coordinates(lat: Any, lng: Any) -> Optional[Tuple[float, float]]:
    """Both axes or nothing."""
    flat = parse_axis(lat, LAT_RANGE)
    flng = parse_axis(lng, LNG_RANGE)
    if flat is None or flng is None:
        return None
    return flat, flng

def normalize_coords(it: Incident) -> Optional[Incident]:
    """Copy of the record with numeric lat/lng, or None when it can't go on a map."""
    pair = parse_coordinates(it.lat, it.lng)
    if pair is None:
        return None
    return it.model_copy(update={"lat": pair[0], "lng": pair[1]})

def normalize_all(items: Iterable[Incident]) -> List[Incident]:
    """Stable filter: valid records in input order, coordinates replaced."""
    out: List[Incident] = []
    for it in items:
        ok = normalize_coords(it)
        if ok is not None:
            out.append(ok)
    return out
