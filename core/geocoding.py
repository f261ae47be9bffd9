# core/geocoding.py
import logging
from typing import Optional, Tuple

import requests

from .config import GEOCODE_TIMEOUT, NOMINATIM_URL
from .http_client import http_get, is_2xx

def build_query(city: str, area: str) -> str:
    """The report form looks up "<city> <area>", whichever field just changed."""
    return f"{(city or '').strip()} {(area or '').strip()}".strip()

def geocode(place: str) -> Optional[Tuple[str, str, str]]:
    """
    Nominatim forward lookup. Returns (lat, lon, display_name) of the first
    hit, as the raw strings Nominatim sends, or None.
    Failures are logged only; the form simply keeps blank coordinates.
    """
    if not place:
        return None
    try:
        r = http_get(NOMINATIM_URL,
                     params={"format": "json", "q": place, "limit": 1},
                     timeout=GEOCODE_TIMEOUT)
        if not is_2xx(r):
            raise requests.HTTPError(f"HTTP {r.status_code}")
        arr = r.json()
    except (requests.RequestException, ValueError) as e:
        logging.warning(f"[geocode] lookup failed q={place!r}: {type(e).__name__}: {e}")
        return None

    if not isinstance(arr, list) or not arr:
        logging.info(f"[geocode] no result q={place!r}")
        return None
    it = arr[0]
    if not isinstance(it, dict):
        logging.info(f"[geocode] first result is not an object q={place!r}")
        return None
    lat, lon = it.get("lat"), it.get("lon")
    if lat in (None, "") or lon in (None, ""):
        logging.info(f"[geocode] first result has no coordinates q={place!r}")
        return None
    return str(lat), str(lon), it.get("display_name") or place
