# core/endpoints.py
import os

API_BASE = os.getenv("SAFECITY_API_URL", "http://localhost:5000").rstrip("/")

ENDPOINTS = {
    # =========================
    # SafeCity backend
    # =========================

    # dashboard feed: { "incidents": [...] }
    "incidents": f"{API_BASE}/incidents",

    # map / report list feed: [...] or { "error": "..." }
    "reports": f"{API_BASE}/reports",

    # report submission (POST, same path as the dashboard feed)
    "submit": f"{API_BASE}/incidents",

    "login":  f"{API_BASE}/login",
    "signup": f"{API_BASE}/signup",

    # =========================
    # Third party
    # =========================

    # forward geocoding for the report form (city + area -> lat/lon)
    "nominatim": "https://nominatim.openstreetmap.org/search",
}
