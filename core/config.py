# core/config.py
import os
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(filename=".env", usecwd=True), override=False)

from .endpoints import ENDPOINTS  # noqa: E402

# Timeouts
DEFAULT_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "6.0"))
GEOCODE_TIMEOUT = float(os.getenv("GEOCODE_TIMEOUT", "6.0"))
USER_AGENT = os.getenv("HTTP_USER_AGENT", "safecity-bff/1.0")

# One retry per page load, no backoff
FETCH_RETRIES = 1

# Logging / web
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", "8000"))

# List views
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
TYPE_FILTER_ALL = "All"

# Map view
MAP_DEFAULT_CENTER = (22.7683838, 86.2558816)
MAP_DEFAULT_LABEL = "Default Center: Ram Mandir"
MAP_DEFAULT_ZOOM = 13

# URLs are kept in endpoints.py
INCIDENTS_URL = ENDPOINTS["incidents"]
REPORTS_URL = ENDPOINTS["reports"]
SUBMIT_URL = ENDPOINTS["submit"]
LOGIN_URL = ENDPOINTS["login"]
SIGNUP_URL = ENDPOINTS["signup"]
NOMINATIM_URL = ENDPOINTS["nominatim"]
