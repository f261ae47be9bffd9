# core/http_client.py
from typing import Any, Dict, Optional

import requests
from urllib3.util.retry import Retry
from requests.adapters import HTTPAdapter
from .config import DEFAULT_TIMEOUT, USER_AGENT

_session = None

def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        # transport retries off: the feed services do their own single retry
        retries = Retry(
            total=None, connect=0, read=0, status=0, other=0,
            redirect=5, raise_on_status=False,
        )
        _session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
        _session.mount("http://", HTTPAdapter(max_retries=retries))
        _session.mount("https://", HTTPAdapter(max_retries=retries))
    return _session

def http_get(url: str, params: Optional[Dict[str, Any]] = None,
             timeout: float = DEFAULT_TIMEOUT) -> requests.Response:
    return get_session().get(url, params=params, timeout=timeout)

def http_post(url: str, payload: Dict[str, Any],
              timeout: float = DEFAULT_TIMEOUT) -> requests.Response:
    return get_session().post(url, json=payload, timeout=timeout)

def is_2xx(r: requests.Response) -> bool:
    """Success means 2xx; requests' `ok` also lets 3xx through."""
    return 200 <= r.status_code < 300
